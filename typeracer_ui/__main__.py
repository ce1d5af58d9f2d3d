from typeracer_ui.main import main

main()
