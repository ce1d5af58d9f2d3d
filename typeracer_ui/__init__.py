"""typeracer_ui - pygame front end for the typeracer core."""
