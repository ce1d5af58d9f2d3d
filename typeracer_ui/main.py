"""Type Racer - type the words before they cross the screen.

Controls:
  a-z, A-Z  Type (hold Shift for capitals)
  -         Type a hyphen
  Backspace Delete the last character
  1 / 2 / 3 Buy extra life / remove words / slow spawn (keypad too)
  + / =     Volume up
  Keypad -  Volume down
  `         Toggle info panel
  Enter     Play again after game over
  Esc       Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

import pygame

from typeracer import ConfigError, Game, GameConfig, WordListError, keymap, load_words
from typeracer_ui.audio import AudioPlayer
from typeracer_ui.constants import DEFAULT_WORDS, FPS, SCREEN_H, SCREEN_W, WINDOW_TITLE
from typeracer_ui.hud import Fonts, draw_frame

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Type Racer - typing arcade game")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--words", type=str, default=str(DEFAULT_WORDS),
                   metavar="FILE", help="Word list, one word per line")
    p.add_argument("--practice", action="store_true",
                   help="Missed words cost no lives; outlines words")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Window width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Window height (default: {SCREEN_H})")
    p.add_argument("--mute", action="store_true", help="Do not open the audio device")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p.parse_args(argv)


@dataclass
class UiState:
    show_info: bool = False


def handle_action(
    action: keymap.KeyAction, game: Game, audio: AudioPlayer, ui: UiState
) -> bool:
    """Apply UI-side effects of a key action. Returns False to quit."""
    if action.kind == keymap.QUIT:
        return False
    if action.kind == keymap.VOLUME_UP:
        audio.volume_up()
    elif action.kind == keymap.VOLUME_DOWN:
        audio.volume_down()
    elif action.kind == keymap.TOGGLE_INFO:
        ui.show_info = not ui.show_info
    elif action.kind == keymap.RESTART and game.state.game_over:
        game.restart()
    return True


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        words = load_words(args.words)
    except WordListError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    try:
        config = GameConfig(screen_width=args.width, screen_height=args.height)
    except ConfigError as exc:
        logger.error("bad window size: %s", exc)
        sys.exit(1)
    game = Game(words, config=config, seed=args.seed, practice=args.practice)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    fonts = Fonts()

    audio = AudioPlayer(enabled=not args.mute)
    audio.attach(game.bus)

    ui = UiState()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                shift = bool(event.mod & pygame.KMOD_SHIFT)
                action = game.press(pygame.key.name(event.key), shift)
                if action is not None and not handle_action(action, game, audio, ui):
                    running = False

        # --- Tick ---
        game.advance(dt)

        # --- Render ---
        draw_frame(screen, fonts, game.view(), audio.volume, ui.show_info)
        pygame.display.flip()

    audio.close()
    pygame.quit()


if __name__ == "__main__":
    main()
