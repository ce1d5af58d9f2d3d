"""Game - wires the engine, systems, input queue, and signals together."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from typeracer import keymap
from typeracer.commands import (
    Backspace,
    Purchase,
    TypeChar,
    make_command_queue,
    make_command_system,
)
from typeracer.components import GameState
from typeracer.config import GameConfig
from typeracer.economy import PowerUpDef, affordable
from typeracer.engine import Engine
from typeracer.signals import SignalBus, make_signal_system
from typeracer.spawner import make_spawn_system
from typeracer.systems import (
    make_boundary_system,
    make_invariant_system,
    make_match_system,
    make_movement_system,
    make_prune_system,
)
from typeracer.types import WordListError

logger = logging.getLogger(__name__)

# (lowest words_typed for the tier, message), highest tier first
ENDINGS: list[tuple[int, str]] = [
    (50, "You're a madman, niiice :)"),
    (20, "Amazing, but can you do better?"),
    (5, "Not very bad!"),
    (0, "Bummer, I know you can do better :) Try again!"),
]


def ending_message(words_typed: int) -> str:
    for threshold, message in ENDINGS:
        if words_typed >= threshold:
            return message
    return ENDINGS[-1][1]


@dataclass(frozen=True)
class WordView:
    text: str
    x: float
    y: float
    color_changing: bool


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot of everything a renderer needs for one frame."""

    words: tuple[WordView, ...]
    currency: int
    lives: int
    input_buffer: str
    words_typed: int
    game_over: bool
    practice: bool
    affordable: tuple[PowerUpDef, ...]
    tick_number: int

    @property
    def ending(self) -> str:
        return ending_message(self.words_typed)


class Game:
    """One play session plus everything needed to start the next one.

    Key presses go through ``press()``; typing and purchases are queued and
    applied at the start of the next tick. UI-only actions (volume, info
    panel, quit, restart) are returned to the caller to handle.
    """

    def __init__(
        self,
        words: Sequence[str],
        config: GameConfig | None = None,
        seed: int | None = None,
        practice: bool = False,
        bus: SignalBus | None = None,
    ) -> None:
        if not words:
            raise WordListError("word list is empty")
        self.words = list(words)
        self.config = config if config is not None else GameConfig()
        self.practice = practice
        self.bus = bus if bus is not None else SignalBus()
        self.games_played = 0
        self._build(seed)

    def _build(self, seed: int | None) -> None:
        state = GameState(
            lives=self.config.starting_lives,
            spawn_timer=self.config.initial_spawn_delay,
            practice=self.practice,
        )
        self.engine = Engine(tps=self.config.tps, seed=seed, state=state)
        self.bus.clear()
        self.queue = make_command_queue(self.bus)

        # Order matters: input, spawn, move, match, boundary, prune, signals.
        self.engine.add_system(make_command_system(self.queue))
        self.engine.add_system(make_spawn_system(self.words, self.config, self.bus))
        self.engine.add_system(make_movement_system())
        self.engine.add_system(make_match_system(self.config, self.bus))
        self.engine.add_system(make_boundary_system(self.config, self.bus))
        self.engine.add_system(make_prune_system())
        self.engine.add_system(make_invariant_system())
        self.engine.add_system(make_signal_system(self.bus))
        self.games_played += 1
        logger.info(
            "game %d started (seed=%d, practice=%s)",
            self.games_played, self.engine.seed, self.practice,
        )

    @property
    def state(self) -> GameState:
        return self.engine.state

    def restart(self, seed: int | None = None) -> None:
        """Throw the current game away and start a fresh one."""
        self._build(seed)

    def type_char(self, char: str) -> None:
        self.queue.enqueue(TypeChar(char))

    def backspace(self) -> None:
        self.queue.enqueue(Backspace())

    def buy(self, power_up: str) -> None:
        self.queue.enqueue(Purchase(power_up))

    def press(self, key_name: str, shift: bool = False) -> keymap.KeyAction | None:
        """Handle one key press. Returns the action for the caller to see.

        Typing and purchases are queued here; everything else is left to
        the caller.
        """
        action = keymap.translate(key_name, shift)
        if action is None:
            return None
        if action.kind == keymap.APPEND:
            self.type_char(action.value)
        elif action.kind == keymap.BACKSPACE:
            self.backspace()
        elif action.kind == keymap.PURCHASE:
            self.buy(action.value)
        return action

    def step(self) -> bool:
        return self.engine.step()

    def advance(self, elapsed: float) -> int:
        return self.engine.advance(elapsed)

    def view(self) -> GameView:
        state = self.engine.state
        return GameView(
            words=tuple(
                WordView(w.text, w.x, w.y, w.color_changing) for w in state.words
            ),
            currency=state.currency,
            lives=state.lives,
            input_buffer=state.input_buffer,
            words_typed=state.words_typed,
            game_over=state.game_over,
            practice=state.practice,
            affordable=tuple(affordable(state)),
            tick_number=self.engine.clock.tick_number,
        )
