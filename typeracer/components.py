"""Word entity and the per-game state container."""
from __future__ import annotations

from dataclasses import dataclass, field

RUNNING = "running"
GAME_OVER = "game_over"


@dataclass
class Word:
    """One word sliding across the screen.

    ``text`` is set once at spawn; assigning it again raises
    ``AttributeError``.
    """

    text: str
    x: float
    y: float
    speed: float
    color_changing: bool = False
    consumed: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if name == "text" and "text" in self.__dict__:
            raise AttributeError("Word.text cannot change after spawn")
        super().__setattr__(name, value)

    def advance(self, dt: float) -> None:
        self.x += self.speed * dt


@dataclass
class GameState:
    """Everything one game owns. Passed explicitly to every system.

    ``words`` keeps spawn order; systems iterate it front to back, which is
    what decides ties between active words sharing the same text.
    """

    lives: int = 5
    currency: int = 0
    words_typed: int = 0
    input_buffer: str = ""
    words: list[Word] = field(default_factory=list)
    spawn_timer: float = 3.0
    difficulty_ramp: float = 0.0
    game_over: bool = False
    practice: bool = False

    @property
    def phase(self) -> str:
        return GAME_OVER if self.game_over else RUNNING

    def active_words(self) -> list[Word]:
        return [w for w in self.words if not w.consumed]
