"""Shared types, errors, and protocols for the type racer core."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random


class WordListError(Exception):
    """Raised when the word list is missing, unreadable, or empty."""


class ConfigError(ValueError):
    """Raised when a GameConfig holds values the simulation cannot run with."""


class InvariantError(AssertionError):
    """Raised when game state breaks an invariant the rules guarantee."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, tps mismatch)."""


if TYPE_CHECKING:
    from typeracer.components import GameState

System = Callable[["GameState", TickContext], None]
