"""typeracer - fixed-timestep core of a typing arcade game."""

from typeracer.clock import Clock
from typeracer.commands import Backspace, CommandQueue, Purchase, TypeChar
from typeracer.components import GameState, Word
from typeracer.config import GameConfig
from typeracer.economy import EXTRA_LIFE, POWER_UPS, REMOVE_WORDS, SLOW_SPAWN, PowerUpDef
from typeracer.engine import Engine
from typeracer.game import Game, GameView, WordView, ending_message
from typeracer.signals import SignalBus
from typeracer.types import (
    ConfigError,
    InvariantError,
    SnapshotError,
    TickContext,
    WordListError,
)
from typeracer.words import load_words, parse_words

__all__ = [
    "Engine",
    "Game",
    "GameView",
    "WordView",
    "GameConfig",
    "GameState",
    "Word",
    "Clock",
    "TickContext",
    "CommandQueue",
    "TypeChar",
    "Backspace",
    "Purchase",
    "SignalBus",
    "PowerUpDef",
    "POWER_UPS",
    "EXTRA_LIFE",
    "REMOVE_WORDS",
    "SLOW_SPAWN",
    "ending_message",
    "load_words",
    "parse_words",
    "WordListError",
    "ConfigError",
    "InvariantError",
    "SnapshotError",
]
