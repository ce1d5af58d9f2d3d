"""Word spawning with a spawn interval that shrinks as the game goes on."""
from __future__ import annotations

import logging
import random as _random_mod
from typing import TYPE_CHECKING, Callable, Sequence

from typeracer.components import Word
from typeracer.signals import SPAWNED, SignalBus
from typeracer.types import WordListError

if TYPE_CHECKING:
    from typeracer.components import GameState
    from typeracer.config import GameConfig
    from typeracer.types import TickContext

logger = logging.getLogger(__name__)


def spawn_interval_bounds(config: GameConfig, ramp: float) -> tuple[float, float]:
    """Sampling range for the next spawn delay at difficulty *ramp*.

    Both bounds are floored at ``config.min_spawn_interval`` so the range
    stays positive and ordered however large the ramp grows.
    """
    lo, hi = config.spawn_interval
    floor = config.min_spawn_interval
    return (max(lo - ramp, floor), max(hi - ramp, floor))


def spawn_word(
    words: Sequence[str], config: GameConfig, rng: _random_mod.Random
) -> Word:
    """Create a Word at the left edge with random text, height, and speed."""
    y_lo, y_hi = config.spawn_y_range
    speed_lo, speed_hi = config.speed_range
    return Word(
        text=words[rng.randrange(len(words))],
        x=0.0,
        y=rng.uniform(y_lo, y_hi),
        speed=rng.uniform(speed_lo, speed_hi),
        color_changing=rng.random() < config.color_changing_chance,
    )


def make_spawn_system(
    words: Sequence[str],
    config: GameConfig,
    bus: SignalBus | None = None,
) -> Callable[[GameState, TickContext], None]:
    """Return a system that counts down spawn_timer and spawns one word at zero.

    Raises WordListError if *words* is empty.
    """
    if not words:
        raise WordListError("cannot spawn from an empty word list")
    pool = list(words)

    def spawn_system(state: GameState, ctx: TickContext) -> None:
        state.spawn_timer -= ctx.dt
        if state.spawn_timer > 0:
            return
        word = spawn_word(pool, config, ctx.random)
        state.words.append(word)
        lo, hi = spawn_interval_bounds(config, state.difficulty_ramp)
        state.spawn_timer = ctx.random.uniform(lo, hi)
        state.difficulty_ramp += config.ramp_step
        logger.debug(
            "tick %d: spawned %r at y=%.1f speed=%.1f, next in %.2fs",
            ctx.tick_number, word.text, word.y, word.speed, state.spawn_timer,
        )
        if bus is not None:
            bus.publish(SPAWNED, text=word.text)

    return spawn_system
