"""Per-tick systems: movement, input matching, boundary check, pruning."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from typeracer import economy
from typeracer.signals import GAME_OVER, LIFE_LOST, WORD_TYPED, SignalBus
from typeracer.types import InvariantError

if TYPE_CHECKING:
    from typeracer.components import GameState, Word
    from typeracer.config import GameConfig
    from typeracer.types import TickContext

logger = logging.getLogger(__name__)

_System = Callable[["GameState", "TickContext"], None]


def make_movement_system() -> _System:
    def movement_system(state: GameState, ctx: TickContext) -> None:
        for word in state.words:
            word.advance(ctx.dt)

    return movement_system


def reward_for(word: Word, config: GameConfig) -> int:
    if word.color_changing:
        return config.color_changing_reward
    return config.word_reward


def make_match_system(config: GameConfig, bus: SignalBus | None = None) -> _System:
    """Return a system that types at most one word per tick.

    The first unconsumed word (in spawn order) whose text equals the input
    buffer is consumed; the buffer is then cleared, so nothing else can
    match in the same tick.
    """

    def match_system(state: GameState, ctx: TickContext) -> None:
        if not state.input_buffer:
            return
        for word in state.words:
            if word.consumed or word.text != state.input_buffer:
                continue
            reward = reward_for(word, config)
            word.consumed = True
            state.words_typed += 1
            economy.earn(state, reward)
            state.input_buffer = ""
            logger.debug("tick %d: typed %r (+%d)", ctx.tick_number, word.text, reward)
            if bus is not None:
                bus.publish(WORD_TYPED, text=word.text, reward=reward)
            return

    return match_system


def lose_life(state: GameState) -> None:
    if state.lives <= 0:
        raise InvariantError("lives decremented below zero")
    state.lives -= 1


def make_boundary_system(config: GameConfig, bus: SignalBus | None = None) -> _System:
    """Return a system that consumes words past the right edge.

    Each crossing costs a life unless the game is in practice mode. The game
    ends when lives reach zero; words crossing in the same tick after that
    are still consumed but cost nothing further.
    """

    def boundary_system(state: GameState, ctx: TickContext) -> None:
        for word in state.words:
            if word.consumed or word.x < config.screen_width:
                continue
            word.consumed = True
            if state.practice or state.game_over:
                continue
            lose_life(state)
            logger.info("missed %r, %d lives left", word.text, state.lives)
            if bus is not None:
                bus.publish(LIFE_LOST, text=word.text, lives=state.lives)
            if state.lives == 0:
                state.game_over = True
                logger.info("game over after %d words", state.words_typed)
                if bus is not None:
                    bus.publish(GAME_OVER, words_typed=state.words_typed)

    return boundary_system


def make_prune_system() -> _System:
    def prune_system(state: GameState, ctx: TickContext) -> None:
        state.words = [w for w in state.words if not w.consumed]

    return prune_system


def make_invariant_system() -> _System:
    """Return a system that fails loudly if the economy went out of bounds."""

    def invariant_system(state: GameState, ctx: TickContext) -> None:
        if state.currency < 0:
            raise InvariantError(f"currency went negative: {state.currency}")
        if state.lives < 0:
            raise InvariantError(f"lives went negative: {state.lives}")
        if state.lives == 0 and not state.game_over:
            raise InvariantError("lives reached zero without ending the game")

    return invariant_system
