"""Currency bookkeeping and the three purchasable power-ups."""
from __future__ import annotations

import logging
import random as _random_mod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from typeracer.types import InvariantError

if TYPE_CHECKING:
    from typeracer.components import GameState

logger = logging.getLogger(__name__)

EXTRA_LIFE = "extra_life"
REMOVE_WORDS = "remove_words"
SLOW_SPAWN = "slow_spawn"

REMOVE_WORDS_COUNT = 2


@dataclass(frozen=True)
class PowerUpDef:
    """Immutable power-up definition.

    Attributes:
        name: Unique identifier, also used in Purchase commands.
        cost: Currency deducted on a successful purchase.
        label: Short text shown on the HUD.
        key: Key the player presses to buy it.
    """

    name: str
    cost: int
    label: str
    key: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("PowerUpDef name must be non-empty")
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")


POWER_UPS: dict[str, PowerUpDef] = {
    EXTRA_LIFE: PowerUpDef(EXTRA_LIFE, 300, "extra life", "1"),
    REMOVE_WORDS: PowerUpDef(
        REMOVE_WORDS, 350, f"Remove {REMOVE_WORDS_COUNT} words", "2"
    ),
    SLOW_SPAWN: PowerUpDef(SLOW_SPAWN, 1000, "Slow spawn", "3"),
}


def earn(state: GameState, amount: int) -> None:
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    state.currency += amount


def spend(state: GameState, amount: int) -> None:
    """Deduct *amount*. Callers check affordability first."""
    if amount > state.currency:
        raise InvariantError(
            f"spending {amount} with only {state.currency} would go negative"
        )
    state.currency -= amount


def can_afford(state: GameState, name: str) -> bool:
    return state.currency >= POWER_UPS[name].cost


def affordable(state: GameState) -> list[PowerUpDef]:
    """Power-ups the player can buy right now, in definition order."""
    return [p for p in POWER_UPS.values() if state.currency >= p.cost]


# -- Effects. Each returns False when it would do nothing (no charge). --

def _extra_life(state: GameState, rng: _random_mod.Random) -> bool:
    state.lives += 1
    return True


def _remove_words(state: GameState, rng: _random_mod.Random) -> bool:
    active = state.active_words()
    if not active:
        return False
    if len(active) <= REMOVE_WORDS_COUNT:
        chosen = active
    else:
        chosen = rng.sample(active, REMOVE_WORDS_COUNT)
    for word in chosen:
        word.consumed = True
    return True


def _slow_spawn(state: GameState, rng: _random_mod.Random) -> bool:
    state.difficulty_ramp /= 2.0
    return True


_EFFECTS: dict[str, Callable[[GameState, _random_mod.Random], bool]] = {
    EXTRA_LIFE: _extra_life,
    REMOVE_WORDS: _remove_words,
    SLOW_SPAWN: _slow_spawn,
}


def purchase(name: str, state: GameState, rng: _random_mod.Random) -> bool:
    """Attempt to buy power-up *name*. Returns True if it was applied.

    Insufficient currency and effects with nothing to act on are refused
    without touching the state. Raises KeyError for an unknown name.
    """
    defn = POWER_UPS[name]
    if state.game_over:
        return False
    if state.currency < defn.cost:
        logger.debug("refused %s: have %d, need %d", name, state.currency, defn.cost)
        return False
    if not _EFFECTS[name](state, rng):
        logger.debug("refused %s: nothing to apply it to", name)
        return False
    spend(state, defn.cost)
    logger.info("bought %s for %d, %d left", name, defn.cost, state.currency)
    return True
