"""Engine - fixed-timestep loop over an explicitly owned GameState."""

import dataclasses
import os
import random
from typing import Any

from typeracer.clock import Clock
from typeracer.components import GameState, Word
from typeracer.types import SnapshotError, System

_SNAPSHOT_VERSION = 1


class Engine:
    """Runs ordered systems against one GameState with one seeded RNG.

    Once ``state.game_over`` is set, ticks are no-ops: the clock stops,
    no system runs, and no random numbers are drawn.
    """

    def __init__(
        self, tps: int = 60, seed: int | None = None, state: GameState | None = None
    ) -> None:
        self._clock = Clock(tps)
        self._state = state if state is not None else GameState()
        self._systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self._state, ctx)

    def step(self) -> bool:
        """Run one tick. Returns False without doing anything after game over."""
        if self._state.game_over:
            return False
        self._tick()
        return True

    def run(self, n: int) -> int:
        """Run up to *n* ticks, stopping early at game over. Returns ticks run."""
        ran = 0
        for _ in range(n):
            if not self.step():
                break
            ran += 1
        return ran

    def advance(self, elapsed: float) -> int:
        """Catch the simulation up with *elapsed* real seconds.

        Every whole fixed step that is due runs now; the remainder carries
        over to the next call. Returns the number of ticks actually run.
        """
        due = self._clock.accumulate(elapsed)
        return self.run(due)

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "tick_number": self._clock.tick_number,
            "tps": self._clock.tps,
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self._rng.getstate()),
            "state": dataclasses.asdict(self._state),
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )

        snap_tps = data.get("tps")
        if snap_tps != self._clock.tps:
            raise SnapshotError(
                f"TPS mismatch: snapshot has {snap_tps}, engine has {self._clock.tps}"
            )

        fields = dict(data["state"])
        words = [Word(**w) for w in fields.pop("words")]
        restored = GameState(words=words, **fields)

        self._clock.reset(data["tick_number"])
        self._seed = data["seed"]
        self._rng.setstate(_deserialize_rng_state(data["rng_state"]))
        # Update in place; callers keep references to the state object.
        for f in dataclasses.fields(GameState):
            setattr(self._state, f.name, getattr(restored, f.name))


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Convert Random.getstate() tuple to JSON-compatible list."""
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    """Convert JSON list back to Random.setstate() tuple."""
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
