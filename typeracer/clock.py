"""Clock and TickContext for the fixed-timestep loop."""

import random

from typeracer.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._accumulator = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def accumulate(self, elapsed: float) -> int:
        """Bank *elapsed* seconds and return how many whole steps are due.

        The remainder stays banked for the next call, so no simulated time
        is dropped between polls.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed must be >= 0, got {elapsed}")
        self._accumulator += elapsed
        steps = int(self._accumulator // self._dt)
        self._accumulator -= steps * self._dt
        return steps

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            random=rng,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._accumulator = 0.0
