"""Game signals, delivered once at the end of every tick.

Systems publish what happened during a tick; the front end listens (the
audio cue hangs off ``word_typed``). Each signal carries a fixed set of
fields, listed in ``SIGNAL_FIELDS``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from typeracer.components import GameState
    from typeracer.types import TickContext

SPAWNED = "spawned"
WORD_TYPED = "word_typed"
LIFE_LOST = "life_lost"
GAME_OVER = "game_over"
PURCHASE = "purchase"

SIGNAL_FIELDS: dict[str, frozenset[str]] = {
    SPAWNED: frozenset({"text"}),
    WORD_TYPED: frozenset({"text", "reward"}),
    LIFE_LOST: frozenset({"text", "lives"}),
    GAME_OVER: frozenset({"words_typed"}),
    PURCHASE: frozenset({"power_up", "cost"}),
}

Listener = Callable[[str, dict[str, Any]], None]


def _check_signal(signal: str) -> None:
    if signal not in SIGNAL_FIELDS:
        raise KeyError(f"Unknown signal {signal!r}")


class SignalBus:
    """Collects game signals during a tick and hands them to listeners on
    ``flush()``, in publish order.

    Listeners are called as ``listener(signal, fields)``.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {name: [] for name in SIGNAL_FIELDS}
        self._outbox: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal: str, listener: Listener) -> None:
        _check_signal(signal)
        self._listeners[signal].append(listener)

    def unsubscribe(self, signal: str, listener: Listener) -> None:
        _check_signal(signal)
        if listener in self._listeners[signal]:
            self._listeners[signal].remove(listener)

    def publish(self, signal: str, **fields: Any) -> None:
        """Queue *signal* for the next flush.

        Raises ``KeyError`` for an unknown signal and ``ValueError`` when
        the fields do not match ``SIGNAL_FIELDS``.
        """
        _check_signal(signal)
        expected = SIGNAL_FIELDS[signal]
        if fields.keys() != expected:
            raise ValueError(
                f"{signal} expects fields {sorted(expected)}, got {sorted(fields)}"
            )
        self._outbox.append((signal, fields))

    def pending(self) -> int:
        return len(self._outbox)

    def flush(self) -> None:
        # Signals published by listeners wait for the next flush.
        delivered, self._outbox = self._outbox, []
        for signal, fields in delivered:
            for listener in self._listeners[signal]:
                listener(signal, fields)

    def clear(self) -> None:
        self._outbox.clear()


def make_signal_system(bus: SignalBus) -> Callable[[GameState, TickContext], None]:
    def signal_system(state: GameState, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
