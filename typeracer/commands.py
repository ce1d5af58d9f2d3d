"""Player input commands and the queue that feeds them into the tick loop."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

from typeracer import economy
from typeracer.signals import PURCHASE, SignalBus

if TYPE_CHECKING:
    from typeracer.components import GameState
    from typeracer.types import TickContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeChar:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Purchase:
    power_up: str


Command = Union[TypeChar, Backspace, Purchase]
COMMAND_TYPES: tuple[type, ...] = (TypeChar, Backspace, Purchase)

# handler(cmd, state, ctx) -> accepted
CommandHandler = Callable[[Command, "GameState", "TickContext"], bool]


class CommandQueue:
    """Holds key presses between ticks and applies them at the start of the
    next one, oldest first.

    Each command class gets one handler, which reports whether the command
    was accepted (a backspace on an empty buffer, or a purchase the player
    cannot afford, is not).
    """

    def __init__(self) -> None:
        self._handlers: dict[type, CommandHandler] = {}
        self._presses: deque[Command] = deque()

    def handle(self, cmd_type: type, handler: CommandHandler) -> None:
        """Register the handler for *cmd_type*. A later call replaces it."""
        self._handlers[cmd_type] = handler

    def enqueue(self, cmd: Command) -> None:
        if not isinstance(cmd, COMMAND_TYPES):
            raise TypeError(f"Not a game command: {cmd!r}")
        self._presses.append(cmd)

    def pending(self) -> int:
        return len(self._presses)

    def clear(self) -> None:
        self._presses.clear()

    def drain(
        self, state: GameState, ctx: TickContext
    ) -> list[tuple[Command, bool]]:
        """Apply every queued command to *state*.

        Returns ``[(cmd, accepted), ...]``. Raises ``TypeError`` if a
        command's class has no handler.
        """
        results: list[tuple[Command, bool]] = []
        while self._presses:
            cmd = self._presses.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(
                    f"No handler registered for {type(cmd).__qualname__}"
                )
            results.append((cmd, handler(cmd, state, ctx)))
        return results


def handle_type_char(cmd: TypeChar, state: GameState, ctx: TickContext) -> bool:
    state.input_buffer += cmd.char
    return True


def handle_backspace(cmd: Backspace, state: GameState, ctx: TickContext) -> bool:
    if not state.input_buffer:
        return False
    state.input_buffer = state.input_buffer[:-1]
    return True


def make_purchase_handler(bus: SignalBus):
    """Return a Purchase handler that announces successful buys on *bus*."""

    def handle_purchase(cmd: Purchase, state: GameState, ctx: TickContext) -> bool:
        if not economy.purchase(cmd.power_up, state, ctx.random):
            return False
        bus.publish(
            PURCHASE,
            power_up=cmd.power_up,
            cost=economy.POWER_UPS[cmd.power_up].cost,
        )
        return True

    return handle_purchase


def make_command_queue(bus: SignalBus) -> CommandQueue:
    """A queue with the standard typing and purchase handlers registered."""
    queue = CommandQueue()
    queue.handle(TypeChar, handle_type_char)
    queue.handle(Backspace, handle_backspace)
    queue.handle(Purchase, make_purchase_handler(bus))
    return queue


def make_command_system(queue: CommandQueue) -> Callable[[GameState, TickContext], None]:
    """Return a system that drains *queue* at the start of a tick."""

    def command_system(state: GameState, ctx: TickContext) -> None:
        for cmd, accepted in queue.drain(state, ctx):
            if not accepted:
                logger.debug("tick %d: %r rejected", ctx.tick_number, cmd)

    return command_system
