# src/ticker_task/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TickerTask depends on Protocols instead of a concrete host scheduler.
This keeps the tick source swappable and lets tests drive ticks deterministically.
"""

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .errors import WorkExecutionError

TickHandler = Callable[[], None]
# Called by the tick source once per delivered tick.


class Registration(Protocol):
    """Live subscription to tick delivery. cancel() must be idempotent."""
    def cancel(self) -> None: ...


class TickSource(Protocol):
    """
    Host-side scheduler port.

    register() schedules `handler` once after `delay` ticks, then every `interval` ticks.
    An interval of -1 means a single delivery after the delay.
    """

    def register(self, delay: int, interval: int, handler: TickHandler) -> Registration: ...


@runtime_checkable
class Pausable(Protocol):
    def is_paused(self) -> bool: ...
    def pause(self) -> bool: ...
    def resume(self) -> bool: ...


class FailureReporter(Protocol):
    """Receives work failures caught at the tick handler boundary."""
    def report(self, error: WorkExecutionError) -> None: ...
