# src/ticker_task/tasks/ticker_task.py

from __future__ import annotations

"""
Ticker task.

A unit of work driven by an injected tick source that:
- registers itself on start() and cancels the registration on stop(),
- can be paused/resumed without losing its registration,
- counts every delivered tick and every executed tick,
- reports (never propagates) failures raised by the work.

Actual tick delivery (cadence, threads, host loop) belongs to the tick source, not the task.
"""

import logging
import time
from typing import Any, Callable

from ..config import Settings
from ..core.errors import InvalidArgumentError, WorkExecutionError
from ..core.ports import FailureReporter, Registration, TickSource
from ..core.state import TaskState

logger = logging.getLogger(__name__)

ONE_SHOT = -1
# Interval sentinel: deliver exactly one tick after the initial delay.


class LoggingFailureReporter:
    """Default FailureReporter: logs the failure with its traceback."""

    def __init__(self, *, level: int = logging.ERROR, with_traceback: bool = True) -> None:
        self.level = level
        self.with_traceback = with_traceback

    @classmethod
    def from_settings(cls, settings: Settings) -> LoggingFailureReporter:
        if settings.report_failures:
            return cls()
        return cls(level=logging.DEBUG, with_traceback=False)

    def report(self, error: WorkExecutionError) -> None:
        task = error.task
        exc_info = (type(error.cause), error.cause, error.cause.__traceback__) if self.with_traceback else None
        logger.log(
            self.level,
            "Ticker task %r failed (executed=%s total=%s): %s",
            task,
            getattr(task, "executed_ticks", "?"),
            getattr(task, "total_ticks", "?"),
            error.cause,
            exc_info=exc_info,
        )


class TickerTask:
    """
    A task that runs over a set interval (in ticks) once started.

    The task can be stopped or started at any point, and paused or resumed while
    started. Transition methods never raise: they return False when the call
    has no effect (e.g. pause() on a stopped task).

    If no `work` callable is given, each executed tick calls run(), a no-op that
    subclasses may override. The task is itself callable, so it can be handed
    to anything expecting a unit of work.

    Ticks delivered while paused still count towards total_ticks. Counters are
    lifetime totals for the instance and are not reset by stop()/start().
    """

    def __init__(
            self,
            tick_source: TickSource,
            delay: int,
            interval: int = ONE_SHOT,
            work: Callable[[], Any] | None = None,
            *,
            reporter: FailureReporter | None = None,
            clock: Callable[[], float] = time.time,
            name: str | None = None,
    ) -> None:
        if tick_source is None:
            raise InvalidArgumentError("tick_source cannot be None.")
        if delay < 0:
            raise InvalidArgumentError(f"delay cannot be negative (got {delay}).")
        if work is not None and not callable(work):
            raise InvalidArgumentError(f"work must be callable (got {type(work).__name__}).")

        self._tick_source = tick_source
        self._delay = int(delay)
        self._interval = max(int(interval), ONE_SHOT)
        self._work = work
        self.reporter: FailureReporter = reporter if reporter is not None else LoggingFailureReporter()
        self._clock = clock
        self.name = name

        self._registration: Registration | None = None
        self._paused = True
        self._total_ticks = 0
        self._executed_ticks = 0
        self._last_executed_at: float | None = None

    @classmethod
    def once(
            cls,
            tick_source: TickSource,
            delay: int,
            work: Callable[[], Any] | None = None,
            **kwargs: Any,
    ) -> TickerTask:
        """Build a task that runs a single time, `delay` ticks after start()."""
        return cls(tick_source, delay, ONE_SHOT, work, **kwargs)

    def __repr__(self) -> str:
        label = self.name or type(self).__name__
        return f"<{label} delay={self._delay} interval={self._interval} state={self.state.value}>"

    def __call__(self) -> None:
        self.run()

    def run(self) -> None:
        """
        Unit of work used when no `work` callable was passed.

        Does nothing by default; override in a subclass.
        """

    # ------------------------------------------------------------------
    # Tick handling
    # ------------------------------------------------------------------

    def _on_tick(self) -> None:
        self._total_ticks += 1
        if self._paused:
            return

        self._executed_ticks += 1
        try:
            if self._work is None:
                self.run()
            else:
                self._work()
        except Exception as e:
            self._report(WorkExecutionError(self, e))

        self._last_executed_at = self._clock()

    def _report(self, error: WorkExecutionError) -> None:
        try:
            self.reporter.report(error)
        except Exception:
            logger.exception("Failure reporter raised while reporting for %r", self)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Start this task. If it is already started the call is ignored.

        Returns True if the task's state was changed to started.
        """
        if self.is_started():
            return False
        self._registration = self._tick_source.register(self._delay, self._interval, self._on_tick)
        self._paused = False
        logger.debug("Started %r", self)
        return True

    def stop(self) -> bool:
        """
        Stop this task, cancelling its registration. If it is already stopped the call is ignored.

        Returns True if the task's state was changed to stopped.
        """
        registration = self._registration
        if registration is None:
            return False
        self._registration = None
        self._paused = True
        registration.cancel()
        logger.debug("Stopped %r", self)
        return True

    def pause(self) -> bool:
        """Returns True if the task's state was changed to paused."""
        if not self.is_started() or self._paused:
            return False
        self._paused = True
        return True

    def resume(self) -> bool:
        """Returns True if the task's state was changed to resumed."""
        if not self.is_started() or not self._paused:
            return False
        self._paused = False
        return True

    def set_paused(self, paused: bool) -> bool:
        """
        pause() if `paused` is true, otherwise resume().

        Returns whether any action was taken; e.g. False when asked to pause
        an already paused task.
        """
        return self.pause() if paused else self.resume()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def is_started(self) -> bool:
        return self._registration is not None

    def is_paused(self) -> bool:
        return self._paused

    @property
    def state(self) -> TaskState:
        if not self.is_started():
            return TaskState.IDLE
        return TaskState.PAUSED if self._paused else TaskState.RUNNING

    @property
    def tick_source(self) -> TickSource:
        return self._tick_source

    @property
    def delay(self) -> int:
        return self._delay

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def is_one_shot(self) -> bool:
        return self._interval == ONE_SHOT

    @property
    def registration(self) -> Registration | None:
        return self._registration

    @property
    def total_ticks(self) -> int:
        return self._total_ticks

    @property
    def executed_ticks(self) -> int:
        return self._executed_ticks

    @property
    def last_executed_at(self) -> float | None:
        return self._last_executed_at
