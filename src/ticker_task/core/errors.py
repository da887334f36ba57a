# src/ticker_task/core/errors.py

"""Exceptions raised (or reported) by ticker tasks."""

from __future__ import annotations

from typing import Any


class TickerError(Exception):
    """Base exception for ticker_task errors."""


class InvalidArgumentError(TickerError, ValueError):
    """Raised at construction when a required argument is missing or invalid."""


class WorkExecutionError(TickerError):
    """
    A failure raised by a task's unit of work during a tick.

    Never raised to the host: the tick handler builds one and hands it
    to the task's FailureReporter, then carries on ticking.
    """

    def __init__(self, task: Any, cause: BaseException) -> None:
        super().__init__(f"work failed for {task!r}: {cause!r}")
        self.task = task
        self.cause = cause
        self.__cause__ = cause
