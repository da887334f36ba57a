"""Pausable periodic tasks driven by an external tick source."""

from .core.errors import InvalidArgumentError, TickerError, WorkExecutionError
from .core.ports import FailureReporter, Pausable, Registration, TickSource
from .core.state import TaskState
from .tasks.ticker_task import ONE_SHOT, LoggingFailureReporter, TickerTask

__all__ = [
    "ONE_SHOT",
    "FailureReporter",
    "InvalidArgumentError",
    "LoggingFailureReporter",
    "Pausable",
    "Registration",
    "TaskState",
    "TickSource",
    "TickerError",
    "TickerTask",
    "WorkExecutionError",
]
