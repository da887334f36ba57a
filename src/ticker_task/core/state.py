# src/ticker_task/core/state.py

from __future__ import annotations

from enum import StrEnum


class TaskState(StrEnum):
    """
    Observable lifecycle of a TickerTask.

    Notes:
    - IDLE covers both "never started" and "stopped"; a stopped task can be started again.
    - PAUSED is only reachable from RUNNING.
    """

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"

    @property
    def is_started(self) -> bool:
        return self is not TaskState.IDLE

    @property
    def can_start(self) -> bool:
        return self is TaskState.IDLE

    @property
    def can_stop(self) -> bool:
        return self in (TaskState.RUNNING, TaskState.PAUSED)
