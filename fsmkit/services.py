"""Ready-made service implementations."""

from __future__ import annotations

from typing import Callable

from .interfaces import TimerService


class FunctionTimerService(TimerService):
    """Timer service that delegates each timeout to a callable."""

    def __init__(self, func: Callable[[int], object]) -> None:
        if not callable(func):
            raise TypeError("timer function must be callable")
        self._func = func

    def start_timeout(self, duration_sec: int) -> None:
        """Pass ``duration_sec`` to the wrapped callable."""
        self._func(duration_sec)