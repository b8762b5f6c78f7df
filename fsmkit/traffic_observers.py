"""Observers that log, display, time and track pedestrian requests for a traffic light."""

from __future__ import annotations

import sys
import time
from datetime import datetime
from typing import Dict, Optional, TextIO

from .interfaces import DisplayService, Observer, TimerService
from .traffic_models import (
    LightTimings,
    TrafficContext,
    TrafficEvent,
    TrafficState,
    default_traffic_contexts,
)


def _millis_suffix(now: datetime) -> str:
    return f"{now.microsecond // 1000:03d}"


class ConsoleLoggerObserver(Observer[TrafficState, TrafficEvent]):
    """Writes one line per processed event to a stream."""

    def __init__(
        self, prefix: str = "", timestamps: bool = True, stream: Optional[TextIO] = None
    ) -> None:
        self.prefix = prefix
        self.show_timestamps = timestamps
        self._stream = stream

    def on_state_transition(
        self, from_state: TrafficState, event: TrafficEvent, to_state: TrafficState
    ) -> None:
        stamp = self._timestamp() + " " if self.show_timestamps else ""
        if from_state != to_state:
            body = f"{from_state} --[{event}]--> {to_state} ✓"
        else:
            body = f"Event {event} in state {from_state} (no change)"
        out = self._stream if self._stream is not None else sys.stdout
        out.write(f"{stamp}{self.prefix}{body}\n")
        out.flush()

    @staticmethod
    def _timestamp() -> str:
        now = datetime.now()
        return f"[{now:%H:%M:%S}.{_millis_suffix(now)}]"


class DisplayObserver(Observer[TrafficState, TrafficEvent]):
    """Shows the context of the new state whenever the state changes."""

    def __init__(self, display_service: Optional[DisplayService[TrafficContext]]) -> None:
        self._display_service = display_service
        self._contexts: Dict[TrafficState, TrafficContext] = default_traffic_contexts()

    def on_state_transition(
        self, from_state: TrafficState, event: TrafficEvent, to_state: TrafficState
    ) -> None:
        if from_state == to_state or self._display_service is None:
            return
        ctx = self._contexts.get(to_state)
        if ctx is not None:
            self._display_service.show_state(ctx)


class TimerObserver(Observer[TrafficState, TrafficEvent]):
    """Starts the new state's timeout whenever the state changes."""

    def __init__(self, timer_service: Optional[TimerService]) -> None:
        self._timer_service = timer_service
        self._durations: Dict[TrafficState, int] = {
            TrafficState.CAR_GREEN: LightTimings.GREEN_DURATION,
            TrafficState.CAR_YELLOW: LightTimings.YELLOW_DURATION,
            TrafficState.CAR_RED: LightTimings.RED_DURATION,
            TrafficState.CAR_RED_YELLOW: LightTimings.RED_YELLOW_DURATION,
            TrafficState.WALK_PREP: LightTimings.WALK_PREP_DURATION,
            TrafficState.WALK: LightTimings.WALK_DURATION,
            TrafficState.WALK_FINISH: LightTimings.WALK_FINISH_DURATION,
        }

    def on_state_transition(
        self, from_state: TrafficState, event: TrafficEvent, to_state: TrafficState
    ) -> None:
        if from_state == to_state or self._timer_service is None:
            return
        duration = self._durations.get(to_state, 0)
        if duration > 0:
            self._timer_service.start_timeout(duration)

    def set_duration(self, state: TrafficState, seconds: int) -> None:
        """Set how long ``state`` lasts; zero disables its timer."""
        self._durations[state] = seconds


class PedestrianObserver(Observer[TrafficState, TrafficEvent]):
    """Registers pedestrian button presses and clears them once the walk phase ends."""

    def __init__(self, debug: bool = True, stream: Optional[TextIO] = None) -> None:
        self.debug = debug
        self._stream = stream
        self._request_pending = False
        self._request_time = 0.0

    def on_state_transition(
        self, from_state: TrafficState, event: TrafficEvent, to_state: TrafficState
    ) -> None:
        if event is TrafficEvent.BUTTON_PRESSED:
            if not self._request_pending:
                self._request_pending = True
                self._request_time = time.monotonic()
                self._log("Pedestrian button pressed! Request registered.")
            else:
                self._log(
                    "Pedestrian button pressed again (request already pending for "
                    f"{self._waited_ms()}ms)"
                )
            return

        if (
            from_state is TrafficState.WALK
            and to_state is not TrafficState.WALK
            and self._request_pending
        ):
            self._log(f"Walk phase ended. Clearing request (total wait: {self._waited_ms()}ms)")
            self.clear_request()

        if from_state != to_state and to_state is TrafficState.WALK and self._request_pending:
            self._log(f"Pedestrian can now walk! (waited {self._waited_ms()}ms)")

    def has_request(self) -> bool:
        return self._request_pending

    def clear_request(self) -> None:
        self._request_pending = False

    def _waited_ms(self) -> int:
        return int((time.monotonic() - self._request_time) * 1000)

    def _log(self, message: str) -> None:
        if self.debug:
            out = self._stream if self._stream is not None else sys.stdout
            out.write(message + "\n")
            out.flush()


class FileLoggerObserver(Observer[TrafficState, TrafficEvent]):
    """Appends transitions to a log file framed by session start and end markers."""

    def __init__(self, filename: str, flush_immediately: bool = True) -> None:
        self.filename = str(filename)
        self._auto_flush = flush_immediately
        try:
            self._file: Optional[TextIO] = open(self.filename, "a", encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Cannot open log file: {self.filename}") from exc
        self._write_session_marker("SESSION_START")

    def on_state_transition(
        self, from_state: TrafficState, event: TrafficEvent, to_state: TrafficState
    ) -> None:
        if self._file is None:
            return
        line = f"{self._timestamp()} | {str(from_state):>8} --[{str(event):>12}]--> {str(to_state):>8}"
        if from_state == to_state:
            line += " (no change)"
        self._file.write(line + "\n")
        if self._auto_flush:
            self._file.flush()

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        """Write the session end marker and close the file; safe to call twice."""
        if self._file is None:
            return
        self._write_session_marker("SESSION_END")
        self._file.close()
        self._file = None

    def __enter__(self) -> "FileLoggerObserver":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _timestamp() -> str:
        now = datetime.now()
        return f"{now:%Y-%m-%d %H:%M:%S}.{_millis_suffix(now)}"

    def _write_session_marker(self, marker: str) -> None:
        if self._file is None:
            return
        rule = "=" * 60
        self._file.write(f"{rule}\n{self._timestamp()} | {marker}\n{rule}\n")
        if self._auto_flush:
            self._file.flush()