"""Threaded runner feeding timer, button and keyboard events to a traffic light."""

from __future__ import annotations

import sys
import threading
from collections import deque
from datetime import timedelta
from typing import Callable, Deque, Optional, TextIO, Union

from .traffic_models import TrafficEvent

EventHandler = Callable[[TrafficEvent], object]
InputHandler = Callable[[str], object]


class TrafficExecutor:
    """Runs a worker, a timer and an optional keyboard reader on separate threads.

    Events from the timer and from ``send_button_event`` are queued and passed
    to ``event_handler`` on the worker thread. Each non-blank character read
    from the input stream goes to ``input_handler``; ``q`` or ``Q`` ends the run.
    """

    def __init__(
        self,
        event_handler: Optional[EventHandler],
        input_handler: Optional[InputHandler] = None,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        self._event_handler = event_handler
        self._input_handler = input_handler
        self._input_stream = input_stream
        self._running = False
        self._events: Deque[TrafficEvent] = deque()
        self._event_cv = threading.Condition()
        self._timer_cv = threading.Condition()
        self._timer_active = False
        self._timer_duration = 0.0
        self._stop_event = threading.Event()
        self._worker_thread: Optional[threading.Thread] = None
        self._timer_thread: Optional[threading.Thread] = None
        self._input_thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Start the threads; does nothing if already running."""
        if self._running:
            return
        self._running = True
        self._stop_event.clear()
        self._worker_thread = threading.Thread(
            target=self._worker_loop, name="traffic-worker", daemon=True
        )
        self._timer_thread = threading.Thread(
            target=self._timer_loop, name="traffic-timer", daemon=True
        )
        self._worker_thread.start()
        self._timer_thread.start()
        if self._input_handler is not None:
            self._input_thread = threading.Thread(
                target=self._input_loop, name="traffic-input", daemon=True
            )
            self._input_thread.start()

    def stop(self) -> None:
        """Stop running and wait for every thread to finish."""
        self._halt()
        current = threading.current_thread()
        for thread in (self._worker_thread, self._input_thread, self._timer_thread):
            if thread is not None and thread is not current and thread.is_alive():
                thread.join()

    def start_timer(self, duration: Union[float, timedelta]) -> None:
        """Arrange for a TIME_EXPIRED event after ``duration`` seconds."""
        seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
        if seconds < 0:
            raise ValueError("timer duration must not be negative")
        with self._timer_cv:
            self._timer_duration = seconds
            self._timer_active = True
            self._timer_cv.notify()

    def wait_for_completion(self) -> None:
        """Block until the worker thread has finished."""
        worker = self._worker_thread
        if worker is not None and worker is not threading.current_thread():
            worker.join()

    def send_button_event(self) -> None:
        """Queue a BUTTON_PRESSED event."""
        self._push(TrafficEvent.BUTTON_PRESSED)

    def _push(self, event: TrafficEvent) -> None:
        with self._event_cv:
            self._events.append(event)
            self._event_cv.notify()

    def _halt(self) -> None:
        with self._event_cv:
            self._running = False
            self._event_cv.notify_all()
        with self._timer_cv:
            self._timer_cv.notify_all()
        self._stop_event.set()

    def _worker_loop(self) -> None:
        while True:
            with self._event_cv:
                self._event_cv.wait_for(lambda: not self._running or bool(self._events))
                if not self._running:
                    return
            while True:
                with self._event_cv:
                    if not self._events:
                        break
                    event = self._events.popleft()
                if self._event_handler is not None:
                    self._event_handler(event)

    def _timer_loop(self) -> None:
        while True:
            with self._timer_cv:
                self._timer_cv.wait_for(lambda: not self._running or self._timer_active)
                if not self._running:
                    return
                duration = self._timer_duration
                self._timer_active = False
            self._stop_event.wait(duration)
            if self._running:
                self._push(TrafficEvent.TIME_EXPIRED)

    def _input_loop(self) -> None:
        stream = self._input_stream if self._input_stream is not None else sys.stdin
        while self._running:
            char = _read_visible_char(stream)
            if not char:
                break
            if self._input_handler is not None:
                self._input_handler(char)
            if char in ("q", "Q"):
                self._halt()
                break


def _read_visible_char(stream: TextIO) -> str:
    """Next non-whitespace character, or an empty string at end of input."""
    while True:
        char = stream.read(1)
        if not char or not char.isspace():
            return char