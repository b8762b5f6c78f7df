"""Action handler that drives the display and timer of a traffic light."""

from __future__ import annotations

import sys
import time
from typing import Dict, Optional, TextIO

from .interfaces import ActionHandler, DisplayService, TimerService
from .traffic_models import (
    TrafficContext,
    TrafficEvent,
    TrafficState,
    default_traffic_contexts,
)


class TrafficLightActionHandler(ActionHandler[TrafficState, TrafficEvent]):
    """Records pedestrian requests, reports transitions and starts state timers."""

    def __init__(
        self,
        display_service: Optional[DisplayService[TrafficContext]] = None,
        timer_service: Optional[TimerService] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._display_service = display_service
        self._timer_service = timer_service
        self._stream = stream
        self._pedestrian_request = False
        self._states: Dict[TrafficState, TrafficContext] = default_traffic_contexts()

    def handle(
        self, current_state: TrafficState, event: TrafficEvent, next_state: TrafficState
    ) -> None:
        now = time.time_ns() // 1_000_000
        if event is TrafficEvent.BUTTON_PRESSED:
            self.handle_button_press_event()
            return
        if event is TrafficEvent.TIME_EXPIRED and next_state is TrafficState.WALK_FINISH:
            self._pedestrian_request = False

        out = self._stream or sys.stdout
        out.write(f"{current_state}\n")
        out.write(f"\n[{now}] Transition: {current_state} --[{event}]--> {next_state}\n")
        out.flush()

        self._display_state(next_state)
        self._start_state_timer(next_state)

    def has_pedestrian_request(self) -> bool:
        return self._pedestrian_request

    def handle_button_press_event(self) -> None:
        self._pedestrian_request = True

    def set_state_timeout(self, state: TrafficState, timeout: int) -> None:
        """Change how long ``state`` lasts, creating a blank context if needed."""
        self._states.setdefault(state, TrafficContext()).duration = timeout

    def configure_state(self, state: TrafficState, config: TrafficContext) -> None:
        self._states[state] = config

    def _display_state(self, state: TrafficState) -> None:
        ctx = self._states.get(state)
        if ctx is not None and self._display_service is not None:
            self._display_service.show_state(ctx)

    def _start_state_timer(self, state: TrafficState) -> None:
        ctx = self._states.get(state)
        if ctx is not None and self._timer_service is not None:
            self._timer_service.start_timeout(ctx.duration)