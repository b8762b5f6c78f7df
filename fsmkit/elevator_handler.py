"""Action handler tracking elevator data and starting state timers."""

from __future__ import annotations

import dataclasses
import sys
import time
from typing import Dict, Optional, Set, TextIO

from .elevator_models import ElevatorContext, ElevatorEvent, ElevatorState
from .interfaces import ActionHandler, DisplayService, TimerService


class ElevatorActionHandler(ActionHandler[ElevatorState, ElevatorEvent]):
    """Reacts to elevator transitions.

    The handler starts with no per-state configuration; states get a display
    context and a timer duration through ``configure_state`` or
    ``set_state_timeout``.
    """

    def __init__(
        self,
        display_service: Optional[DisplayService[ElevatorContext]] = None,
        timer_service: Optional[TimerService] = None,
        initial_floor: int = 0,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._display_service = display_service
        self._timer_service = timer_service
        self._stream = stream
        self._states: Dict[ElevatorState, ElevatorContext] = {}
        self.current_floor = initial_floor
        self.target_floor = initial_floor
        self._pending_requests: Set[int] = set()
        self._emergency_active = False
        self._obstacle_present = False

    def handle(
        self, current_state: ElevatorState, event: ElevatorEvent, next_state: ElevatorState
    ) -> None:
        now = time.time_ns() // 1_000_000

        if event is ElevatorEvent.EMERGENCY_BUTTON:
            self._emergency_active = True
            self.clear_all_requests()
        elif event is ElevatorEvent.OBSTACLE_DETECTED:
            self._obstacle_present = True
        elif event is ElevatorEvent.FLOOR_REACHED:
            self.current_floor = self.target_floor
        elif event is ElevatorEvent.TIMER_EXPIRED:
            if current_state is ElevatorState.EMERGENCY_STOP:
                self._emergency_active = False
            if current_state in (ElevatorState.DOORS_OPENING, ElevatorState.DOORS_CLOSING):
                self._obstacle_present = False

        out = self._stream if self._stream is not None else sys.stdout
        out.write(
            f"\n[{now}] Elevator Transition: {current_state} --[{event}]--> {next_state}\n"
        )
        out.write(f"Floor: {self.current_floor} -> {self.target_floor}\n")
        out.flush()

        self._display_state(next_state)
        self._start_state_timer(next_state)

    def add_floor_request(self, floor: int) -> None:
        self._pending_requests.add(floor)

    def remove_floor_request(self, floor: int) -> None:
        self._pending_requests.discard(floor)

    def clear_all_requests(self) -> None:
        self._pending_requests.clear()

    def has_pending_requests(self) -> bool:
        return bool(self._pending_requests)

    @property
    def emergency_active(self) -> bool:
        return self._emergency_active

    @property
    def obstacle_present(self) -> bool:
        return self._obstacle_present

    def set_state_timeout(self, state: ElevatorState, timeout: int) -> None:
        """Change how long ``state`` lasts, creating a blank context if needed."""
        self._states.setdefault(state, ElevatorContext()).duration = timeout

    def configure_state(self, state: ElevatorState, config: ElevatorContext) -> None:
        self._states[state] = config

    def _display_state(self, state: ElevatorState) -> None:
        ctx = self._states.get(state)
        if ctx is None or self._display_service is None:
            return
        self._display_service.show_state(
            dataclasses.replace(
                ctx,
                current_floor=self.current_floor,
                target_floor=self.target_floor,
                pending_requests=set(self._pending_requests),
                emergency_active=self._emergency_active,
                obstacle_detected=self._obstacle_present,
            )
        )

    def _start_state_timer(self, state: ElevatorState) -> None:
        ctx = self._states.get(state)
        if ctx is not None and self._timer_service is not None and ctx.duration > 0:
            self._timer_service.start_timeout(ctx.duration)