"""Controller exposing elevator inputs and tracking floor requests."""

from __future__ import annotations

from typing import Set

from .controllers import BaseController
from .elevator_models import ElevatorEvent, ElevatorState
from .interfaces import ActionHandler, BaseStateMachine


class ElevatorController(BaseController[ElevatorState, ElevatorEvent]):
    """Turns elevator buttons and sensors into events and chooses target floors."""

    def __init__(
        self,
        state_machine: BaseStateMachine[ElevatorState, ElevatorEvent],
        action_handler: ActionHandler[ElevatorState, ElevatorEvent],
        min_floor: int = 0,
        max_floor: int = 10,
    ) -> None:
        super().__init__(state_machine, action_handler)
        self._current_floor = 0
        self._target_floor = 0
        self._floor_requests: Set[int] = set()
        self._min_floor = min_floor
        self._max_floor = max_floor

    def request_floor(self, floor: int) -> None:
        """Register a request; floors out of range or equal to the current one are ignored."""
        if self._min_floor <= floor <= self._max_floor and floor != self._current_floor:
            self._floor_requests.add(floor)
            self._update_target_floor()
            self.handle_event(ElevatorEvent.FLOOR_REQUESTED)

    def open_doors(self) -> None:
        self.handle_event(ElevatorEvent.DOORS_OPEN_REQUESTED)

    def close_doors(self) -> None:
        self.handle_event(ElevatorEvent.DOORS_CLOSE_REQUESTED)

    def emergency_stop(self) -> None:
        self._floor_requests.clear()
        self.handle_event(ElevatorEvent.EMERGENCY_BUTTON)

    def timer_expired(self) -> None:
        self.handle_event(ElevatorEvent.TIMER_EXPIRED)

    def floor_reached(self) -> None:
        """Arrive at the target floor and pick the next target."""
        self._floor_requests.discard(self._current_floor)
        self._current_floor = self._target_floor
        self._update_target_floor()
        self.handle_event(ElevatorEvent.FLOOR_REACHED)

    def obstacle_detected(self) -> None:
        self.handle_event(ElevatorEvent.OBSTACLE_DETECTED)

    @property
    def current_floor(self) -> int:
        return self._current_floor

    @property
    def target_floor(self) -> int:
        return self._target_floor

    def has_pending_requests(self) -> bool:
        return bool(self._floor_requests)

    @property
    def pending_requests(self) -> Set[int]:
        """A copy of the requested floors."""
        return set(self._floor_requests)

    def should_move_up(self) -> bool:
        return self._target_floor > self._current_floor

    def should_move_down(self) -> bool:
        return self._target_floor < self._current_floor

    def _update_target_floor(self) -> None:
        # Closest requested floor wins; on a tie the lowest floor is chosen.
        if not self._floor_requests:
            self._target_floor = self._current_floor
            return
        self._target_floor = min(
            sorted(self._floor_requests), key=lambda f: abs(f - self._current_floor)
        )