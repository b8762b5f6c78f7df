"""Traffic light controller that reports transitions to observers."""

from __future__ import annotations

from .controllers import ObservableController
from .interfaces import BaseStateMachine
from .traffic_models import TrafficEvent, TrafficState


class TrafficController(ObservableController[TrafficState, TrafficEvent]):
    """Turns button presses and timer expiries into events for observers."""

    def __init__(self, state_machine: BaseStateMachine[TrafficState, TrafficEvent]) -> None:
        super().__init__(state_machine)

    def button_pressed(self) -> None:
        self.handle_event(TrafficEvent.BUTTON_PRESSED)

    def timer_expired(self) -> None:
        self.handle_event(TrafficEvent.TIME_EXPIRED)

    @property
    def current_state(self) -> TrafficState:
        """The state the underlying machine is in."""
        return self.state_machine.current_state