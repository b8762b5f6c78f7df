"""Controller exposing traffic light inputs as methods."""

from __future__ import annotations

from .controllers import BaseController
from .interfaces import ActionHandler, BaseStateMachine
from .traffic_models import TrafficEvent, TrafficState


class TrafficLightController(BaseController[TrafficState, TrafficEvent]):
    """Turns button presses and timeouts into traffic light events."""

    def __init__(
        self,
        state_machine: BaseStateMachine[TrafficState, TrafficEvent],
        action_handler: ActionHandler[TrafficState, TrafficEvent],
    ) -> None:
        super().__init__(state_machine, action_handler)

    def button_pressed(self) -> None:
        self.handle_event(TrafficEvent.BUTTON_PRESSED)

    def timeout_expired(self) -> None:
        self.handle_event(TrafficEvent.TIME_EXPIRED)