"""Builders for ready-wired traffic light controllers."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .interfaces import DisplayService, TimerService
from .machine import RuntimeStateMachine
from .traffic_controller import TrafficLightController
from .traffic_handler import TrafficLightActionHandler
from .traffic_models import LightTimings, TrafficContext, TrafficEvent, TrafficState
from .transitions import ConditionalStateTransition, SimpleStateTransition

S = TrafficState
E = TrafficEvent


class TrafficLightType(Enum):
    """Kinds of traffic light the factory can build."""

    STANDARD = 0  # with a RED_YELLOW phase
    SIMPLE = 1  # without a RED_YELLOW phase


def create_controller(
    kind: TrafficLightType,
    display_service: Optional[DisplayService[TrafficContext]] = None,
    timer_service: Optional[TimerService] = None,
) -> TrafficLightController:
    """Build a controller of ``kind``; anything unknown gets a standard one."""
    if kind is TrafficLightType.SIMPLE:
        return create_simple_controller(display_service, timer_service)
    return create_standard_controller(display_service, timer_service)


def create_standard_controller(
    display_service: Optional[DisplayService[TrafficContext]] = None,
    timer_service: Optional[TimerService] = None,
) -> TrafficLightController:
    """Build a traffic light that passes through RED_YELLOW before GREEN."""
    machine = RuntimeStateMachine(S.CAR_GREEN)
    handler = TrafficLightActionHandler(display_service, timer_service)
    _setup_transitions(machine, handler.has_pedestrian_request, S.CAR_RED_YELLOW)
    return TrafficLightController(machine, handler)


def create_simple_controller(
    display_service: Optional[DisplayService[TrafficContext]] = None,
    timer_service: Optional[TimerService] = None,
) -> TrafficLightController:
    """Build a traffic light that goes from RED straight back to GREEN."""
    machine = RuntimeStateMachine(S.CAR_GREEN)
    handler = TrafficLightActionHandler(display_service, timer_service)
    handler.set_state_timeout(
        S.CAR_YELLOW, LightTimings.YELLOW_DURATION + LightTimings.RED_YELLOW_DURATION
    )
    _setup_transitions(machine, handler.has_pedestrian_request, S.CAR_GREEN)
    return TrafficLightController(machine, handler)


def _setup_transitions(
    machine: RuntimeStateMachine,
    ped_check: Callable[[], bool],
    after_red: TrafficState,
) -> None:
    machine.add_transition(SimpleStateTransition(S.CAR_GREEN, E.TIME_EXPIRED, S.CAR_YELLOW))
    machine.add_transition(
        ConditionalStateTransition(
            S.CAR_YELLOW, E.TIME_EXPIRED, S.CAR_RED, S.WALK_PREP, ped_check
        )
    )
    machine.add_transition(SimpleStateTransition(S.CAR_RED, E.TIME_EXPIRED, after_red))
    if after_red is S.CAR_RED_YELLOW:
        machine.add_transition(
            SimpleStateTransition(S.CAR_RED_YELLOW, E.TIME_EXPIRED, S.CAR_GREEN)
        )
    machine.add_transition(SimpleStateTransition(S.WALK_PREP, E.TIME_EXPIRED, S.WALK))
    machine.add_transition(SimpleStateTransition(S.WALK, E.TIME_EXPIRED, S.WALK_FINISH))
    machine.add_transition(SimpleStateTransition(S.WALK_FINISH, E.TIME_EXPIRED, after_red))