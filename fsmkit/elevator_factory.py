"""Builders for ready-wired elevator controllers."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Tuple

from .elevator_controller import ElevatorController
from .elevator_handler import ElevatorActionHandler
from .elevator_models import ElevatorContext, ElevatorEvent, ElevatorState
from .interfaces import DisplayService, TimerService
from .machine import RuntimeStateMachine
from .transitions import ConditionalStateTransition, SimpleStateTransition

S = ElevatorState
E = ElevatorEvent


class ElevatorType(Enum):
    """Kinds of elevator the factory can build."""

    BASIC = 0  # basic functionality
    ADVANCED = 1  # adds obstacle handling at the doors


def create_elevator_controller(
    kind: ElevatorType,
    display_service: Optional[DisplayService[ElevatorContext]] = None,
    timer_service: Optional[TimerService] = None,
    min_floor: int = 0,
    max_floor: int = 10,
) -> ElevatorController:
    """Build a controller of ``kind``; anything unknown gets a basic one."""
    if kind is ElevatorType.ADVANCED:
        return create_advanced_controller(display_service, timer_service, min_floor, max_floor)
    return create_basic_controller(display_service, timer_service, min_floor, max_floor)


def create_basic_controller(
    display_service: Optional[DisplayService[ElevatorContext]] = None,
    timer_service: Optional[TimerService] = None,
    min_floor: int = 0,
    max_floor: int = 10,
) -> ElevatorController:
    """Build an elevator with the basic set of transitions."""
    machine, _, controller = _build(display_service, timer_service, min_floor, max_floor)
    _setup_basic_transitions(
        machine,
        controller.has_pending_requests,
        controller.should_move_up,
        controller.should_move_down,
    )
    return controller


def create_advanced_controller(
    display_service: Optional[DisplayService[ElevatorContext]] = None,
    timer_service: Optional[TimerService] = None,
    min_floor: int = 0,
    max_floor: int = 10,
) -> ElevatorController:
    """Build an elevator that also reopens its doors on an obstacle."""
    machine, _, controller = _build(display_service, timer_service, min_floor, max_floor)
    _setup_basic_transitions(
        machine,
        controller.has_pending_requests,
        controller.should_move_up,
        controller.should_move_down,
    )
    machine.add_transition(
        SimpleStateTransition(S.DOORS_CLOSING, E.OBSTACLE_DETECTED, S.DOORS_OPENING)
    )
    # An obstacle while opening restarts the opening cycle.
    machine.add_transition(
        SimpleStateTransition(S.DOORS_OPENING, E.OBSTACLE_DETECTED, S.DOORS_OPENING)
    )
    return controller


def _build(
    display_service: Optional[DisplayService[ElevatorContext]],
    timer_service: Optional[TimerService],
    min_floor: int,
    max_floor: int,
) -> Tuple[RuntimeStateMachine, ElevatorActionHandler, ElevatorController]:
    machine = RuntimeStateMachine(S.IDLE)
    handler = ElevatorActionHandler(display_service, timer_service, min_floor)
    controller = ElevatorController(machine, handler, min_floor, max_floor)
    return machine, handler, controller


def _setup_basic_transitions(
    machine: RuntimeStateMachine,
    has_requests: Callable[[], bool],
    should_move_up: Callable[[], bool],
    should_move_down: Callable[[], bool],
) -> None:
    machine.add_transition(
        ConditionalStateTransition(
            S.IDLE, E.FLOOR_REQUESTED, S.DOORS_OPENING, S.DOORS_OPENING, has_requests
        )
    )
    machine.add_transition(SimpleStateTransition(S.DOORS_OPENING, E.TIMER_EXPIRED, S.DOORS_OPEN))
    machine.add_transition(SimpleStateTransition(S.DOORS_OPEN, E.TIMER_EXPIRED, S.DOORS_CLOSING))
    machine.add_transition(
        SimpleStateTransition(S.DOORS_OPEN, E.DOORS_CLOSE_REQUESTED, S.DOORS_CLOSING)
    )
    machine.add_transition(
        ConditionalStateTransition(
            S.DOORS_CLOSING, E.TIMER_EXPIRED, S.IDLE, S.MOVING_UP, should_move_up
        )
    )
    # Shadowed by the transition above: the first match always wins.
    machine.add_transition(
        ConditionalStateTransition(
            S.DOORS_CLOSING, E.TIMER_EXPIRED, S.IDLE, S.MOVING_DOWN, should_move_down
        )
    )
    machine.add_transition(SimpleStateTransition(S.MOVING_UP, E.FLOOR_REACHED, S.DOORS_OPENING))
    machine.add_transition(SimpleStateTransition(S.MOVING_DOWN, E.FLOOR_REACHED, S.DOORS_OPENING))
    machine.add_transition(SimpleStateTransition(S.IDLE, E.EMERGENCY_BUTTON, S.EMERGENCY_STOP))
    machine.add_transition(SimpleStateTransition(S.EMERGENCY_STOP, E.TIMER_EXPIRED, S.IDLE))