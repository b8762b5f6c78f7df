"""Elevator states, events, door and movement configurations and timings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Set


class ElevatorState(Enum):
    """All possible elevator states."""

    IDLE = 0
    DOORS_OPENING = 1
    DOORS_OPEN = 2
    DOORS_CLOSING = 3
    MOVING_UP = 4
    MOVING_DOWN = 5
    EMERGENCY_STOP = 6

    def __str__(self) -> str:
        return elevator_state_to_string(self)


class ElevatorEvent(Enum):
    """Events that trigger elevator transitions."""

    FLOOR_REQUESTED = 0
    DOORS_OPEN_REQUESTED = 1
    DOORS_CLOSE_REQUESTED = 2
    TIMER_EXPIRED = 3
    FLOOR_REACHED = 4
    EMERGENCY_BUTTON = 5
    OBSTACLE_DETECTED = 6

    def __str__(self) -> str:
        return elevator_event_to_string(self)


@dataclass
class ElevatorDoors:
    """Door configuration."""

    open: bool = False
    opening: bool = False
    closing: bool = False


@dataclass
class ElevatorMovement:
    """Movement configuration."""

    moving_up: bool = False
    moving_down: bool = False
    stopped: bool = True


@dataclass
class ElevatorContext:
    """A state's name, duration, configuration and the live elevator data."""

    name: str = ""
    duration: int = 0
    doors: ElevatorDoors = field(default_factory=ElevatorDoors)
    movement: ElevatorMovement = field(default_factory=ElevatorMovement)
    current_floor: int = 0
    target_floor: int = 0
    pending_requests: Set[int] = field(default_factory=set)
    emergency_active: bool = False
    obstacle_detected: bool = False


class ElevatorTimings:
    """Default durations, in seconds, of the elevator states."""

    DOORS_OPENING_DURATION = 3
    DOORS_OPEN_DURATION = 5
    DOORS_CLOSING_DURATION = 3
    FLOOR_TRAVEL_DURATION = 4
    EMERGENCY_TIMEOUT = 30
    IDLE_TIMEOUT = 0  # no timeout when idle
    OBSTACLE_RETRY_DURATION = 2


def elevator_state_to_string(state) -> str:
    """Name of an elevator state, or ``UNKNOWN_ELEVATOR_STATE``."""
    if isinstance(state, ElevatorState):
        return state.name
    return "UNKNOWN_ELEVATOR_STATE"


def elevator_event_to_string(event) -> str:
    """Name of an elevator event, or ``UNKNOWN_ELEVATOR_EVENT``."""
    if isinstance(event, ElevatorEvent):
        return event.name
    return "UNKNOWN_ELEVATOR_EVENT"