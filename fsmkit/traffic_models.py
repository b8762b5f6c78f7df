"""Traffic light states, events, light configurations and timings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class TrafficState(Enum):
    """All possible traffic light states."""

    CAR_GREEN = 0
    CAR_YELLOW = 1
    CAR_RED = 2
    WALK_PREP = 3
    WALK = 4
    WALK_FINISH = 5
    CAR_RED_YELLOW = 6

    def __str__(self) -> str:
        return state_to_string(self)


class TrafficEvent(Enum):
    """Events that trigger traffic light transitions."""

    TIME_EXPIRED = 0
    BUTTON_PRESSED = 1

    def __str__(self) -> str:
        return event_to_string(self)


@dataclass
class TrafficLights:
    """Car traffic light configuration."""

    red: bool = False
    yellow: bool = False
    green: bool = False


@dataclass
class PedestrianLights:
    """Pedestrian light configuration."""

    red: bool = True
    green: bool = False


@dataclass
class TrafficContext:
    """A state's name, duration and light configuration."""

    name: str = ""
    duration: int = 0
    car_lights: TrafficLights = field(default_factory=TrafficLights)
    ped_lights: PedestrianLights = field(default_factory=PedestrianLights)


class LightTimings:
    """Default durations, in seconds, of the traffic light states."""

    RED_DURATION = 8
    RED_YELLOW_DURATION = 2
    GREEN_DURATION = 10
    YELLOW_DURATION = 2
    WALK_DURATION = 5
    WALK_PREP_DURATION = 1
    WALK_FINISH_DURATION = 2


def state_to_string(state) -> str:
    """Name of a traffic state, or ``UNKNOWN_STATE``."""
    if isinstance(state, TrafficState):
        return state.name
    return "UNKNOWN_STATE"


def event_to_string(event) -> str:
    """Name of a traffic event, or ``UNKNOWN_EVENT``."""
    if isinstance(event, TrafficEvent):
        return event.name
    return "UNKNOWN_EVENT"


def default_traffic_contexts() -> Dict[TrafficState, TrafficContext]:
    """A fresh mapping of every traffic state to its default context."""
    red_car = (True, False, False)
    stop = (True, False)
    layout = {
        TrafficState.CAR_GREEN: (LightTimings.GREEN_DURATION, (False, False, True), stop),
        TrafficState.CAR_YELLOW: (LightTimings.YELLOW_DURATION, (False, True, False), stop),
        TrafficState.CAR_RED: (LightTimings.RED_DURATION, red_car, stop),
        TrafficState.WALK_PREP: (LightTimings.WALK_PREP_DURATION, red_car, stop),
        TrafficState.WALK: (LightTimings.WALK_DURATION, red_car, (False, True)),
        TrafficState.WALK_FINISH: (LightTimings.WALK_FINISH_DURATION, red_car, stop),
        TrafficState.CAR_RED_YELLOW: (
            LightTimings.RED_YELLOW_DURATION,
            (True, True, False),
            stop,
        ),
    }
    return {
        state: TrafficContext(
            state.name, duration, TrafficLights(*car), PedestrianLights(*ped)
        )
        for state, (duration, car, ped) in layout.items()
    }