import io
from contextlib import redirect_stdout

import pytest

from fsmkit.services import FunctionTimerService
from fsmkit.traffic_factory import (
    TrafficLightType,
    create_controller,
    create_simple_controller,
    create_standard_controller,
)
from fsmkit.traffic_models import LightTimings, TrafficState

S = TrafficState


def _run(controller, steps):
    seen = []
    with redirect_stdout(io.StringIO()):
        for step in steps:
            step(controller)
            seen.append(controller.state_machine.current_state)
    return seen


def _tick(c):
    c.timeout_expired()


def _press(c):
    c.button_pressed()


def test_standard_cycle():
    controller = create_standard_controller(None, None)
    assert _run(controller, [_tick] * 4) == [S.CAR_YELLOW, S.CAR_RED, S.CAR_RED_YELLOW, S.CAR_GREEN]


def test_standard_pedestrian_cycle():
    controller = create_standard_controller(None, None)
    seen = _run(controller, [_press] + [_tick] * 5)
    assert seen == [S.CAR_GREEN, S.CAR_YELLOW, S.WALK_PREP, S.WALK, S.WALK_FINISH, S.CAR_RED_YELLOW]
    assert controller.action_handler.has_pedestrian_request() is False


def test_simple_cycle_skips_red_yellow():
    controller = create_simple_controller(None, None)
    assert _run(controller, [_tick] * 3) == [S.CAR_YELLOW, S.CAR_RED, S.CAR_GREEN]


def test_simple_walk_finish_returns_to_green():
    controller = create_simple_controller(None, None)
    seen = _run(controller, [_press] + [_tick] * 5)
    assert seen[-1] is S.CAR_GREEN
    assert S.CAR_RED_YELLOW not in controller.state_machine.all_states()


def test_simple_yellow_lasts_longer():
    durations = []
    controller = create_simple_controller(None, FunctionTimerService(durations.append))
    _run(controller, [_tick])
    assert durations == [LightTimings.YELLOW_DURATION + LightTimings.RED_YELLOW_DURATION]


def test_standard_timer_durations():
    durations = []
    controller = create_standard_controller(None, FunctionTimerService(durations.append))
    _run(controller, [_tick] * 4)
    assert durations == [
        LightTimings.YELLOW_DURATION,
        LightTimings.RED_DURATION,
        LightTimings.RED_YELLOW_DURATION,
        LightTimings.GREEN_DURATION,
    ]


@pytest.mark.parametrize(
    "kind, last",
    [(TrafficLightType.STANDARD, S.CAR_RED_YELLOW), (TrafficLightType.SIMPLE, S.CAR_GREEN)],
)
def test_create_controller_dispatch(kind, last):
    controller = create_controller(kind, None, None)
    assert _run(controller, [_tick] * 3)[-1] is last


def test_unknown_kind_defaults_to_standard():
    controller = create_controller("other", None, None)
    assert _run(controller, [_tick] * 3)[-1] is S.CAR_RED_YELLOW