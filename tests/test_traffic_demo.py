import io

from fsmkit.traffic_demo import main, run_demo
from fsmkit.traffic_models import TrafficState


def _run():
    out = io.StringIO()
    controller = run_demo(out)
    return controller, out.getvalue()


def test_demo_ends_in_red_yellow():
    controller, _ = _run()
    assert controller.state_machine.current_state is TrafficState.CAR_RED_YELLOW


def test_pedestrian_request_leads_to_walk_prep():
    _, text = _run()
    assert "Transition: CAR_YELLOW --[TIME_EXPIRED]--> WALK_PREP" in text
    assert "Transition: CAR_YELLOW --[TIME_EXPIRED]--> CAR_RED" in text


def test_timer_started_for_every_timeout():
    _, text = _run()
    assert "Timer started for 10 seconds" in text
    assert text.count("Timer started for") == 9


def test_sections_in_order():
    _, text = _run()
    first = text.index("=== Testing State Transitions ===")
    second = text.index("=== Testing Pedestrian Button ===")
    last = text.index("=== Example completed successfully! ===")
    assert first < second < last


def test_pedestrian_request_cleared_after_walk():
    controller, _ = _run()
    assert not controller.action_handler.has_pedestrian_request()


def test_main_returns_zero(capsys):
    assert main([]) == 0
    assert "=== Example completed successfully! ===" in capsys.readouterr().out