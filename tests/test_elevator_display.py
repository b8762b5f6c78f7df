import io

from fsmkit.elevator_display import ElevatorConsoleDisplayService
from fsmkit.elevator_models import ElevatorContext, ElevatorDoors, ElevatorMovement


def _ctx(**kwargs):
    return ElevatorContext(
        "DOORS_OPEN", 5, ElevatorDoors(True, False, False), ElevatorMovement(), 2, 4, **kwargs
    )


def test_render_contains_fields():
    text = ElevatorConsoleDisplayService().render(_ctx())
    assert "Elevator State:\n" in text
    assert "State: DOORS_OPEN\n" in text
    assert "Duration: 5s\n" in text
    assert "Current Floor: 2\n" in text
    assert "Target Floor: 4\n" in text
    assert "Doors: [Open:1, Opening:0, Closing:0]\n" in text
    assert "Movement: [Up:0, Down:0, Stopped:1]\n" in text
    assert text.startswith("\n------------------------ \n")
    assert text.endswith("\n\n")


def test_render_flags():
    plain = ElevatorConsoleDisplayService().render(_ctx())
    assert "EMERGENCY ACTIVE" not in plain
    assert "OBSTACLE DETECTED" not in plain
    flagged = ElevatorConsoleDisplayService().render(
        _ctx(emergency_active=True, obstacle_detected=True)
    )
    assert "⚠️  EMERGENCY ACTIVE ⚠️\n" in flagged
    assert "🚫 OBSTACLE DETECTED 🚫\n" in flagged
    assert flagged.index("EMERGENCY") < flagged.index("OBSTACLE")


def test_show_state_writes_render():
    stream = io.StringIO()
    service = ElevatorConsoleDisplayService(stream)
    ctx = _ctx()
    service.show_state(ctx)
    assert stream.getvalue() == service.render(ctx)