import io

from fsmkit.traffic_display import AsciiDisplayService, ConsoleDisplayService
from fsmkit.traffic_models import (
    PedestrianLights,
    TrafficContext,
    TrafficLights,
    TrafficState,
    default_traffic_contexts,
)


def _green():
    return default_traffic_contexts()[TrafficState.CAR_GREEN]


def test_console_render_contains_state_and_lights():
    text = ConsoleDisplayService().render(_green())
    assert "State: CAR_GREEN\n" in text
    assert "Car Lights: [R:0, Y:0, G:1]" in text
    assert "Pedestrian Lights: [R:1, G:0]" in text
    assert "Traffic Light State:" in text


def test_console_render_duration():
    ctx = TrafficContext("X", 7, TrafficLights(True, True, False), PedestrianLights(False, True))
    text = ConsoleDisplayService().render(ctx)
    assert "Duration: 7s\n" in text
    assert "Car Lights: [R:1, Y:1, G:0]" in text


def test_console_show_state_writes_render():
    stream = io.StringIO()
    service = ConsoleDisplayService(stream)
    service.show_state(_green())
    assert stream.getvalue() == service.render(_green())


def test_ascii_without_color_has_no_ansi_colors():
    text = AsciiDisplayService(color_enabled=False).render(_green())
    assert text.startswith("\033[2J\033[H")
    assert "\033[9" not in text
    assert "\033[1m" not in text
    assert "Current State: CAR_GREEN (10s)" in text


def test_ascii_lit_lamps_match_context():
    red = default_traffic_contexts()[TrafficState.CAR_RED]
    text = AsciiDisplayService(color_enabled=False).render(red)
    assert text.count("●●●●●") == 1
    assert text.count("○○○○○") == 2
    assert "STOP" in text
    assert "WALK" not in text.replace("WALK_", "")


def test_ascii_walk_state_shows_walk_sign():
    walk = default_traffic_contexts()[TrafficState.WALK]
    text = AsciiDisplayService(color_enabled=False).render(walk)
    assert "│  ----   │  │  WALK   │" in text


def test_ascii_with_color_paints_lit_lamp():
    text = AsciiDisplayService(color_enabled=True).render(_green())
    assert "\033[92m\033[1m●●●●●\033[0m" in text
    assert "\033[90m○○○○○\033[0m" in text


def test_ascii_color_toggle_changes_output():
    service = AsciiDisplayService()
    colored = service.render(_green())
    service.color_enabled = False
    plain = service.render(_green())
    assert len(plain) < len(colored)


def test_ascii_show_state_writes_render():
    stream = io.StringIO()
    service = AsciiDisplayService(False, stream)
    service.show_state(_green())
    assert stream.getvalue() == service.render(_green())