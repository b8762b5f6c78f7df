import io
import re

import pytest

from fsmkit.interfaces import DisplayService, TimerService
from fsmkit.traffic_models import LightTimings, TrafficEvent, TrafficState
from fsmkit.traffic_observers import (
    ConsoleLoggerObserver,
    DisplayObserver,
    FileLoggerObserver,
    PedestrianObserver,
    TimerObserver,
)

S = TrafficState
E = TrafficEvent


class RecordingDisplay(DisplayService):
    def __init__(self):
        self.shown = []

    def show_state(self, ctx):
        self.shown.append(ctx)


class RecordingTimer(TimerService):
    def __init__(self):
        self.started = []

    def start_timeout(self, duration_sec):
        self.started.append(duration_sec)


def test_console_logger_change_line():
    out = io.StringIO()
    logger = ConsoleLoggerObserver("X ", False, out)
    logger.on_state_transition(S.CAR_GREEN, E.TIME_EXPIRED, S.CAR_YELLOW)
    assert out.getvalue() == "X CAR_GREEN --[TIME_EXPIRED]--> CAR_YELLOW ✓\n"


def test_console_logger_no_change_line():
    out = io.StringIO()
    logger = ConsoleLoggerObserver("", False, out)
    logger.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    assert out.getvalue() == "Event BUTTON_PRESSED in state CAR_GREEN (no change)\n"


def test_console_logger_timestamp_format():
    out = io.StringIO()
    logger = ConsoleLoggerObserver(stream=out)
    logger.on_state_transition(S.WALK, E.TIME_EXPIRED, S.WALK_FINISH)
    text = out.getvalue()
    match = re.match(r"^\[(\d{2}):(\d{2}):(\d{2})\.(\d{3})\] (.*)$", text)
    assert match is not None
    assert match.group(5) == "WALK --[TIME_EXPIRED]--> WALK_FINISH ✓"
    assert int(match.group(1)) < 24
    assert int(match.group(2)) < 60
    assert text.endswith("\n")


def test_display_observer_shows_new_state():
    display = RecordingDisplay()
    observer = DisplayObserver(display)
    observer.on_state_transition(S.CAR_GREEN, E.TIME_EXPIRED, S.CAR_YELLOW)
    assert [ctx.name for ctx in display.shown] == ["CAR_YELLOW"]
    assert display.shown[0].duration == LightTimings.YELLOW_DURATION


def test_display_observer_ignores_no_change():
    display = RecordingDisplay()
    observer = DisplayObserver(display)
    observer.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    assert display.shown == []


def test_timer_observer_starts_duration_of_new_state():
    timer = RecordingTimer()
    observer = TimerObserver(timer)
    observer.on_state_transition(S.WALK_PREP, E.TIME_EXPIRED, S.WALK)
    observer.on_state_transition(S.WALK, E.BUTTON_PRESSED, S.WALK)
    assert timer.started == [LightTimings.WALK_DURATION]


def test_timer_observer_zero_duration_skips_timer():
    timer = RecordingTimer()
    observer = TimerObserver(timer)
    observer.set_duration(S.WALK, 0)
    observer.on_state_transition(S.WALK_PREP, E.TIME_EXPIRED, S.WALK)
    assert timer.started == []


def test_pedestrian_request_lifecycle():
    out = io.StringIO()
    observer = PedestrianObserver(True, out)
    assert observer.has_request() is False
    observer.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    assert observer.has_request() is True
    assert "Pedestrian button pressed! Request registered." in out.getvalue()
    observer.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    assert "request already pending for" in out.getvalue()
    observer.on_state_transition(S.WALK_PREP, E.TIME_EXPIRED, S.WALK)
    assert "Pedestrian can now walk!" in out.getvalue()
    assert observer.has_request() is True
    observer.on_state_transition(S.WALK, E.TIME_EXPIRED, S.WALK_FINISH)
    assert observer.has_request() is False
    assert "Walk phase ended. Clearing request" in out.getvalue()


def test_pedestrian_silent_without_debug():
    out = io.StringIO()
    observer = PedestrianObserver(False, out)
    observer.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    assert observer.has_request() is True
    assert out.getvalue() == ""


def test_pedestrian_clear_request():
    observer = PedestrianObserver(False)
    observer.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    observer.clear_request()
    assert observer.has_request() is False


def test_file_logger_writes_session_and_transitions(tmp_path):
    path = tmp_path / "log.txt"
    with FileLoggerObserver(str(path)) as logger:
        logger.on_state_transition(S.CAR_GREEN, E.TIME_EXPIRED, S.CAR_YELLOW)
        logger.on_state_transition(S.WALK, E.TIME_EXPIRED, S.WALK_FINISH)
        logger.on_state_transition(S.CAR_GREEN, E.BUTTON_PRESSED, S.CAR_GREEN)
    text = path.read_text(encoding="utf-8")
    lines = text.splitlines()
    assert lines[0] == "=" * 60
    assert lines[1].endswith(" | SESSION_START")
    assert lines[-2].endswith(" | SESSION_END")
    assert "CAR_GREEN --[TIME_EXPIRED]--> CAR_YELLOW" in text
    assert "    WALK --[TIME_EXPIRED]--> WALK_FINISH" in text
    assert text.count("(no change)") == 1


def test_file_logger_appends_sessions(tmp_path):
    path = tmp_path / "log.txt"
    for _ in range(2):
        with FileLoggerObserver(str(path)):
            pass
    text = path.read_text(encoding="utf-8")
    assert text.count("SESSION_START") == 2
    assert text.count("SESSION_END") == 2


def test_file_logger_ignores_events_after_close(tmp_path):
    path = tmp_path / "log.txt"
    logger = FileLoggerObserver(str(path))
    logger.close()
    before = path.read_text(encoding="utf-8")
    logger.on_state_transition(S.CAR_GREEN, E.TIME_EXPIRED, S.CAR_YELLOW)
    logger.close()
    assert path.read_text(encoding="utf-8") == before


def test_file_logger_unopenable_path(tmp_path):
    with pytest.raises(OSError, match="Cannot open log file"):
        FileLoggerObserver(str(tmp_path / "missing" / "log.txt"))