"""Text renderings of a traffic light context: plain console and ASCII art."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .interfaces import DisplayService
from .traffic_models import TrafficContext

RED_COLOR = "\033[91m"
YELLOW_COLOR = "\033[93m"
GREEN_COLOR = "\033[92m"
WHITE_COLOR = "\033[97m"
GRAY_COLOR = "\033[90m"
RESET_COLOR = "\033[0m"
BOLD = "\033[1m"
CLEAR_SCREEN = "\033[2J\033[H"

_SEPARATOR = "════════════════════════════════════════════════"
_FRAME = "\n    ┌───────────────────┐\n    │                   │"
_LIT = "●●●●●"
_UNLIT = "○○○○○"


class ConsoleDisplayService(DisplayService[TrafficContext]):
    """Prints a plain textual summary of a traffic light context."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def render(self, ctx: TrafficContext) -> str:
        """Return the text that ``show_state`` prints for ``ctx``."""
        car = ctx.car_lights
        ped = ctx.ped_lights
        return (
            "\n------------------------ \n"
            "Traffic Light State:\n"
            "------------------------ \n"
            f"State: {ctx.name}\n"
            f"Duration: {ctx.duration}s\n"
            f"Car Lights: [R:{int(car.red)}, Y:{int(car.yellow)}, G:{int(car.green)}]\n"
            f"Pedestrian Lights: [R:{int(ped.red)}, G:{int(ped.green)}]\n"
            "\n"
        )

    def show_state(self, ctx: TrafficContext) -> None:
        out = self._stream or sys.stdout
        out.write(self.render(ctx))
        out.flush()


class AsciiDisplayService(DisplayService[TrafficContext]):
    """Draws a traffic light and a pedestrian crossing with optional ANSI colours."""

    def __init__(self, color_enabled: bool = True, stream: Optional[TextIO] = None) -> None:
        self.color_enabled = color_enabled
        self._stream = stream

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color_enabled:
            return text
        return "".join(codes) + text + RESET_COLOR

    def _car_light(self, red: bool, yellow: bool, green: bool) -> str:
        rows = [
            "    │    "
            + (self._paint(_LIT, color, BOLD) if on else self._paint(_UNLIT, GRAY_COLOR))
            + "          │"
            for on, color in ((red, RED_COLOR), (yellow, YELLOW_COLOR), (green, GREEN_COLOR))
        ]
        rows.append("    │                   │")
        rows.append("    └───────────────────┘")
        return "\n".join(rows)

    def _pedestrian_light(self, red: bool, green: bool) -> str:
        stop = self._paint("STOP", RED_COLOR, BOLD) if red else self._paint("----", GRAY_COLOR)
        walk = self._paint("WALK", GREEN_COLOR, BOLD) if green else self._paint("----", GRAY_COLOR)
        return "\n".join(
            [
                "  PEDESTRIAN CROSSING",
                "  ┌─────────┐  ┌─────────┐",
                f"  │  {stop}   │  │  {walk}   │",
                "  │   🚫    │  │   🚶    │",
                "  └─────────┘  └─────────┘",
            ]
        )

    def render(self, ctx: TrafficContext) -> str:
        """Return the full screen that ``show_state`` prints for ``ctx``."""
        title = self._paint("🚦 TRAFFIC LIGHT SIMULATOR 🚦", BOLD, WHITE_COLOR)
        state_line = self._paint(f"Current State: {ctx.name} ({ctx.duration}s)", BOLD)
        car = ctx.car_lights
        ped = ctx.ped_lights
        lines = [
            _SEPARATOR,
            title,
            _SEPARATOR,
            state_line,
            _SEPARATOR,
            _FRAME,
            self._car_light(car.red, car.yellow, car.green),
            "",
            _SEPARATOR,
            self._pedestrian_light(ped.red, ped.green),
            _SEPARATOR,
        ]
        return CLEAR_SCREEN + "".join(line + "\n" for line in lines)

    def show_state(self, ctx: TrafficContext) -> None:
        out = self._stream or sys.stdout
        out.write(self.render(ctx))
        out.flush()