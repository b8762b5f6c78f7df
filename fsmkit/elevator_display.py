"""Plain console rendering of an elevator context."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .elevator_models import ElevatorContext
from .interfaces import DisplayService


class ElevatorConsoleDisplayService(DisplayService[ElevatorContext]):
    """Prints a textual summary of an elevator context."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def render(self, ctx: ElevatorContext) -> str:
        """Return the text that ``show_state`` prints for ``ctx``."""
        doors = ctx.doors
        move = ctx.movement
        text = (
            "\n------------------------ \n"
            "Elevator State:\n"
            "------------------------ \n"
            f"State: {ctx.name}\n"
            f"Duration: {ctx.duration}s\n"
            f"Current Floor: {ctx.current_floor}\n"
            f"Target Floor: {ctx.target_floor}\n"
            f"Doors: [Open:{int(doors.open)}, Opening:{int(doors.opening)}, "
            f"Closing:{int(doors.closing)}]\n"
            f"Movement: [Up:{int(move.moving_up)}, Down:{int(move.moving_down)}, "
            f"Stopped:{int(move.stopped)}]\n"
        )
        if ctx.emergency_active:
            text += "⚠️  EMERGENCY ACTIVE ⚠️\n"
        if ctx.obstacle_detected:
            text += "🚫 OBSTACLE DETECTED 🚫\n"
        return text + "\n"

    def show_state(self, ctx: ElevatorContext) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        out.write(self.render(ctx))
        out.flush()