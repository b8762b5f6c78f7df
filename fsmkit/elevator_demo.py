"""Scripted run of a basic elevator."""

from __future__ import annotations

import argparse
import sys
from contextlib import redirect_stdout
from typing import List, Optional, TextIO

from .elevator_controller import ElevatorController
from .elevator_display import ElevatorConsoleDisplayService
from .elevator_factory import ElevatorType, create_elevator_controller
from .services import FunctionTimerService


def run_demo(stream: Optional[TextIO] = None) -> ElevatorController:
    """Run the scripted scenario, writing to ``stream``; return the controller."""
    out = stream if stream is not None else sys.stdout
    with redirect_stdout(out):
        print("=== Elevator Example ===")

        timer = FunctionTimerService(
            lambda duration: print(f"Timer started for {duration} seconds")
        )
        controller = create_elevator_controller(
            ElevatorType.BASIC, ElevatorConsoleDisplayService(), timer, 0, 5
        )

        print("\n=== Testing Elevator Operation ===")

        print("\n1. Request floor 3:")
        controller.request_floor(3)
        controller.timer_expired()  # DOORS_OPENING -> DOORS_OPEN
        controller.timer_expired()  # DOORS_OPEN -> DOORS_CLOSING
        controller.timer_expired()  # DOORS_CLOSING -> MOVING_UP
        controller.floor_reached()  # MOVING_UP -> DOORS_OPENING
        controller.timer_expired()  # DOORS_OPENING -> DOORS_OPEN

        print("\n2. Test doors control:")
        controller.open_doors()
        controller.close_doors()

        print("\n3. Test emergency:")
        controller.request_floor(1)
        controller.emergency_stop()
        controller.timer_expired()

        print("\n=== Elevator Example completed successfully! ===")
    return controller


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the elevator demo.")
    parser.parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())