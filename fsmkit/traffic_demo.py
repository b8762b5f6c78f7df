"""Scripted walk through a standard traffic light's cycle."""

from __future__ import annotations

import argparse
import sys
from contextlib import redirect_stdout
from typing import List, Optional, TextIO

from .services import FunctionTimerService
from .traffic_controller import TrafficLightController
from .traffic_display import ConsoleDisplayService
from .traffic_factory import TrafficLightType, create_controller


def run_demo(stream: Optional[TextIO] = None) -> TrafficLightController:
    """Run the scripted cycle, writing to ``stream``; return the controller."""
    out = stream if stream is not None else sys.stdout
    with redirect_stdout(out):
        print("=== Traffic Light Example ===")

        timer = FunctionTimerService(
            lambda duration: print(f"Timer started for {duration} seconds")
        )
        controller = create_controller(
            TrafficLightType.STANDARD, ConsoleDisplayService(), timer
        )

        print("\n=== Testing State Transitions ===")
        controller.timeout_expired()  # GREEN -> YELLOW
        controller.timeout_expired()  # YELLOW -> RED
        controller.timeout_expired()  # RED -> RED_YELLOW
        controller.timeout_expired()  # RED_YELLOW -> GREEN

        print("\n=== Testing Pedestrian Button ===")
        controller.button_pressed()
        controller.timeout_expired()  # GREEN -> YELLOW
        controller.timeout_expired()  # YELLOW -> WALK_PREP
        controller.timeout_expired()  # WALK_PREP -> WALK
        controller.timeout_expired()  # WALK -> WALK_FINISH
        controller.timeout_expired()  # WALK_FINISH -> RED_YELLOW

        print("\n=== Example completed successfully! ===")
    return controller


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the traffic light demo.")
    parser.parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())