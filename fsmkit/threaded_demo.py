"""Traffic light application with a scripted demo and a threaded simulation."""

from __future__ import annotations

import argparse
import sys
from contextlib import redirect_stdout
from typing import List, Optional, TextIO

from .services import FunctionTimerService
from .traffic_display import AsciiDisplayService
from .traffic_executor import TrafficExecutor
from .traffic_factory import TrafficLightType, create_controller
from .traffic_models import TrafficEvent


class TrafficLightApp:
    """Wires a standard traffic light to a threaded executor."""

    def __init__(
        self, input_stream: Optional[TextIO] = None, stream: Optional[TextIO] = None
    ) -> None:
        self._stream = stream
        self._executor = TrafficExecutor(self._handle_event, self._handle_input, input_stream)
        timer = FunctionTimerService(lambda seconds: self._executor.start_timer(seconds))
        self._controller = create_controller(
            TrafficLightType.STANDARD, AsciiDisplayService(stream=stream), timer
        )

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def run_demo(self) -> None:
        """Run a scripted standard cycle, then a simple light for comparison."""
        with redirect_stdout(self._out()):
            print("=== Demo Mode ===")
            self._demo_standard()
            self._demo_simple()

    def run_simulation(self) -> None:
        """Run the light on threads until ``q`` is read from the input."""
        with redirect_stdout(self._out()):
            print("=== Simulation Mode ===")
            print("Press any key for pedestrian button, 'q' to quit")
            self._executor.start()
            self._executor.start_timer(1)
            self._executor.wait_for_completion()
            self._executor.stop()
            print("Simulation ended.")

    def _handle_event(self, event: TrafficEvent) -> None:
        if event is TrafficEvent.TIME_EXPIRED:
            self._controller.timeout_expired()
        elif event is TrafficEvent.BUTTON_PRESSED:
            self._controller.button_pressed()

    def _handle_input(self, char: str) -> None:
        if char not in ("q", "Q"):
            out = self._out()
            out.write("Pedestrian button pressed!\n")
            out.flush()
            self._executor.send_button_event()

    def _demo_standard(self) -> None:
        print("\n=== Standard Traffic Light Demo ===")
        controller = self._controller
        controller.timeout_expired()  # GREEN -> YELLOW
        controller.timeout_expired()  # YELLOW -> RED
        controller.timeout_expired()  # RED -> RED_YELLOW
        controller.timeout_expired()  # RED_YELLOW -> GREEN

        controller.button_pressed()
        controller.timeout_expired()  # GREEN -> YELLOW
        controller.timeout_expired()  # YELLOW -> WALK_PREP
        controller.timeout_expired()  # WALK_PREP -> WALK
        controller.timeout_expired()  # WALK -> WALK_FINISH
        controller.timeout_expired()  # WALK_FINISH -> RED_YELLOW

    def _demo_simple(self) -> None:
        print("\n=== Simple Traffic Light Demo ===")
        timer = FunctionTimerService(lambda seconds: print(f"Simple timer: {seconds}s"))
        simple = create_controller(
            TrafficLightType.SIMPLE, AsciiDisplayService(stream=self._stream), timer
        )
        simple.timeout_expired()  # GREEN -> YELLOW
        simple.timeout_expired()  # YELLOW -> RED
        simple.timeout_expired()  # RED -> GREEN


def _parse_choice(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the traffic light application.")
    parser.add_argument("choice", nargs="?", help="1 for the demo, 2 for the simulation")
    args = parser.parse_args(argv)

    if args.choice is None:
        print("Choose mode:")
        print("1. Demo")
        print("2. Simulation")
        print("Enter choice (1 or 2): ", end="", flush=True)
        choice = _parse_choice(sys.stdin.readline())
    else:
        choice = _parse_choice(args.choice)

    try:
        app = TrafficLightApp()
        if choice == 1:
            app.run_demo()
        else:
            app.run_simulation()
    except Exception as exc:  # report any failure the way the command line expects
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())