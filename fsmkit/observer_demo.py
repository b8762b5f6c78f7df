"""Observer-based traffic light demo with a pedestrian crossing and timing analysis."""

from __future__ import annotations

import argparse
import sys
import time
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Tuple

from .machine import RuntimeStateMachine
from .observable_traffic import TrafficController
from .services import FunctionTimerService
from .traffic_display import ConsoleDisplayService
from .traffic_models import TrafficEvent, TrafficState
from .traffic_observers import (
    ConsoleLoggerObserver,
    DisplayObserver,
    FileLoggerObserver,
    PedestrianObserver,
    TimerObserver,
)
from .transitions import ConditionalStateTransition, SimpleStateTransition

DEFAULT_LOG_PATH = "traffic_observer_demo.log"

S = TrafficState
E = TrafficEvent

Observers = Tuple[
    ConsoleLoggerObserver,
    DisplayObserver,
    TimerObserver,
    PedestrianObserver,
    FileLoggerObserver,
]


def create_state_machine() -> RuntimeStateMachine:
    """Create an empty traffic light machine starting at CAR_GREEN."""
    machine = RuntimeStateMachine(S.CAR_GREEN)
    print(f"Creating state machine with initial state: {S.CAR_GREEN}")
    return machine


def create_controller(state_machine: RuntimeStateMachine) -> TrafficController:
    """Wrap ``state_machine`` in an observable traffic controller."""
    controller = TrafficController(state_machine)
    print("Traffic controller created")
    print(f"Current state: {controller.current_state}")
    return controller


def create_display_service() -> ConsoleDisplayService:
    """Create a plain console display."""
    service = ConsoleDisplayService()
    print("Display service created")
    return service


def create_timer_service() -> FunctionTimerService:
    """Create a timer that blocks for each requested duration."""
    service = FunctionTimerService(lambda duration: time.sleep(duration))
    print("Timer service created")
    return service


def create_observers(
    display_service: ConsoleDisplayService,
    timer_service: FunctionTimerService,
    log_path: str = DEFAULT_LOG_PATH,
) -> Observers:
    """Create the console, display, timer, pedestrian and file observers."""
    print("Creating observers...")

    console_logger = ConsoleLoggerObserver("", False)
    print("   Console logger observer")
    display_observer = DisplayObserver(display_service)
    print("   Display observer")
    timer_observer = TimerObserver(timer_service)
    print("   Timer observer")
    pedestrian_observer = PedestrianObserver(True)
    print("   Pedestrian observer")
    file_logger = FileLoggerObserver(log_path)
    print("   File logger observer")

    return console_logger, display_observer, timer_observer, pedestrian_observer, file_logger


def setup_transitions(
    state_machine: RuntimeStateMachine, pedestrian_observer: PedestrianObserver
) -> None:
    """Register the standard cycle; YELLOW leads to WALK_PREP on a pedestrian request."""
    print("Setting up state transitions...")
    state_machine.add_transition(SimpleStateTransition(S.CAR_GREEN, E.TIME_EXPIRED, S.CAR_YELLOW))
    state_machine.add_transition(
        ConditionalStateTransition(
            S.CAR_YELLOW,
            E.TIME_EXPIRED,
            S.CAR_RED,
            S.WALK_PREP,
            pedestrian_observer.has_request,
        )
    )
    state_machine.add_transition(
        SimpleStateTransition(S.CAR_RED, E.TIME_EXPIRED, S.CAR_RED_YELLOW)
    )
    state_machine.add_transition(
        SimpleStateTransition(S.CAR_RED_YELLOW, E.TIME_EXPIRED, S.CAR_GREEN)
    )
    state_machine.add_transition(SimpleStateTransition(S.WALK_PREP, E.TIME_EXPIRED, S.WALK))
    state_machine.add_transition(SimpleStateTransition(S.WALK, E.TIME_EXPIRED, S.WALK_FINISH))
    state_machine.add_transition(
        SimpleStateTransition(S.WALK_FINISH, E.TIME_EXPIRED, S.CAR_RED_YELLOW)
    )
    print("State transitions configured")


def attach_observers(
    controller: TrafficController,
    console_logger: ConsoleLoggerObserver,
    display_observer: DisplayObserver,
    timer_observer: TimerObserver,
    pedestrian_observer: PedestrianObserver,
    file_logger: FileLoggerObserver,
) -> None:
    """Attach the observers in notification order; the caller keeps them alive."""
    print("Attaching observers to controller...")
    controller.add_observer(console_logger)
    controller.add_observer(display_observer)
    controller.add_observer(pedestrian_observer)
    controller.add_observer(file_logger)
    controller.add_observer(timer_observer)
    print("All observers attached")


def _script(controller: TrafficController) -> List[Tuple[str, Callable[[], None]]]:
    timer = controller.timer_expired
    button = controller.button_pressed
    return [
        ("timer_expired() #1", timer),
        ("timer_expired() #2", timer),
        ("timer_expired() #3", timer),
        ("button_pressed() #1", button),
        ("button_pressed() #2", button),
        ("timer_expired() #4", timer),
        ("timer_expired() #5", timer),
        ("timer_expired() #6", timer),
        ("timer_expired() #7", timer),
        ("timer_expired() #8", timer),
        ("timer_expired() #9", timer),
        ("timer_expired() #10", timer),
    ]


def demo_pedestrian_cycle(controller: TrafficController) -> None:
    """Run a full cycle with a pedestrian request made during RED_YELLOW."""
    print("\n" + "=" * 50)
    print("DEMO: Pedestrian Crossing")
    print("=" * 50)
    for _, action in _script(controller):
        action()
    print("\nPedestrian cycle completed!")


def demo_pedestrian_cycle_with_timing(
    controller: TrafficController,
) -> List[Tuple[str, float]]:
    """Run the pedestrian cycle, print a timing table and return it.

    Each entry is an action label and the seconds elapsed since the previous
    entry; the first entry is ``START`` with zero seconds.
    """
    print("\n" + "=" * 70)
    print("DEMO: Pedestrian Crossing with Timing Analysis")
    print("=" * 70)

    records: List[Tuple[str, float]] = [("START", time.monotonic())]
    for label, action in _script(controller):
        records.append((label, time.monotonic()))
        action()

    print("\n" + "-" * 70)
    print("TIMING ANALYSIS")
    print("-" * 70)
    print(f"{'Time [HH:MM:SS:ms]':<15} | {'Action':<20} | Seconds from previous")
    print("-" * 70)

    system_start = datetime.now()
    start = records[0][1]
    table: List[Tuple[str, float]] = []
    previous = start
    for index, (label, stamp) in enumerate(records):
        wall = system_start + timedelta(seconds=stamp - start)
        clock = f"{wall:%H:%M:%S}:{wall.microsecond // 1000:03d}"
        delta = stamp - previous
        shown = "0.000 (start)" if index == 0 else f"{delta:.3f}"
        print(f"{clock:<15} | {label:<20} | {shown}")
        table.append((label, 0.0 if index == 0 else delta))
        previous = stamp

    total = records[-1][1] - start
    actions = len(records) - 1
    print("-" * 70)
    print("SUMMARY:")
    print(f"  Total actions: {actions}")
    print(f"  Total time: {total:.3f} seconds")
    print(f"  Average time per action: {total / actions:.3f} seconds")
    print("\n✅ Pedestrian cycle with timing completed!")
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the observer-based traffic light demo.")
    parser.add_argument(
        "--log-file", default=DEFAULT_LOG_PATH, help="file that receives the transition log"
    )
    args = parser.parse_args(argv)

    print("=== Traffic Light Observer Example ===")
    file_logger: Optional[FileLoggerObserver] = None
    try:
        print("\n Step 1: Creating core components")
        state_machine = create_state_machine()
        controller = create_controller(state_machine)

        print("\n Step 2: Creating services")
        display_service = create_display_service()
        timer_service = create_timer_service()

        print("\n Step 3: Creating observers")
        observers = create_observers(display_service, timer_service, args.log_file)
        console_logger, display_observer, timer_observer, pedestrian_observer, file_logger = (
            observers
        )

        print("\n Step 4: Setting up transitions")
        setup_transitions(state_machine, pedestrian_observer)

        print("\n Step 5: Attaching observers")
        attach_observers(
            controller,
            console_logger,
            display_observer,
            timer_observer,
            pedestrian_observer,
            file_logger,
        )

        print("\n All components ready! Starting demos...")
        demo_pedestrian_cycle_with_timing(controller)
    except Exception as exc:  # report any failure the way the command line expects
        print(f"\n Error: {exc}", file=sys.stderr)
        return 1
    finally:
        if file_logger is not None:
            file_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())