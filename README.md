# fsmkit

A small framework for runtime-configurable finite state machines. Two
simulations are built on it: a traffic light with a pedestrian crossing and
a simple elevator. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The framework

- `fsmkit.interfaces` defines the abstract types: `ActionHandler`,
  `StateTransition`, `BaseStateMachine`, `Observer`, `Subject`,
  `DisplayService` and `TimerService`.
- `fsmkit.transitions.SimpleStateTransition` always leads to a single target
  state. `ConditionalStateTransition` leads to one of two targets. It checks
  its condition callable each time the target is looked up, and uses the
  conditional target when the condition returns true.
- `fsmkit.machine.RuntimeStateMachine` (also available as `StateMachine`)
  holds the current state and a list of transitions. The first transition
  that matches the current state and the event decides the next state. If
  none matches, the state stays the same. `process_event` returns whether
  the state changed. `all_states()` and `all_events()` list every state and
  event the machine has seen, ordered by enum value.
- `fsmkit.controllers.BaseController` (also available as `Controller`) feeds
  events into a machine. After every event it calls its action handler with
  `(from, event, to)`, even when the state did not change.
  `ObservableController` sends the same triple to every attached observer.
  It holds observers by weak reference, so the caller has to keep them
  alive.
- `fsmkit.services.FunctionTimerService` wraps any callable as a timer
  service.

```python
from enum import Enum

from fsmkit.machine import RuntimeStateMachine
from fsmkit.transitions import SimpleStateTransition


class State(Enum):
    A = 0
    B = 1


class Event(Enum):
    GO = 0


sm = RuntimeStateMachine(State.A)
sm.add_transition(SimpleStateTransition(State.A, Event.GO, State.B))
assert sm.process_event(Event.GO)
assert sm.current_state is State.B
```

## Traffic light

- `fsmkit.traffic_models` has `TrafficState`, `TrafficEvent`,
  `TrafficContext`, `LightTimings` and `default_traffic_contexts()`.
- `fsmkit.traffic_factory.create_controller(kind, display_service,
  timer_service)` builds a `TrafficLightController` of one of two kinds:
  - `TrafficLightType.STANDARD`: red goes through `CAR_RED_YELLOW` before
    green.
  - `TrafficLightType.SIMPLE`: red goes straight back to green, and the
    yellow phase is longer.
- A pressed pedestrian button sends the light from yellow through
  `WALK_PREP`, `WALK` and `WALK_FINISH`. The request is cleared on entry to
  `WALK_FINISH`.
- `fsmkit.traffic_display` provides two displays. `ConsoleDisplayService`
  prints plain text. `AsciiDisplayService` draws the light with optional
  ANSI colours. Each display's `render(ctx)` returns the text it would
  print.
- `fsmkit.traffic_executor.TrafficExecutor` runs a worker, a timer and a
  keyboard reader on threads. Timer expiries and button events are queued
  and handled on the worker thread. Reading `q` or `Q` ends the run.

## Elevator

- `fsmkit.elevator_factory.create_elevator_controller(kind, display_service,
  timer_service, min_floor, max_floor)` builds an `ElevatorController` of
  kind `ElevatorType.BASIC` or `ElevatorType.ADVANCED`. The advanced kind
  also reopens the doors when an obstacle is detected.
- The controller keeps a set of floor requests and aims for the closest
  requested floor. On a tie it picks the lower floor.
- It ignores a request that is out of range or equal to the current floor.

## Observer-based traffic light

`fsmkit.observable_traffic.TrafficController` is an observable controller.
The observers from `fsmkit.traffic_observers` attach to it:

- `ConsoleLoggerObserver` and `FileLoggerObserver` log transitions.
  `FileLoggerObserver` is a context manager that writes session start and
  end markers.
- `DisplayObserver` shows the new state.
- `TimerObserver` starts the new state's timeout.
- `PedestrianObserver` records button presses and clears them when the walk
  phase ends.

## Commands

```
fsmkit-traffic                        # scripted standard traffic light run
fsmkit-elevator                       # scripted basic elevator run
fsmkit-traffic-threaded [1|2]         # 1: scripted demo, 2: live simulation
fsmkit-traffic-observer [--log-file PATH]
```

- `fsmkit-traffic-threaded` asks for the mode on standard input when none is
  given. Anything that is not `1` selects the simulation. In the simulation,
  any other character pressed counts as the pedestrian button, and `q` quits.
- `fsmkit-traffic-observer` runs the pedestrian cycle and prints a timing
  table. Its timer service really sleeps for each state's duration, so a run
  takes some time. It appends its log to `traffic_observer_demo.log` in the
  current directory unless `--log-file` is given.

## Limitations

- `ElevatorActionHandler` starts with no per-state configuration. Until
  states are given a context through `configure_state` or
  `set_state_timeout`, it shows nothing on the display and starts no timers.
  The elevator command therefore prints transitions but no state screens.
- In the basic elevator transitions, the first `DOORS_CLOSING` /
  `TIMER_EXPIRED` transition always matches. That transition leads either to
  `MOVING_UP` or to `IDLE`, so the elevator never enters `MOVING_DOWN`
  through the closing doors.
- The simulations keep no state between runs. The observer command's log
  file is the only output written to disk.