"""Abstract interfaces for state machines, transitions, observers and services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, List, TypeVar

S = TypeVar("S", bound=Hashable)
E = TypeVar("E", bound=Hashable)
C = TypeVar("C")


class ActionHandler(ABC, Generic[S, E]):
    """Reacts to a processed event, whether or not the state changed."""

    @abstractmethod
    def handle(self, current_state: S, event: E, next_state: S) -> None:
        """Handle the move from ``current_state`` to ``next_state`` on ``event``."""


class StateTransition(ABC, Generic[S, E]):
    """A transition from one state to another, triggered by an event."""

    @property
    @abstractmethod
    def from_state(self) -> S:
        """State the transition starts from."""

    @property
    @abstractmethod
    def trigger_event(self) -> E:
        """Event that fires the transition."""

    @property
    @abstractmethod
    def to_state(self) -> S:
        """State the transition leads to."""

    @abstractmethod
    def can_transition(self, current_state: S, event: E) -> bool:
        """Return True if this transition applies to the state and event."""


class BaseStateMachine(ABC, Generic[S, E]):
    """A state machine driven by events."""

    @property
    @abstractmethod
    def current_state(self) -> S:
        """The state the machine is in."""

    @abstractmethod
    def process_event(self, event: E) -> bool:
        """Apply ``event``; return True if the state changed."""

    @abstractmethod
    def next_state(self, current_state: S, event: E) -> S:
        """State that ``event`` would lead to from ``current_state``."""

    @abstractmethod
    def add_transition(self, transition: StateTransition[S, E]) -> None:
        """Register a transition."""

    @abstractmethod
    def set_state(self, state: S) -> None:
        """Force the machine into ``state``."""

    @abstractmethod
    def all_states(self) -> List[S]:
        """Every state known to the machine."""

    @abstractmethod
    def all_events(self) -> List[E]:
        """Every event known to the machine."""


class Observer(ABC, Generic[S, E]):
    """Receives notifications about state transitions."""

    @abstractmethod
    def on_state_transition(self, from_state: S, event: E, to_state: S) -> None:
        """Called after an event has been processed."""


class Subject(ABC, Generic[S, E]):
    """Keeps observers and notifies them of transitions."""

    @abstractmethod
    def add_observer(self, observer: Observer[S, E]) -> None:
        """Start notifying ``observer``."""

    @abstractmethod
    def remove_observer(self, observer: Observer[S, E]) -> None:
        """Stop notifying ``observer``."""

    @abstractmethod
    def notify_observers(self, from_state: S, event: E, to_state: S) -> None:
        """Notify every observer of a transition."""


class DisplayService(ABC, Generic[C]):
    """Presents a system context to the user."""

    @abstractmethod
    def show_state(self, ctx: C) -> None:
        """Show ``ctx``."""


class TimerService(ABC):
    """Starts timeouts measured in whole seconds."""

    @abstractmethod
    def start_timeout(self, duration_sec: int) -> None:
        """Start a timeout of ``duration_sec`` seconds."""