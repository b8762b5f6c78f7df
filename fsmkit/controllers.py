"""Controllers that drive a state machine and report its transitions."""

from __future__ import annotations

import weakref
from typing import Generic, List

from .interfaces import (
    ActionHandler,
    BaseStateMachine,
    E,
    Observer,
    S,
    Subject,
)


class BaseController(Generic[S, E]):
    """Feeds events to a state machine and passes each result to a handler."""

    def __init__(
        self,
        state_machine: BaseStateMachine[S, E],
        action_handler: ActionHandler[S, E],
    ) -> None:
        self._state_machine = state_machine
        self._action_handler = action_handler

    def handle_event(self, event: E) -> None:
        """Process ``event`` and call the action handler, even without a change."""
        current = self._state_machine.current_state
        new_state = current
        if self._state_machine.process_event(event):
            new_state = self._state_machine.current_state
        self._action_handler.handle(current, event, new_state)

    @property
    def state_machine(self) -> BaseStateMachine[S, E]:
        return self._state_machine

    @property
    def action_handler(self) -> ActionHandler[S, E]:
        return self._action_handler


Controller = BaseController


class ObservableController(Subject[S, E]):
    """Controller that notifies weakly held observers of every processed event."""

    def __init__(self, state_machine: BaseStateMachine[S, E]) -> None:
        self._state_machine = state_machine
        self._observers: List[weakref.ref] = []

    def add_observer(self, observer: Observer[S, E]) -> None:
        self._observers.append(weakref.ref(observer))

    def remove_observer(self, observer: Observer[S, E]) -> None:
        self._observers = [ref for ref in self._observers if ref() is not observer]

    def handle_event(self, event: E) -> None:
        """Process ``event`` and notify observers, even without a change."""
        current = self._state_machine.current_state
        new_state = current
        if self._state_machine.process_event(event):
            new_state = self._state_machine.current_state
        self.notify_observers(current, event, new_state)

    def notify_observers(self, from_state: S, event: E, to_state: S) -> None:
        self._observers = [ref for ref in self._observers if ref() is not None]
        for ref in list(self._observers):
            observer = ref()
            if observer is not None:
                observer.on_state_transition(from_state, event, to_state)

    @property
    def state_machine(self) -> BaseStateMachine[S, E]:
        return self._state_machine