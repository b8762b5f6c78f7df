"""Runtime-configurable state machine."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List

from .interfaces import BaseStateMachine, E, S, StateTransition


def _sort_key(item):
    return item.value if isinstance(item, Enum) else item


def _ordered(items: Iterable) -> list:
    items = list(items)
    try:
        return sorted(items, key=_sort_key)
    except TypeError:
        return items


class RuntimeStateMachine(BaseStateMachine[S, E]):
    """State machine whose transitions are registered at run time.

    The first registered transition that matches the current state and the
    event decides the next state.
    """

    def __init__(self, initial_state: S) -> None:
        self._current_state = initial_state
        self._transitions: List[StateTransition[S, E]] = []
        self._states: Dict[S, None] = {initial_state: None}
        self._events: Dict[E, None] = {}

    @property
    def current_state(self) -> S:
        return self._current_state

    def set_state(self, state: S) -> None:
        self._states.setdefault(state)
        self._current_state = state

    def add_transition(self, transition: StateTransition[S, E]) -> None:
        self._states.setdefault(transition.from_state)
        self._states.setdefault(transition.to_state)
        self._events.setdefault(transition.trigger_event)
        self._transitions.append(transition)

    def next_state(self, current_state: S, event: E) -> S:
        return next(
            (
                t.to_state
                for t in self._transitions
                if t.can_transition(current_state, event)
            ),
            current_state,
        )

    def process_event(self, event: E) -> bool:
        upcoming = self.next_state(self._current_state, event)
        if upcoming != self._current_state:
            self._current_state = upcoming
            return True
        return False

    def all_states(self) -> List[S]:
        return _ordered(self._states)

    def all_events(self) -> List[E]:
        return _ordered(self._events)


StateMachine = RuntimeStateMachine