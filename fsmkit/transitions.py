"""Concrete state transitions."""

from __future__ import annotations

from typing import Callable, Optional

from .interfaces import E, S, StateTransition


class SimpleStateTransition(StateTransition[S, E]):
    """Unconditional transition from one state to another on an event."""

    def __init__(self, from_state: S, trigger_event: E, to_state: S) -> None:
        self._from_state = from_state
        self._trigger_event = trigger_event
        self._to_state = to_state

    @property
    def from_state(self) -> S:
        return self._from_state

    @property
    def trigger_event(self) -> E:
        return self._trigger_event

    @property
    def to_state(self) -> S:
        return self._to_state

    def can_transition(self, current_state: S, event: E) -> bool:
        return self._from_state == current_state and self._trigger_event == event

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._from_state!r}, "
            f"{self._trigger_event!r}, {self._to_state!r})"
        )


class ConditionalStateTransition(StateTransition[S, E]):
    """Transition whose target depends on a condition checked on each lookup."""

    def __init__(
        self,
        from_state: S,
        trigger_event: E,
        to_normal: S,
        to_conditional: S,
        condition: Optional[Callable[[], bool]],
    ) -> None:
        self._from_state = from_state
        self._trigger_event = trigger_event
        self._to_normal = to_normal
        self._to_conditional = to_conditional
        self._condition = condition

    @property
    def from_state(self) -> S:
        return self._from_state

    @property
    def trigger_event(self) -> E:
        return self._trigger_event

    @property
    def to_state(self) -> S:
        """The conditional target if the condition holds, else the normal one."""
        if self._condition is not None and self._condition():
            return self._to_conditional
        return self._to_normal

    def can_transition(self, current_state: S, event: E) -> bool:
        return self._from_state == current_state and self._trigger_event == event

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._from_state!r}, {self._trigger_event!r}, "
            f"{self._to_normal!r}, {self._to_conditional!r})"
        )