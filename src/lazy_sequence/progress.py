"""Progress state of a lazy sequence: not started, holding a value, or finished."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from .errors import InvalidTransition, NoValue

V = TypeVar("V")


class Phase(str, Enum):
    """Phase enumeration, one per variant of the progress state."""

    STARTUP = "startup"
    VALUE = "value"
    FINISHED = "finished"


@dataclass(frozen=True)
class NotStarted:
    """The producer body has not run yet."""


@dataclass(frozen=True)
class HasValue(Generic[V]):
    """
    The producer is suspended at a yield and holds the yielded value.

    ``cleared`` is set once the value was taken; ``value`` is then None.
    """

    value: Optional[V] = None
    cleared: bool = False


@dataclass(frozen=True)
class Finished:
    """The producer ran to completion, or stopped with ``error``."""

    error: Optional[BaseException] = None


State = Union[NotStarted, HasValue, Finished]


class ProgressState(Generic[V]):
    """
    Tracks exactly one of NotStarted, HasValue or Finished for one producer.

    Transitions only move forward: NotStarted -> HasValue (repeatable, each
    yield overwrites the held value) and any phase -> Finished. Nothing leaves
    Finished.
    """

    def __init__(self):
        self._state: State = NotStarted()

    def __repr__(self) -> str:
        return f"ProgressState({self._state!r})"

    @property
    def state(self) -> State:
        return self._state

    @property
    def phase(self) -> Phase:
        state = self._state
        if isinstance(state, NotStarted):
            return Phase.STARTUP
        if isinstance(state, HasValue):
            return Phase.VALUE
        if isinstance(state, Finished):
            return Phase.FINISHED
        raise TypeError(f"Unknown progress state: {state!r}")

    def is_in_startup_state(self) -> bool:
        return self.phase is Phase.STARTUP

    def is_in_value_state(self) -> bool:
        return self.phase is Phase.VALUE

    def is_in_finished_state(self) -> bool:
        return self.phase is Phase.FINISHED

    def set_value(self, value: V) -> None:
        """
        Store a freshly yielded value.

        Args:
            value: The value the producer yielded

        Raises:
            InvalidTransition: If the state is already Finished
        """
        if self.is_in_finished_state():
            raise InvalidTransition("Can't go back from finished state.")
        self._state = HasValue(value)

    def set_failure(self, failure: BaseException) -> None:
        """Finish with ``failure``; allowed from any phase."""
        self._state = Finished(failure)

    def set_finished_normally(self) -> None:
        """Finish without a failure. A no-op when already finished."""
        if not self.is_in_finished_state():
            self._state = Finished()

    def clear_any_value(self) -> None:
        """Drop the held value, if any, without leaving the value phase."""
        if self.is_in_value_state():
            self._state = HasValue(cleared=True)

    def has_value(self) -> bool:
        state = self._state
        return isinstance(state, HasValue) and not state.cleared

    def has_failure(self) -> bool:
        state = self._state
        return isinstance(state, Finished) and state.error is not None

    def rethrow_if_failed(self) -> None:
        """Re-raise the stored failure, if there is one."""
        state = self._state
        if isinstance(state, Finished) and state.error is not None:
            raise state.error

    def value(self) -> V:
        """
        Return the held value.

        A stored failure takes priority over everything else and is re-raised
        on every call.

        Returns:
            The most recently yielded value

        Raises:
            NoValue: If no value is held and no failure is stored
        """
        self.rethrow_if_failed()
        state = self._state
        if isinstance(state, HasValue) and not state.cleared:
            return state.value
        raise NoValue("No value available.")
