"""Iteration adapters over a sequence handle."""

from typing import TYPE_CHECKING, Generic, Iterator, Optional

from .errors import AlreadyFinished, NoValue
from .progress import V

if TYPE_CHECKING:
    from .sequence import Sequence


class SequenceCursor(Generic[V]):
    """
    Has-next / dereference / advance view over a sequence.

    A cursor never owns the sequence it points at. An unbound cursor is the
    end sentinel. Two cursors compare equal when they point at the same
    sequence or when both are at the end, so ``cursor != seq.end()`` works as
    a loop test for any live cursor.
    """

    def __init__(self, sequence: Optional["Sequence[V]"] = None):
        self._sequence = sequence

    def __repr__(self) -> str:
        if self._sequence is None:
            return "SequenceCursor(<end>)"
        return f"SequenceCursor({self._sequence!r})"

    @property
    def sequence(self) -> Optional["Sequence[V]"]:
        return self._sequence

    def at_end(self) -> bool:
        """
        Return whether there is nothing left to read.

        A bound cursor over a failed sequence re-raises the failure instead of
        reporting the end, so a begin/end loop never drops it.
        """
        if self._sequence is None:
            return True
        finished = self._sequence.is_finished()
        if finished:
            self._sequence.rethrow_if_failed()
        return finished

    def get(self) -> V:
        """Return the current value of the bound sequence."""
        if self._sequence is None:
            raise NoValue("The end cursor has no value.")
        return self._sequence.value()

    def advance(self) -> "SequenceCursor[V]":
        """Advance the bound sequence and return this cursor.

        Re-raises the producer's failure when the step lands on it.
        """
        if self._sequence is None:
            raise AlreadyFinished("The end cursor can't advance.")
        self._sequence.advance()
        self._sequence.rethrow_if_failed()
        return self

    def __eq__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self._sequence is other._sequence or (self.at_end() and other.at_end())

    __hash__ = None


class SequenceIterator(Iterator[V]):
    """
    Python iterator protocol over a sequence.

    The first ``next()`` reads the current value, which starts the producer;
    every later call advances first. A producer failure is re-raised instead
    of ending the iteration, and keeps being re-raised on further calls.
    """

    def __init__(self, sequence: "Sequence[V]"):
        self._cursor: SequenceCursor[V] = SequenceCursor(sequence)
        self._primed = False
        self._exhausted = False

    def __iter__(self) -> "SequenceIterator[V]":
        return self

    def __next__(self) -> V:
        sequence = self._cursor.sequence
        if self._exhausted:
            sequence.rethrow_if_failed()
            raise StopIteration

        if self._primed:
            sequence.advance()
        else:
            self._primed = True

        if sequence.is_finished():
            self._exhausted = True
            sequence.rethrow_if_failed()
            raise StopIteration
        return self._cursor.get()
