"""Owning handle over one lazily-run producer."""

from functools import wraps
from typing import Callable, Generic, Iterator, Optional

from .context import ProducerContext
from .cursor import SequenceCursor, SequenceIterator
from .errors import AlreadyFinished, SequenceDisposed
from .progress import V
from .protocols import LoggerProtocol


class Sequence(Generic[V]):
    """
    Pull-based handle over a producer context.

    The handle is the only owner of its context. Do not share it: hand it
    over with ``move()``, which disposes the original. Every entry point of a
    closed or moved-from handle raises ``SequenceDisposed``.

    Example:
        numbers = one_through(3)
        while not numbers.is_finished():
            print(numbers.value())
            numbers.advance()
    """

    def __init__(self, context: ProducerContext[V]):
        self._context: Optional[ProducerContext[V]] = context

    @classmethod
    def of(
        cls,
        body: Callable[..., Iterator[V]],
        *args,
        **kwargs,
    ) -> "Sequence[V]":
        """Create a handle that will run ``body(*args, **kwargs)`` on demand."""
        return cls(ProducerContext(body, args, kwargs))

    def __repr__(self) -> str:
        if self._context is None:
            return "Sequence(<disposed>)"
        return f"Sequence({self._context.name}, {self._context.progress.phase.value})"

    def __copy__(self):
        raise TypeError("Sequence handles can't be copied; use move() to hand one over.")

    def __deepcopy__(self, memo):
        raise TypeError("Sequence handles can't be copied; use move() to hand one over.")

    @property
    def disposed(self) -> bool:
        return self._context is None

    def _owned_context(self) -> ProducerContext[V]:
        if self._context is None:
            raise SequenceDisposed("Sequence handle was closed or moved.")
        return self._context

    def _start_if_needed(self, context: ProducerContext[V]) -> None:
        if not context.is_started():
            context.resume()

    def is_finished(self) -> bool:
        """Return whether the producer is done, starting it first if needed."""
        context = self._owned_context()
        self._start_if_needed(context)
        return context.is_finished()

    def advance(self) -> None:
        """
        Resume the producer once.

        On a handle that has not started yet this is the first resume, which
        lands on the first value.

        Raises:
            AlreadyFinished: If the producer has finished
        """
        context = self._owned_context()
        if context.is_started() and context.is_finished():
            raise AlreadyFinished("Finished, can't advance.")
        context.resume()

    def value(self) -> V:
        """
        Return the current value, starting the producer first if needed.

        Raises:
            NoValue: If no value is held
            Exception: The producer's failure, on every call after it failed
        """
        context = self._owned_context()
        self._start_if_needed(context)
        return context.progress.value()

    def take_value(self) -> V:
        """Return the current value and drop it from the handle."""
        value = self.value()
        self._context.progress.clear_any_value()
        return value

    def has_failure(self) -> bool:
        return self._owned_context().progress.has_failure()

    def rethrow_if_failed(self) -> None:
        self._owned_context().progress.rethrow_if_failed()

    def move(self) -> "Sequence[V]":
        """Transfer ownership of the producer to a new handle."""
        context = self._owned_context()
        self._context = None
        return type(self)(context)

    def close(self) -> None:
        """Tear down the producer. Later calls are no-ops."""
        context, self._context = self._context, None
        if context is not None:
            context.close()

    def __enter__(self) -> "Sequence[V]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __del__(self):
        if getattr(self, "_context", None) is not None:
            self.close()

    def begin(self) -> SequenceCursor[V]:
        return SequenceCursor(self)

    def end(self) -> SequenceCursor[V]:
        return SequenceCursor()

    def __iter__(self) -> SequenceIterator[V]:
        self._owned_context()
        return SequenceIterator(self)


def sequence(
    body: Optional[Callable[..., Iterator[V]]] = None,
    *,
    logger: Optional[LoggerProtocol] = None,
):
    """
    Turn a generator function into a factory of ``Sequence`` handles.

    Can be used bare (``@sequence``) or with options
    (``@sequence(logger=my_logger)``).

    Args:
        body: Producer routine
        logger: Logger used by the producer contexts

    Returns:
        A callable with the body's signature returning ``Sequence`` handles
    """

    def decorate(fn: Callable[..., Iterator[V]]) -> Callable[..., Sequence[V]]:
        @wraps(fn)
        def factory(*args, **kwargs) -> Sequence[V]:
            return Sequence(ProducerContext(fn, args, kwargs, logger=logger))

        return factory

    if body is None:
        return decorate
    return decorate(body)
