"""Suspendable execution of a producer body."""

import logging
from typing import Any, Callable, Dict, Generic, Iterator, Optional, Tuple

from .errors import AlreadyFinished
from .progress import ProgressState, V
from .protocols import LoggerProtocol


class ProducerContext(Generic[V]):
    """
    Runs a producer body one yield at a time.

    The body is not called until the first ``resume()``, so creating a context
    has no observable effect. Each resume runs the body up to its next yield,
    its end, or an exception, and records exactly one of those outcomes in the
    progress state.

    ``close()`` tears the body down at its current suspension point. Python
    delivers ``GeneratorExit`` there, so only the body's ``finally`` blocks and
    ``with`` exits run; no further producer statement executes.
    """

    def __init__(
        self,
        body: Callable[..., Iterator[V]],
        args: Tuple = (),
        kwargs: Optional[Dict[str, Any]] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize a suspended context.

        Args:
            body: Producer routine, usually a generator function
            args: Positional arguments for the body
            kwargs: Keyword arguments for the body
            logger: Logger instance (defaults to module logger)
        """
        self._body = body
        self._args = args
        self._kwargs = kwargs or {}
        self._frames: Optional[Iterator[V]] = None
        self._closed = False
        self.progress: ProgressState[V] = ProgressState()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return getattr(self._body, "__qualname__", repr(self._body))

    @property
    def closed(self) -> bool:
        return self._closed

    def is_started(self) -> bool:
        return not self.progress.is_in_startup_state()

    def is_finished(self) -> bool:
        return self.progress.is_in_finished_state()

    def resume(self) -> None:
        """
        Run the body until it yields, returns or raises.

        Raises:
            AlreadyFinished: If the body already finished or the context was closed
        """
        if self._closed or self.is_finished():
            raise AlreadyFinished(f"Producer {self.name} has finished, can't resume.")

        try:
            if self._frames is None:
                self._logger.debug(f"Starting producer {self.name}")
                self._frames = iter(self._body(*self._args, **self._kwargs))
            value = next(self._frames)
        except StopIteration:
            self.progress.set_finished_normally()
            self._logger.debug(f"Producer {self.name} finished")
            return
        except Exception as e:
            self.progress.set_failure(e)
            return
        except BaseException as e:
            # KeyboardInterrupt and friends still end the producer, but must
            # reach the caller right away.
            self.progress.set_failure(e)
            raise

        self.progress.set_value(value)

    def close(self) -> None:
        """
        Release the body exactly once, whatever phase it is in.

        A body that is suspended mid-sequence is unwound without being resumed.
        Any exception raised by the body's cleanup propagates to the caller.
        """
        if self._closed:
            return
        self._closed = True

        frames, self._frames = self._frames, None
        self.progress.set_finished_normally()
        close = getattr(frames, "close", None)
        if close is not None:
            self._logger.debug(f"Tearing down producer {self.name}")
            close()
