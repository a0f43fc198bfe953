"""Lazy Sequence - pull values one at a time from a suspended producer."""

__version__ = "0.1.0"

from .consumers import ListCollector, SumConsumer, drive
from .context import ProducerContext
from .cursor import SequenceCursor, SequenceIterator
from .errors import (
    AlreadyFinished,
    InvalidTransition,
    NoValue,
    SequenceDisposed,
    SequenceError,
)
from .progress import Finished, HasValue, NotStarted, Phase, ProgressState
from .protocols import Consumer, LoggerProtocol
from .sequence import Sequence, sequence

__all__ = [
    # Core
    "Sequence",
    "sequence",
    "ProducerContext",
    "ProgressState",
    "Phase",
    "NotStarted",
    "HasValue",
    "Finished",
    # Iteration
    "SequenceCursor",
    "SequenceIterator",
    # Errors
    "SequenceError",
    "InvalidTransition",
    "NoValue",
    "AlreadyFinished",
    "SequenceDisposed",
    # Protocols
    "Consumer",
    "LoggerProtocol",
    # Consumers
    "SumConsumer",
    "ListCollector",
    "drive",
]
