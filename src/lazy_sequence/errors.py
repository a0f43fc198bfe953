"""Exception hierarchy for lazy sequences."""


class SequenceError(RuntimeError):
    """Base class for errors raised by the sequence machinery itself."""


class InvalidTransition(SequenceError):
    """A value was produced after the sequence had already finished."""


class NoValue(SequenceError):
    """The current value was requested while no value is held."""


class AlreadyFinished(SequenceError):
    """``advance()`` was called on a finished sequence."""


class SequenceDisposed(SequenceError):
    """The handle was closed, or its ownership was moved to another handle."""
