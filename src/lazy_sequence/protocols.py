"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol


class Consumer(Protocol):
    """Protocol for objects that consume sequence values one at a time."""

    def process(self, value: Any) -> None:
        """Consume a single value."""
        ...

    def result(self) -> Any:
        """Return what the consumer computed from the values so far."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
