"""Ready-made producers."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from .sequence import sequence


@sequence
def one_through(n: int) -> Iterator[int]:
    """Yield 1, 2, ..., n."""
    for i in range(1, n + 1):
        yield i


@sequence
def squares(n: int) -> Iterator[int]:
    """Yield the squares 1, 4, ..., n*n."""
    for i in range(1, n + 1):
        yield i * i


@sequence
def running_sums(n: int) -> Iterator[int]:
    """Yield the running sums of 1..n: 1, 3, 6, ..."""
    total = 0
    for i in range(1, n + 1):
        total += i
        yield total


@dataclass
class ResourceCounter:
    """Counts acquisitions and releases of a scoped resource."""

    acquired: int = 0
    released: int = 0

    @property
    def held(self) -> int:
        return self.acquired - self.released

    @contextmanager
    def hold(self):
        """Acquire for the duration of a ``with`` block."""
        self.acquired += 1
        try:
            yield self
        finally:
            self.released += 1


@sequence
def guarded(values: Iterator, counter: ResourceCounter) -> Iterator:
    """
    Yield ``values`` while holding a resource from ``counter``.

    The resource is released once however the sequence ends: run to
    completion, failed, or closed mid-way.
    """
    with counter.hold():
        for value in values:
            yield value
