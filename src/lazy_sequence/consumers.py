"""Stateful consumers that sequence values can be pushed into."""

from typing import Any, Iterable, List

from .protocols import Consumer


class SumConsumer:
    """Adds up every value it is given."""

    def __init__(self, start: Any = 0):
        self._sum = start

    def process(self, value: Any) -> None:
        self._sum += value

    def result(self) -> Any:
        return self._sum


class ListCollector:
    """Collects values in arrival order."""

    def __init__(self):
        self._items: List[Any] = []

    def process(self, value: Any) -> None:
        self._items.append(value)

    def result(self) -> List[Any]:
        return list(self._items)


def drive(values: Iterable[Any], consumer: Consumer) -> Any:
    """
    Push every value into ``consumer``.

    Args:
        values: A Sequence, or any iterable
        consumer: Object implementing the Consumer protocol

    Returns:
        ``consumer.result()`` after the last value
    """
    for value in values:
        consumer.process(value)
    return consumer.result()
