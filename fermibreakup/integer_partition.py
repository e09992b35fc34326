"""Enumeration of ordered integer partitions with a fixed number of terms."""

from __future__ import annotations

from collections.abc import Iterator


def integer_partitions(number: int, terms_count: int, base: int = 1) -> Iterator[list[int]]:
    """Yield every partition of ``number`` into ``terms_count`` terms, each at least ``base``.

    Every partition is yielded as a fresh list in non-increasing order.
    Nothing is yielded when no such partition exists.
    """
    if terms_count == 0 or number == 0 or number < base * terms_count:
        return

    partition = [base] * terms_count
    partition[0] = number - base * (terms_count - 1)

    while True:
        yield list(partition)

        accumulated = 0
        for idx in range(1, terms_count):
            if partition[0] >= partition[idx] + 2:
                partition[0] -= 1
                partition[idx] += 1
                new_value = partition[idx]
                partition[1:idx] = [new_value] * (idx - 1)
                partition[0] += accumulated - new_value * (idx - 1)
                break
            accumulated += partition[idx]
        else:
            return


class IntegerPartition:
    """A re-iterable collection of the partitions of a number into a fixed count of terms."""

    def __init__(self, number: int, terms_count: int, base: int = 1) -> None:
        self.number = number
        self.terms_count = terms_count
        self.base = base

    def __iter__(self) -> Iterator[list[int]]:
        return integer_partitions(self.number, self.terms_count, self.base)

    def __repr__(self) -> str:
        return (
            f"IntegerPartition(number={self.number}, "
            f"terms_count={self.terms_count}, base={self.base})"
        )