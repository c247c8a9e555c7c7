"""Fixed-size hash tables of ten slots: chained directories and probing tables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

SIZE = 10


class TableFullError(Exception):
    """Raised when no free slot can be found for a new entry."""


def _check_key(key: int) -> None:
    if key <= 0:
        raise ValueError("keys must be positive; 0 marks an empty slot")


@dataclass
class _Record:
    name: str = "-"
    number: int = 0
    chain: int = -1

    @property
    def empty(self) -> bool:
        return self.number == 0

    def as_row(self) -> tuple[str, int, int]:
        return (self.name, self.number, self.chain)


class ChainedDirectory:
    """Names and numbers with linear probing and chain links between colliding records."""

    def __init__(self) -> None:
        self._slots = [_Record() for _ in range(SIZE)]

    def insert(self, name: str, number: int) -> int:
        """Store a record and return the slot it went into."""
        _check_key(number)
        slots = self._slots
        index = start = number % SIZE
        if slots[index].empty:
            slots[index] = _Record(name, number)
            return index
        prev = index
        while not slots[index].empty:
            index = (index + 1) % SIZE
            if index == start:
                raise TableFullError("hash table full")
            if slots[prev].chain != -1:
                prev = slots[prev].chain
        slots[index] = _Record(name, number)
        slots[prev].chain = index
        return index

    def rows(self) -> list[tuple[str, int, int]]:
        """``(name, number, chain)`` for each slot; an empty slot is ``("-", 0, -1)``."""
        return [record.as_row() for record in self._slots]


class PhoneBook:
    """A chained directory, without replacement, that supports search and delete."""

    def __init__(self) -> None:
        self._slots = [_Record() for _ in range(SIZE)]

    def insert(self, name: str, number: int) -> int:
        """Store a record and return the slot it went into."""
        _check_key(number)
        slots = self._slots
        index = number % SIZE
        if slots[index].empty:
            slots[index] = _Record(name, number)
            return index
        prev = index
        for _ in range(SIZE):
            if slots[index].empty:
                break
            index = (index + 1) % SIZE
        else:
            raise TableFullError("hash table full")
        slots[index] = _Record(name, number)
        while slots[prev].chain != -1:
            prev = slots[prev].chain
        slots[prev].chain = index
        return index

    def _walk(self, number: int):
        prev = -1
        index = number % SIZE
        while index != -1:
            yield prev, index
            prev = index
            index = self._slots[index].chain

    def search(self, number: int) -> tuple[int, str] | None:
        """Return ``(slot, name)`` for ``number``, or None if it is not stored."""
        for _, index in self._walk(number):
            record = self._slots[index]
            if record.number == number:
                return index, record.name
        return None

    def delete(self, number: int) -> None:
        """Remove the record for ``number``; raise KeyError if it is not stored."""
        slots = self._slots
        for prev, index in self._walk(number):
            record = slots[index]
            if record.number != number:
                continue
            if record.chain == -1:
                record.name, record.number = "-", 0
                if prev != -1:
                    slots[prev].chain = -1
                return
            following = record.chain
            slots[index] = slots[following]
            slots[following] = _Record()
            return
        raise KeyError(number)

    def rows(self) -> list[tuple[str, int, int]]:
        """``(name, number, chain)`` for each slot; an empty slot is ``("-", 0, -1)``."""
        return [record.as_row() for record in self._slots]


def _probe_insert(
    keys: list[int | None],
    counts: list[int],
    key: int,
    offset: Callable[[int], int],
) -> int:
    _check_key(key)
    home = key % SIZE
    for attempt in range(SIZE):
        slot = (home + offset(attempt)) % SIZE
        if keys[slot] is None:
            keys[slot] = key
            counts[slot] = attempt + 1
            return attempt + 1
    raise TableFullError(f"unable to insert {key}")


def _stored_counts(
    keys: list[int | None], counts: list[int]
) -> list[tuple[int, int]]:
    return [(key, count) for key, count in zip(keys, counts) if key is not None]


def _linear(attempt: int) -> int:
    return attempt


def _quadratic(attempt: int) -> int:
    return attempt * attempt


class LinearProbingTable:
    """Probes the home slot and then each following slot in turn."""

    def __init__(self) -> None:
        self._keys: list[int | None] = [None] * SIZE
        self._comparisons = [0] * SIZE

    def insert(self, key: int) -> int:
        """Store ``key`` and return the number of comparisons it took."""
        return _probe_insert(self._keys, self._comparisons, key, _linear)

    def slots(self) -> list[int | None]:
        """The stored key of each slot, or None for an empty one."""
        return list(self._keys)

    def comparisons(self) -> list[tuple[int, int]]:
        """``(key, comparisons)`` for the stored keys, in slot order."""
        return _stored_counts(self._keys, self._comparisons)

    def total_comparisons(self) -> int:
        """The sum of comparisons over all stored keys."""
        return sum(count for _, count in self.comparisons())


class QuadraticProbingTable:
    """Probes the home slot plus the squares 0, 1, 4, 9, ... modulo the table size."""

    def __init__(self) -> None:
        self._keys: list[int | None] = [None] * SIZE
        self._comparisons = [0] * SIZE

    def insert(self, key: int) -> int:
        """Store ``key`` and return the number of comparisons it took."""
        return _probe_insert(self._keys, self._comparisons, key, _quadratic)

    def slots(self) -> list[int | None]:
        """The stored key of each slot, or None for an empty one."""
        return list(self._keys)

    def comparisons(self) -> list[tuple[int, int]]:
        """``(key, comparisons)`` for the stored keys, in slot order."""
        return _stored_counts(self._keys, self._comparisons)

    def total_comparisons(self) -> int:
        """The sum of comparisons over all stored keys."""
        return sum(count for _, count in self.comparisons())