"""Hash table keyed by unsigned 64-bit integers, using bucket heads and chained entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

V = TypeVar("V")

_MAX_KEY = 0xFFFFFFFFFFFFFFFF
_NO_INDEX = -1


def _grow_count(count: int) -> int:
    return 2 * count + 8


@dataclass
class _Entry(Generic[V]):
    key: int
    next: int
    value: Any


@dataclass
class _FindResult:
    hash_index: int = _NO_INDEX
    entry_prev: int = _NO_INDEX
    entry_index: int = _NO_INDEX


def _check_key(key: object) -> int:
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"hash table keys must be integers, not {type(key).__name__}")
    if not 0 <= key <= _MAX_KEY:
        raise ValueError(f"hash table key {key} is outside the unsigned 64-bit range")
    return key


class HashTable(Generic[V]):
    """A table mapping unsigned 64-bit integer keys to values.

    Entries keep their insertion order; buckets hold the index of the first
    entry of a chain and each entry holds the index of the next one.  The
    table grows once more than three quarters of its bucket count is used.
    """

    def __init__(self) -> None:
        self._hashes: list[int] = []
        self._entries: list[_Entry[V]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return self._find(_check_key(key)).entry_index >= 0

    def __iter__(self) -> Iterator[int]:
        return (entry.key for entry in self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}: {value!r}" for key, value in self.items())
        return f"HashTable({{{body}}})"

    def _find(self, key: int) -> _FindResult:
        result = _FindResult()
        if self._hashes:
            result.hash_index = key % len(self._hashes)
            result.entry_index = self._hashes[result.hash_index]
            while result.entry_index >= 0:
                entry = self._entries[result.entry_index]
                if entry.key == key:
                    return result
                result.entry_prev = result.entry_index
                result.entry_index = entry.next
        return result

    def _add_entry(self, key: int) -> int:
        self._entries.append(_Entry(key=key, next=_NO_INDEX, value=None))
        return len(self._entries) - 1

    def _full(self) -> bool:
        return 0.75 * len(self._hashes) < len(self._entries)

    def get(self, key: int) -> Optional[V]:
        """Return the value stored under *key*, or None if there is none."""
        index = self._find(_check_key(key)).entry_index
        if index >= 0:
            return self._entries[index].value
        return None

    def slot(self, key: int) -> Optional[int]:
        """Return the position of *key* in insertion order, or None if absent."""
        key = _check_key(key)
        for index, entry in enumerate(self._entries):
            if entry.key == key:
                return index
        return None

    def set(self, key: int, value: V) -> None:
        """Store *value* under *key*, replacing any earlier value."""
        key = _check_key(key)
        if not self._hashes:
            self.grow()
        found = self._find(key)
        if found.entry_index >= 0:
            index = found.entry_index
        else:
            index = self._add_entry(key)
            if found.entry_prev >= 0:
                self._entries[found.entry_prev].next = index
            else:
                self._hashes[found.hash_index] = index
        self._entries[index].value = value
        if self._full():
            self.grow()

    def grow(self) -> None:
        """Rehash into a bucket count derived from the current entry count."""
        self.rehash(_grow_count(len(self._entries)))

    def rehash(self, new_count: int) -> None:
        """Rebuild the table with *new_count* buckets, keeping entry order."""
        if new_count < 0:
            raise ValueError("bucket count must not be negative")
        fresh: HashTable[V] = HashTable()
        fresh._hashes = [_NO_INDEX] * new_count
        for entry in self._entries:
            if not fresh._hashes:
                fresh.grow()
            found = fresh._find(entry.key)
            index = fresh._add_entry(entry.key)
            if found.entry_prev < 0:
                fresh._hashes[found.hash_index] = index
            else:
                fresh._entries[found.entry_prev].next = index
            fresh._entries[index].next = found.entry_index
            fresh._entries[index].value = entry.value
        self._hashes = fresh._hashes
        self._entries = fresh._entries

    def rehash_fast(self) -> None:
        """Relink all chains in place without changing the bucket count."""
        if not self._hashes:
            if self._entries:
                self.grow()
            return
        for entry in self._entries:
            entry.next = _NO_INDEX
        self._hashes = [_NO_INDEX] * len(self._hashes)
        for index, entry in enumerate(self._entries):
            found = self._find(entry.key)
            if found.entry_prev < 0:
                self._hashes[found.hash_index] = index
            else:
                self._entries[found.entry_prev].next = index

    def map(self, proc: Callable[[int, V], Any]) -> None:
        """Call ``proc(key, value)`` for every entry in insertion order."""
        if proc is None:
            raise TypeError("map requires a callable")
        for entry in self._entries:
            proc(entry.key, entry.value)

    def map_mut(self, proc: Callable[[int, V], V]) -> None:
        """Replace every value with ``proc(key, value)``, in insertion order."""
        if proc is None:
            raise TypeError("map_mut requires a callable")
        for entry in self._entries:
            entry.value = proc(entry.key, entry.value)

    def remove(self, key: int) -> None:
        """Remove *key* if present; absent keys are ignored."""
        found = self._find(_check_key(key))
        if found.entry_index >= 0:
            del self._entries[found.entry_index]
            self.rehash_fast()

    def remove_entry(self, index: int) -> None:
        """Remove the entry at position *index* in insertion order."""
        if not 0 <= index < len(self._entries):
            raise IndexError("hash table entry index out of range")
        del self._entries[index]
        self.rehash_fast()

    def items(self) -> Iterator[tuple[int, V]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        for entry in self._entries:
            yield entry.key, entry.value