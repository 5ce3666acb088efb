"""Separate-chaining hash map with byte-string keys and insertion-order iteration."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .hashing import HashFunction, fnv1a, murmur3, siphash, siphash_init
from .utils import next_pow2

__all__ = [
    "HASH_MAP_MIN_SIZE",
    "HASH_MAP_DEFAULT_MAX_LOAD_FACTOR",
    "HASH_MAP_DEFAULT_MIN_LOAD_FACTOR",
    "HASH_MAP_HASH_FUNCTION",
    "HashMapEntry",
    "HashMap",
    "get_hash",
]

# Minimum number of buckets, also the size used when a map is created with size 0.
HASH_MAP_MIN_SIZE = 16
HASH_MAP_DEFAULT_MAX_LOAD_FACTOR = 2.0
HASH_MAP_DEFAULT_MIN_LOAD_FACTOR = HASH_MAP_DEFAULT_MAX_LOAD_FACTOR / 4.0
HASH_MAP_HASH_FUNCTION = HashFunction.SIPHASH


def get_hash(data: bytes, seed: tuple[int, int]) -> int:
    """Hash ``data`` with the configured hash function and the map's key pair."""
    if HASH_MAP_HASH_FUNCTION is HashFunction.FNV1A:
        return fnv1a(data)
    if HASH_MAP_HASH_FUNCTION is HashFunction.MURMUR3:
        return murmur3(data, seed[0])
    return siphash(data, seed[0], seed[1])


def _as_key(key: Any) -> bytes:
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"hash map keys must be bytes-like, got {type(key).__name__}")


@dataclass(eq=False, slots=True)
class HashMapEntry:
    """A key/value pair stored in a :class:`HashMap`."""

    key: bytes
    value: Any
    next_iter: HashMapEntry | None = field(default=None, repr=False)
    prev_iter: HashMapEntry | None = field(default=None, repr=False)


class HashMap:
    """Hash map keyed by byte strings that iterates in insertion order.

    Re-inserting an existing key replaces its value and moves the entry to
    the end of the iteration order. The bucket table grows when the load
    factor exceeds the maximum before an insertion and shrinks when it falls
    below the minimum before a removal.
    """

    def __init__(self, size: int = 0, seed: int | None = None) -> None:
        capacity = next_pow2(max(HASH_MAP_MIN_SIZE, size))
        self._buckets: list[list[HashMapEntry]] = [[] for _ in range(capacity)]
        self._count = 0
        self._head: HashMapEntry | None = None
        self._tail: HashMapEntry | None = None
        self._seed = siphash_init(seed)
        self.max_load_factor = HASH_MAP_DEFAULT_MAX_LOAD_FACTOR
        self.min_load_factor = HASH_MAP_DEFAULT_MIN_LOAD_FACTOR

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        """Entries per bucket."""
        return self._count / len(self._buckets)

    def buckets(self) -> tuple[tuple[HashMapEntry, ...], ...]:
        """Snapshot of the bucket table, one tuple of chained entries per bucket."""
        return tuple(tuple(bucket) for bucket in self._buckets)

    def _bucket_for(self, key: bytes) -> list[HashMapEntry]:
        return self._buckets[get_hash(key, self._seed) & (len(self._buckets) - 1)]

    def _link_tail(self, entry: HashMapEntry) -> None:
        entry.prev_iter = self._tail
        entry.next_iter = None
        if self._tail is None:
            self._head = entry
        else:
            self._tail.next_iter = entry
        self._tail = entry

    def _unlink(self, entry: HashMapEntry) -> None:
        if entry.prev_iter is None:
            self._head = entry.next_iter
        else:
            entry.prev_iter.next_iter = entry.next_iter
        if entry.next_iter is None:
            self._tail = entry.prev_iter
        else:
            entry.next_iter.prev_iter = entry.prev_iter
        entry.prev_iter = entry.next_iter = None

    def insert(self, key: bytes, value: Any) -> HashMapEntry:
        """Insert or replace ``key`` and return its entry, now last in order."""
        key = _as_key(key)
        if self.load_factor > self.max_load_factor:
            self.expand()

        bucket = self._bucket_for(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                self._unlink(entry)
                self._link_tail(entry)
                return entry

        entry = HashMapEntry(key, value)
        bucket.append(entry)
        self._link_tail(entry)
        self._count += 1
        return entry

    def find(self, key: bytes) -> HashMapEntry | None:
        """Return the entry for ``key``, or ``None`` when it is absent."""
        key = _as_key(key)
        for entry in self._bucket_for(key):
            if entry.key == key:
                return entry
        return None

    def remove(self, key: bytes) -> bool:
        """Remove ``key``; return whether an entry was removed."""
        key = _as_key(key)
        if self.capacity > HASH_MAP_MIN_SIZE and self.load_factor < self.min_load_factor:
            self.resize(self.capacity // 2)

        bucket = self._bucket_for(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._unlink(entry)
                self._count -= 1
                return True
        return False

    def expand(self) -> None:
        """Double the number of buckets."""
        self.resize(self.capacity * 2)

    def resize(self, new_size: int) -> None:
        """Rehash every entry into ``new_size`` buckets, rounded up to a power of two."""
        new_size = next_pow2(new_size)
        buckets: list[list[HashMapEntry]] = [[] for _ in range(new_size)]
        mask = new_size - 1
        for entry in self:
            buckets[get_hash(entry.key, self._seed) & mask].append(entry)
        self._buckets = buckets

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[HashMapEntry]:
        entry = self._head
        while entry is not None:
            following = entry.next_iter
            yield entry
            entry = following

    def __reversed__(self) -> Iterator[HashMapEntry]:
        entry = self._tail
        while entry is not None:
            preceding = entry.prev_iter
            yield entry
            entry = preceding

    def __contains__(self, key: object) -> bool:
        try:
            return self.find(key) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __getitem__(self, key: bytes) -> Any:
        entry = self.find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value