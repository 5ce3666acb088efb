"""Non-cryptographic and keyed hash functions used by the hash map."""

from __future__ import annotations

import enum
import struct
import time

from .siphash import halfsiphash_32, siphash_64

__all__ = [
    "HashFunction",
    "splitmix64",
    "fnv1a_32",
    "fnv1a_64",
    "fnv1a",
    "murmur3_32",
    "murmur3_64",
    "murmur3",
    "siphash",
    "get_seed",
    "siphash_init_64",
    "siphash_init_32",
    "siphash_init",
]

_M32 = 0xFFFFFFFF
_M64 = 0xFFFFFFFFFFFFFFFF


class HashFunction(enum.IntEnum):
    """Hash functions a hash map can be configured with."""

    FNV1A = 0
    MURMUR3 = 1
    SIPHASH = 2


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _M32


def _rotl64(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _M64


def splitmix64(x: int) -> int:
    """One SplitMix64 step: mix ``x`` into a well-distributed 64-bit value."""
    x = (x + 0x9E3779B97F4A7C15) & _M64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _M64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _M64
    return x ^ (x >> 31)


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a hash of ``data``."""
    h = 0x811C9DC5
    for byte in bytes(data):
        h = ((h ^ byte) * 0x1000193) & _M32
    return h


def fnv1a_64(data: bytes) -> int:
    """64-bit FNV-1a hash of ``data``."""
    h = 0xCBF29CE484222325
    for byte in bytes(data):
        h = ((h ^ byte) * 0x100000001B3) & _M64
    return h


def fnv1a(data: bytes) -> int:
    """Word-sized (64-bit) FNV-1a hash of ``data``."""
    return fnv1a_64(data)


def murmur3_32(data: bytes, seed: int) -> int:
    """MurmurHash3 x86 32-bit hash of ``data``."""
    data = bytes(data)
    c1, c2 = 0xCC9E2D51, 0x1B873593
    h = seed & _M32
    full = len(data) - len(data) % 4

    for (k,) in struct.iter_unpack("<I", data[:full]):
        k = _rotl32((k * c1) & _M32, 15)
        k = (k * c2) & _M32
        h = _rotl32(h ^ k, 13)
        h = (h * 5 + 0xE6546B64) & _M32

    tail = data[full:]
    if tail:
        k1 = int.from_bytes(tail, "little")
        k1 = _rotl32((k1 * c1) & _M32, 15)
        h ^= (k1 * c2) & _M32

    h ^= len(data) & _M32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _M32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _M32
    return h ^ (h >> 16)


def murmur3_64(data: bytes, seed: int) -> int:
    """64-bit hash built on the MurmurHash3 x64 128-bit mixing.

    The two halves go through a shortened finaliser and are summed.
    """
    data = bytes(data)
    c1, c2 = 0x87C37B91114253D5, 0x4CF5AD432745937F
    h1 = h2 = seed & _M64
    full = len(data) - len(data) % 16

    for k1, k2 in struct.iter_unpack("<QQ", data[:full]):
        k1 = (_rotl64((k1 * c1) & _M64, 31) * c2) & _M64
        h1 = _rotl64(h1 ^ k1, 27)
        h1 = (h1 + h2) & _M64
        h1 = (h1 * 5 + 0x52DCE729) & _M64

        k2 = (_rotl64((k2 * c2) & _M64, 33) * c1) & _M64
        h2 = _rotl64(h2 ^ k2, 31)
        h2 = (h2 + h1) & _M64
        h2 = (h2 * 5 + 0x38495AB5) & _M64

    tail = data[full:]
    if len(tail) > 8:
        k2 = int.from_bytes(tail[8:], "little")
        k2 = (_rotl64((k2 * c2) & _M64, 33) * c1) & _M64
        h2 ^= k2
    if tail:
        k1 = int.from_bytes(tail[:8], "little")
        k1 = (_rotl64((k1 * c1) & _M64, 31) * c2) & _M64
        h1 ^= k1

    length = len(data) & _M64
    h1 ^= length
    h2 ^= length
    h1 = (h1 + h2) & _M64
    h2 = (h2 + h1) & _M64

    h1 ^= h1 >> 33
    h1 = (h1 * 0xFF51AFD7ED558CCD) & _M64
    h1 ^= h1 >> 33
    h2 ^= h2 >> 33
    h2 = (h2 * 0xC4CEB9FE1A85EC53) & _M64
    h2 ^= h2 >> 33

    return (h1 + h2) & _M64


def murmur3(data: bytes, seed: int) -> int:
    """Word-sized (64-bit) Murmur3 hash of ``data``."""
    return murmur3_64(data, seed)


def siphash(data: bytes, k0: int, k1: int) -> int:
    """Word-sized (64-bit) SipHash-2-4 of ``data``."""
    return siphash_64(data, k0, k1)


def get_seed() -> int:
    """Return a run-dependent 64-bit seed from an object address and the clock."""
    return (id(object()) ^ int(time.time())) & _M64


def siphash_init_64(seed: int | None = None) -> tuple[int, int]:
    """Derive a pair of 64-bit SipHash key words from ``seed``.

    Both words come from the same SplitMix64 step, so they are equal.
    Without a seed, :func:`get_seed` supplies one.
    """
    if seed is None:
        seed = get_seed()
    seed &= _M64
    return splitmix64(seed), splitmix64(seed)


def siphash_init_32(seed: int | None = None) -> tuple[int, int]:
    """Derive a pair of 32-bit key words by folding the 64-bit ones."""
    x0, x1 = siphash_init_64(seed)
    return (x0 ^ (x0 >> 32)) & _M32, (x1 ^ (x1 >> 32)) & _M32


def siphash_init(seed: int | None = None) -> tuple[int, int]:
    """Word-sized (64-bit) SipHash key derivation."""
    return siphash_init_64(seed)


# Kept for callers that want the 32-bit keyed variant alongside the others.
halfsiphash = halfsiphash_32