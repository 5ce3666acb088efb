"""SipHash-2-4 with 64-bit output and HalfSipHash-2-4 with 32-bit output."""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = ["siphash_64", "halfsiphash_32"]

_C_ROUNDS = 2
_D_ROUNDS = 4


@dataclass(frozen=True)
class _Variant:
    bits: int
    rotations: tuple[int, int, int, int, int, int]
    init: tuple[int, int, int, int]
    block_format: str

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def block_size(self) -> int:
        return self.bits // 8


_SIP64 = _Variant(
    bits=64,
    rotations=(13, 32, 16, 21, 17, 32),
    init=(0x736F6D6570736575, 0x646F72616E646F6D, 0x6C7967656E657261, 0x7465646279746573),
    block_format="<Q",
)

_HALFSIP32 = _Variant(
    bits=32,
    rotations=(5, 16, 8, 7, 13, 16),
    init=(0, 0, 0x6C796765, 0x74656462),
    block_format="<I",
)


def _rotl(x: int, r: int, bits: int, mask: int) -> int:
    return ((x << r) | (x >> (bits - r))) & mask


def _rounds(state: list[int], count: int, variant: _Variant) -> None:
    bits, mask = variant.bits, variant.mask
    r1, r2, r3, r4, r5, r6 = variant.rotations
    v0, v1, v2, v3 = state
    for _ in range(count):
        v0 = (v0 + v1) & mask
        v1 = _rotl(v1, r1, bits, mask) ^ v0
        v0 = _rotl(v0, r2, bits, mask)
        v2 = (v2 + v3) & mask
        v3 = _rotl(v3, r3, bits, mask) ^ v2
        v0 = (v0 + v3) & mask
        v3 = _rotl(v3, r4, bits, mask) ^ v0
        v2 = (v2 + v1) & mask
        v1 = _rotl(v1, r5, bits, mask) ^ v2
        v2 = _rotl(v2, r6, bits, mask)
    state[:] = [v0, v1, v2, v3]


def _sip_state(data: bytes, k0: int, k1: int, variant: _Variant) -> list[int]:
    mask = variant.mask
    k0 &= mask
    k1 &= mask
    v0, v1, v2, v3 = variant.init
    state = [v0 ^ k0, v1 ^ k1, v2 ^ k0, v3 ^ k1]

    size = variant.block_size
    full = len(data) - len(data) % size
    for (m,) in struct.iter_unpack(variant.block_format, data[:full]):
        state[3] ^= m
        _rounds(state, _C_ROUNDS, variant)
        state[0] ^= m

    b = ((len(data) & 0xFF) << (variant.bits - 8)) | int.from_bytes(data[full:], "little")
    state[3] ^= b
    _rounds(state, _C_ROUNDS, variant)
    state[0] ^= b

    state[2] ^= 0xFF
    _rounds(state, _D_ROUNDS, variant)
    return state


def siphash_64(data: bytes, k0: int, k1: int) -> int:
    """SipHash-2-4 of ``data`` keyed by the two 64-bit words ``k0`` and ``k1``."""
    v0, v1, v2, v3 = _sip_state(bytes(data), k0, k1, _SIP64)
    return v0 ^ v1 ^ v2 ^ v3


def halfsiphash_32(data: bytes, k0: int, k1: int) -> int:
    """HalfSipHash-2-4 of ``data`` keyed by the two 32-bit words ``k0`` and ``k1``."""
    _, v1, _, v3 = _sip_state(bytes(data), k0, k1, _HALFSIP32)
    return v1 ^ v3