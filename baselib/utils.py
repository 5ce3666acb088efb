"""Small integer helpers shared by the containers."""

from __future__ import annotations

__all__ = ["next_pow2", "align_up"]


def next_pow2(n: int) -> int:
    """Return the smallest power of two that is greater than or equal to ``n``.

    Values below 1 give 1.
    """
    p = 1
    while p < n:
        p <<= 1
    return p


def align_up(offset: int, alignment: int) -> int:
    """Round ``offset`` up to the next multiple of ``alignment``.

    ``alignment`` must be a power of two; otherwise ``ValueError`` is raised.
    """
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a power of two, got {alignment}")
    return (offset + alignment - 1) & ~(alignment - 1)