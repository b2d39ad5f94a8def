"""Small numeric and file helpers shared across the engine."""

from __future__ import annotations

import os
from collections.abc import Sequence


def align(ptr: int, alignment: int) -> int:
    """Round ``ptr`` up to the next multiple of ``alignment``.

    ``alignment`` must be a power of two.
    """
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")
    tail = ptr & (alignment - 1)
    if tail == 0:
        return ptr
    return ptr + (alignment - tail)


def read_file(filename: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a file as bytes."""
    with open(filename, "rb") as handle:
        return handle.read()


def distance2(a: Sequence[int], b: Sequence[int]) -> int:
    """Squared Euclidean distance between two integer 3-vectors."""
    return sum((x - y) * (x - y) for x, y in zip(a, b, strict=True))