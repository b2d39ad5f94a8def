"""Writers that lay out floats and vectors in GPU-compatible memory."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

from voxelcore.utilities import align

_FLOAT_SIZE = struct.calcsize("<f")
_VEC2_SIZE = 2 * _FLOAT_SIZE
_VEC4_SIZE = 4 * _FLOAT_SIZE
_MAT4_SIZE = 16 * _FLOAT_SIZE


class BufferWriter:
    """Writes little-endian float data into a writable buffer, aligning each value."""

    def __init__(self, buffer) -> None:
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("buffer must be writable")
        self._view = view.cast("B")
        self._offset = 0

    @property
    def offset(self) -> int:
        """The byte offset the next write starts from (before alignment)."""
        return self._offset

    def _store(self, alignment: int, values: Sequence[float], advance: int) -> None:
        start = align(self._offset, alignment)
        data = struct.pack(f"<{len(values)}f", *values)
        end = start + len(data)
        if end > len(self._view):
            raise IndexError(f"write of {len(data)} bytes at {start} exceeds buffer")
        self._view[start:end] = data
        self._offset = start + advance

    @staticmethod
    def _vector(value: Iterable[float], length: int) -> tuple[float, ...]:
        components = tuple(float(v) for v in value)
        if len(components) != length:
            raise ValueError(f"expected {length} components, got {len(components)}")
        return components

    def write_float(self, value: float) -> None:
        self._store(_FLOAT_SIZE, (float(value),), _FLOAT_SIZE)

    def write_floats(self, values: Iterable[float]) -> None:
        """Write floats tightly packed one after another."""
        items = tuple(float(v) for v in values)
        self._store(_FLOAT_SIZE, items, _FLOAT_SIZE * len(items))

    def write_vec2(self, value: Iterable[float]) -> None:
        self._store(_VEC2_SIZE, self._vector(value, 2), _VEC2_SIZE)

    def write_vec3(self, value: Iterable[float]) -> None:
        """Write a vec3; it is aligned to and takes the space of a vec4."""
        self._store(_VEC4_SIZE, self._vector(value, 3), _VEC4_SIZE)

    def write_vec4(self, value: Iterable[float]) -> None:
        self._store(_VEC4_SIZE, self._vector(value, 4), _VEC4_SIZE)

    def write_mat4(self, value: Iterable[Iterable[float]]) -> None:
        """Write a 4x4 matrix given as four columns, in column-major order."""
        columns = [self._vector(column, 4) for column in value]
        if len(columns) != 4:
            raise ValueError(f"expected 4 columns, got {len(columns)}")
        flat = tuple(x for column in columns for x in column)
        self._store(_MAT4_SIZE, flat, _MAT4_SIZE)


class UniformWriter(BufferWriter):
    """Like :class:`BufferWriter`, but float arrays use uniform-block (std140) layout."""

    def write_floats(self, values: Iterable[float]) -> None:
        """Write floats with each element padded out to a vec4."""
        padded = tuple(x for v in values for x in (float(v), 0.0, 0.0, 0.0))
        self._store(_VEC4_SIZE, padded, len(padded) * _FLOAT_SIZE)