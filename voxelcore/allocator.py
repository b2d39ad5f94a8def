"""A first-fit free-list allocator over a linear address range."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field


class AllocationError(Exception):
    """Raised when a request can never be satisfied by the allocator."""


@dataclass(frozen=True)
class Allocation:
    """A block handed out by a :class:`FreeListAllocator`."""

    allocator: FreeListAllocator = field(repr=False, compare=False)
    offset: int
    size: int


@dataclass
class _Node:
    offset: int
    size: int

    @property
    def end(self) -> int:
        return self.offset + self.size


class FreeListAllocator:
    """Hands out aligned sub-ranges of ``[offset, offset + size)``."""

    def __init__(self, offset: int, size: int) -> None:
        self._offset = offset
        self._size = size
        self._nodes: list[_Node] = [_Node(offset, size)]

    def allocate(self, size: int, alignment: int) -> Allocation | None:
        """Take the first free block that fits; return None when none does."""
        if size > self._size:
            raise AllocationError("Allocation too large")
        if alignment <= 0:
            raise ValueError("alignment must be positive")

        for i, node in enumerate(self._nodes):
            start = self._align(node.offset, alignment)
            if start + size <= node.end:
                self._split(i, start, size)
                return Allocation(self, start, size)
        return None

    def free(self, allocation: Allocation | None) -> None:
        """Return a block to the free list, merging it with adjacent blocks."""
        if allocation is None or allocation.allocator is None:
            return

        new = _Node(allocation.offset, allocation.size)
        index = bisect.bisect_left(self._nodes, new.offset, key=lambda n: n.offset)
        self._nodes.insert(index, new)

        if index + 1 < len(self._nodes):
            following = self._nodes[index + 1]
            if new.end == following.offset:
                new.size += following.size
                del self._nodes[index + 1]

        if index > 0:
            previous = self._nodes[index - 1]
            if previous.end == new.offset:
                previous.size += new.size
                del self._nodes[index]

    def reset(self) -> None:
        """Forget every allocation and free the whole range again."""
        self._nodes = [_Node(self._offset, self._size)]

    def free_blocks(self) -> list[tuple[int, int]]:
        """The free blocks as ``(offset, size)`` pairs in address order."""
        return [(node.offset, node.size) for node in self._nodes]

    @staticmethod
    def _align(ptr: int, alignment: int) -> int:
        remainder = ptr % alignment
        return ptr if remainder == 0 else ptr + (alignment - remainder)

    def _split(self, index: int, offset: int, size: int) -> None:
        node = self._nodes[index]
        front_size = offset - node.offset
        back_offset = offset + size
        back_size = node.end - back_offset

        if front_size == 0 and back_size == 0:
            del self._nodes[index]
        elif front_size == 0:
            node.offset = back_offset
            node.size = back_size
        elif back_size == 0:
            node.size = front_size
        else:
            self._nodes.insert(index, _Node(node.offset, front_size))
            node.offset = back_offset
            node.size = back_size