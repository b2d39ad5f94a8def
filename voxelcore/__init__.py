"""Voxel engine building blocks: chunks, blocks, camera, input, scheduling, allocation and queues."""

__version__ = "0.1.0"

__all__ = [
    "allocator",
    "blocks",
    "camera",
    "chunk",
    "clock",
    "graph",
    "input",
    "queues",
    "signals",
    "system",
    "utilities",
    "writers",
]