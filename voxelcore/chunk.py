"""Voxel chunks: block and light storage, coordinate helpers and neighbour tables."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, Protocol, TypeVar

from voxelcore.queues import BufferedQueue

T = TypeVar("T")

CHUNK_SIZE = 16
_MASK = CHUNK_SIZE - 1
_SHIFT = 4

Vec3 = tuple[int, int, int]


class ChunkLoadState(Enum):
    UNLOADED = auto()
    LOADING = auto()
    LOADED = auto()
    UNLOADING = auto()


class ChunkDirection(Enum):
    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7


@dataclass
class Block:
    """A single voxel; its type is stored as an unsigned byte."""

    type: int = 0

    def __post_init__(self) -> None:
        self.type = int(self.type) & 0xFF


@dataclass(order=True)
class Light:
    """Light level of a voxel; the sun level is stored as a signed byte."""

    sun: int = 0

    def __post_init__(self) -> None:
        self.sun = ((int(self.sun) + 128) & 0xFF) - 128

    def overwrite(self, other: Light) -> None:
        """Take the other light's sun level if it is brighter."""
        if other.sun > self.sun:
            self.sun = other.sun


@dataclass
class LightUpdate:
    light: Light
    in_chunk_pos: Vec3
    force_propagation: bool = False


@dataclass
class BlockUpdate:
    block: Block
    in_chunk_pos: Vec3


@dataclass(frozen=True)
class FaceData:
    """Corner vertices of a cube face and the offsets sampled for ambient occlusion."""

    vertices: tuple[Vec3, Vec3, Vec3, Vec3]
    ambient_occlusion: tuple[tuple[Vec3, Vec3, Vec3], ...]


def _in_bounds(pos: Sequence[int], size: int) -> bool:
    return all(0 <= c < size for c in pos)


class ChunkData(Generic[T]):
    """A dense cube of ``SIZE**3`` values addressed by ``(x, y, z)``."""

    SIZE = CHUNK_SIZE

    def __init__(self, factory: Callable[[], T]) -> None:
        self._data: list[T] = [factory() for _ in range(self.SIZE**3)]

    @classmethod
    def index(cls, pos: Sequence[int]) -> int:
        x, y, z = pos
        return x + y * cls.SIZE + z * cls.SIZE * cls.SIZE

    @classmethod
    def position(cls, index: int) -> Vec3:
        """Decode an index with z as the fastest-changing component."""
        z = index % cls.SIZE
        index //= cls.SIZE
        y = index % cls.SIZE
        index //= cls.SIZE
        return (index, y, z)

    def _checked_index(self, pos: Sequence[int]) -> int:
        if len(pos) != 3 or not _in_bounds(pos, self.SIZE):
            raise IndexError(f"position {tuple(pos)} is outside the chunk")
        return self.index(pos)

    def __getitem__(self, pos: Sequence[int]) -> T:
        return self._data[self._checked_index(pos)]

    def __setitem__(self, pos: Sequence[int], value: T) -> None:
        self._data[self._checked_index(pos)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


def positions() -> Iterator[Vec3]:
    """Every position in a chunk, x fastest, then y, then z."""
    for z in range(CHUNK_SIZE):
        for y in range(CHUNK_SIZE):
            for x in range(CHUNK_SIZE):
                yield (x, y, z)


def divide(dividend: int, divisor: int) -> tuple[int, int]:
    """Euclidean division: the remainder is never negative."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quot = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quot = -quot
    rem = dividend - divisor * quot
    adjust = 0 if rem >= 0 else (1 if divisor > 0 else -1)
    return quot - adjust, rem + adjust * divisor


def divide_vec(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[Vec3, Vec3]:
    """Component-wise :func:`divide`, returning ``(quotients, remainders)``."""
    results = [divide(a, b) for a, b in zip(dividend, divisor, strict=True)]
    if len(results) != 3:
        raise ValueError("expected 3-component vectors")
    quots = tuple(q for q, _ in results)
    rems = tuple(r for _, r in results)
    return quots, rems  # type: ignore[return-value]


def split(world_pos: Sequence[int]) -> tuple[Vec3, Vec3]:
    """Split a world position into ``(chunk coordinate, position inside chunk)``."""
    return divide_vec(world_pos, (CHUNK_SIZE, CHUNK_SIZE, CHUNK_SIZE))


def world_to_world_chunk(world_pos: Sequence[int]) -> Vec3:
    return split(world_pos)[0]


def world_to_chunk(world_pos: Sequence[int]) -> Vec3:
    return split(world_pos)[1]


def chunk_to_world(chunk_pos: Sequence[int], world_chunk_pos: Sequence[int]) -> Vec3:
    x, y, z = (c + w * CHUNK_SIZE for c, w in zip(chunk_pos, world_chunk_pos, strict=True))
    return (x, y, z)


def chunk_pos_in_bounds(pos_in_chunk: Sequence[int]) -> bool:
    return _in_bounds(pos_in_chunk, CHUNK_SIZE)


NEIGHBORS_6: tuple[Vec3, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

NEIGHBORS_4: tuple[Vec3, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 0, 1),
    (0, 0, -1),
)

NEIGHBORS_8: tuple[Vec3, ...] = (
    (1, 0, 0),
    (1, 0, 1),
    (0, 0, 1),
    (-1, 0, 1),
    (-1, 0, 0),
    (-1, 0, -1),
    (0, 0, -1),
    (1, 0, -1),
)

NEIGHBORS_8_2D: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

NEIGHBORS_26: tuple[Vec3, ...] = (
    # upper layer
    (1, 1, 0),
    (1, 1, 1),
    (0, 1, 1),
    (-1, 1, 1),
    (-1, 1, 0),
    (-1, 1, -1),
    (0, 1, -1),
    (1, 1, -1),
    (0, 1, 0),
    # same layer
    (1, 0, 0),
    (1, 0, 1),
    (0, 0, 1),
    (-1, 0, 1),
    (-1, 0, 0),
    (-1, 0, -1),
    (0, 0, -1),
    (1, 0, -1),
    # lower layer
    (1, -1, 0),
    (1, -1, 1),
    (0, -1, 1),
    (-1, -1, 1),
    (-1, -1, 0),
    (-1, -1, -1),
    (0, -1, -1),
    (1, -1, -1),
    (0, -1, 0),
)

# Faces in the order right, left, top, bottom, front, back.
NEIGHBOR_FACES: tuple[FaceData, ...] = (
    FaceData(
        ((1, 1, 1), (1, 1, 0), (1, 0, 1), (1, 0, 0)),
        (
            ((1, 1, 1), (1, 1, 0), (1, 0, 1)),
            ((1, 1, -1), (1, 1, 0), (1, 0, -1)),
            ((1, -1, 1), (1, -1, 0), (1, 0, 1)),
            ((1, -1, -1), (1, -1, 0), (1, 0, -1)),
        ),
    ),
    FaceData(
        ((0, 1, 0), (0, 1, 1), (0, 0, 0), (0, 0, 1)),
        (
            ((-1, 1, -1), (-1, 1, 0), (-1, 0, -1)),
            ((-1, 1, 1), (-1, 1, 0), (-1, 0, 1)),
            ((-1, -1, -1), (-1, -1, 0), (-1, 0, -1)),
            ((-1, -1, 1), (-1, -1, 0), (-1, 0, 1)),
        ),
    ),
    FaceData(
        ((0, 1, 0), (1, 1, 0), (0, 1, 1), (1, 1, 1)),
        (
            ((-1, 1, -1), (0, 1, -1), (-1, 1, 0)),
            ((1, 1, -1), (0, 1, -1), (1, 1, 0)),
            ((-1, 1, 1), (0, 1, 1), (-1, 1, 0)),
            ((1, 1, 1), (0, 1, 1), (1, 1, 0)),
        ),
    ),
    FaceData(
        ((1, 0, 0), (0, 0, 0), (1, 0, 1), (0, 0, 1)),
        (
            ((1, -1, -1), (1, -1, 0), (0, -1, -1)),
            ((-1, -1, -1), (-1, -1, 0), (0, -1, -1)),
            ((1, -1, 1), (1, -1, 0), (0, -1, 1)),
            ((-1, -1, 1), (-1, -1, 0), (0, -1, 1)),
        ),
    ),
    FaceData(
        ((0, 1, 1), (1, 1, 1), (0, 0, 1), (1, 0, 1)),
        (
            ((-1, 1, 1), (0, 1, 1), (-1, 0, 1)),
            ((1, 1, 1), (0, 1, 1), (1, 0, 1)),
            ((-1, -1, 1), (0, -1, 1), (-1, 0, 1)),
            ((1, -1, 1), (0, -1, 1), (1, 0, 1)),
        ),
    ),
    FaceData(
        ((1, 1, 0), (0, 1, 0), (1, 0, 0), (0, 0, 0)),
        (
            ((1, 1, -1), (0, 1, -1), (1, 0, -1)),
            ((-1, 1, -1), (0, 1, -1), (-1, 0, -1)),
            ((1, -1, -1), (0, -1, -1), (1, 0, -1)),
            ((-1, -1, -1), (0, -1, -1), (-1, 0, -1)),
        ),
    ),
)

UV_FACES: tuple[tuple[int, int], ...] = ((0, 0), (1, 0), (0, 1), (1, 1))


class ChunkUpdateSink(Protocol):
    """What a chunk needs from its world: a way to schedule itself for processing."""

    def queue_chunk_update(self, world_chunk_position: Vec3) -> None: ...


@dataclass
class Chunk:
    """A cube of blocks and light levels at a position in the chunk grid."""

    entity: Hashable
    world_chunk_position: Vec3
    world: ChunkUpdateSink
    load_state: ChunkLoadState = ChunkLoadState.LOADING
    blocks: ChunkData[Block] = field(default_factory=lambda: ChunkData(Block))
    light: ChunkData[Light] = field(default_factory=lambda: ChunkData(Light))

    SIZE = CHUNK_SIZE

    def __post_init__(self) -> None:
        self.world_chunk_position = tuple(self.world_chunk_position)  # type: ignore[assignment]
        self._neighbors: dict[Vec3, Hashable | None] = {
            offset: None for offset in NEIGHBORS_26
        }
        self._neighbors[(0, 0, 0)] = self.entity
        self._block_updates: BufferedQueue[BlockUpdate] = BufferedQueue()
        self._light_updates: BufferedQueue[LightUpdate] = BufferedQueue()

    def reset(self) -> None:
        """Drop all pending light updates."""
        self._light_updates.clear()

    @staticmethod
    def _offset_key(offset: Sequence[int]) -> Vec3:
        key = tuple(offset)
        if len(key) != 3 or not all(-1 <= c <= 1 for c in key):
            raise IndexError(f"neighbour offset {key} out of range")
        return key  # type: ignore[return-value]

    def neighbor(self, offset: Sequence[int]) -> Hashable | None:
        return self._neighbors[self._offset_key(offset)]

    def set_neighbor(self, offset: Sequence[int], chunk: Hashable | None) -> None:
        """Record a neighbour; the centre slot (this chunk) cannot be replaced."""
        key = self._offset_key(offset)
        if key == (0, 0, 0):
            return
        self._neighbors[key] = chunk

    @staticmethod
    def index(pos: Sequence[int]) -> int:
        return ChunkData.index(pos)

    @staticmethod
    def position(index: int) -> Vec3:
        x = index & _MASK
        index >>= _SHIFT
        y = index & _MASK
        index >>= _SHIFT
        z = index & _MASK
        return (x, y, z)

    def queue_light_update(self, update: LightUpdate) -> None:
        self._light_updates.enqueue(update)
        self.world.queue_chunk_update(self.world_chunk_position)

    def queue_block_update(self, update: BlockUpdate) -> None:
        self._block_updates.enqueue(update)
        self.world.queue_chunk_update(self.world_chunk_position)

    def get_light_updates(self) -> deque[LightUpdate]:
        return self._light_updates.swap_dequeue()

    def get_block_updates(self) -> deque[BlockUpdate]:
        return self._block_updates.swap_dequeue()