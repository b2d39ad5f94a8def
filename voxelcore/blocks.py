"""Block type definitions and the registry of known block types."""

from __future__ import annotations

from collections.abc import Sequence

from voxelcore.chunk import Block


class BlockType:
    """A kind of block: its id, the texture index for each of its six faces, and solidity."""

    def __init__(self, id: int, faces: Sequence[int], solid: bool = True) -> None:
        faces = tuple(int(f) for f in faces)
        if len(faces) != 6:
            raise ValueError(f"a block type needs 6 faces, got {len(faces)}")
        self.id = id
        self.faces = faces
        self._solid = solid

    @property
    def solid(self) -> bool:
        return self._solid

    def face_index(self, index: int) -> int:
        """Texture index of a face, in the order right, left, top, bottom, front, back."""
        return self.faces[index]

    def __repr__(self) -> str:
        return f"BlockType(id={self.id}, faces={self.faces}, solid={self._solid})"


class BlockManager:
    """The registry of block types, indexed by block type id."""

    def __init__(self) -> None:
        self._types = [
            BlockType(0, (0,) * 6, False),
            BlockType(1, (0,) * 6, False),
            BlockType(2, (0, 0, 0, 0, 0, 0)),
            BlockType(3, (1, 1, 2, 0, 1, 1)),
            BlockType(4, (3, 3, 3, 3, 3, 3)),
        ]

    @property
    def type_count(self) -> int:
        return len(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def get_type(self, key: int | Block) -> BlockType:
        """Look up a type by id or by the block that has it."""
        index = key.type if isinstance(key, Block) else key
        if not 0 <= index < len(self._types):
            raise IndexError(f"unknown block type {index}")
        return self._types[index]