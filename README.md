# voxelcore

Core pieces of a voxel game engine that work without any window or graphics
backend. Everything here is plain Python; `numpy` is used for the camera maths.

## Modules

- `voxelcore.chunk` — chunk storage and coordinates. `Chunk` holds a
  16×16×16 `ChunkData` of `Block` values and one of `Light` values, its
  neighbour entities (`neighbor`, `set_neighbor`) and double-buffered queues of
  `BlockUpdate` and `LightUpdate` (`queue_block_update`, `get_block_updates`, …).
  Module functions `split`, `world_to_world_chunk`, `world_to_chunk`,
  `chunk_to_world`, `chunk_pos_in_bounds`, `divide`, `divide_vec` and
  `positions` convert and walk coordinates; `NEIGHBORS_6`, `NEIGHBORS_26`,
  `NEIGHBOR_FACES`, `UV_FACES` and friends are the neighbour and face tables.
- `voxelcore.blocks` — `BlockType` (id, six face texture indices, solidity) and
  `BlockManager`, which holds the five built-in types and looks them up by id or
  by `Block` with `get_type`.
- `voxelcore.camera` — `Camera` (right-handed perspective, depth range [0, 1],
  flipped Y) with `view_matrix`, `projection_matrix` and a `Frustum` of six
  `Plane`s; `Frustum.test_aabb` and `Plane.test_aabb` cull axis-aligned boxes.
  Matrices are numpy arrays indexed `[column][row]`, so a column vector is
  transformed with `m.T @ v`. Rotations are `(w, x, y, z)` quaternions.
- `voxelcore.input` — `Input` tracks which keys and mouse buttons went down, are
  held or went up this frame (`key_state`, `key_down`, `key_hold`, `key_up`,
  and the `mouse_button_*` counterparts), plus the mouse position and delta.
  Events are fed in with `handle_key_input`, `handle_mouse_button_input` and
  `handle_mouse_position`; `pre_update` clears the per-frame transitions. The
  `on_key_changed`, `on_mouse_button_changed` and `on_mouse_moved` signals fire
  on changes. `Key`, `MouseButton`, `KeyState`, `CursorState` and `Action` are
  the enums involved.
- `voxelcore.clock` — `Clock` with `time` and `delta`, advanced by a fixed step
  or from a time source (`time.monotonic` by default).
- `voxelcore.system` — abstract `System` and `SystemGroup`, which runs its
  systems in ascending priority order against a `Clock`.
- `voxelcore.allocator` — `FreeListAllocator`, a first-fit allocator over a
  linear range that merges neighbouring free blocks; `allocate` returns an
  `Allocation` or `None`, and raises `AllocationError` for a request larger
  than the whole range.
- `voxelcore.writers` — `BufferWriter` packs floats, vec2/vec3/vec4 and mat4
  values little-endian into a writable buffer with GPU-style alignment;
  `UniformWriter` pads each float of an array out to a vec4.
- `voxelcore.queues` — `BlockingQueue` (bounded; `dequeue` blocks and raises
  `QueueCancelled` after `cancel`) and the double-buffered `BufferedQueue`.
- `voxelcore.graph` — `topological_sort`, raising `CycleError` on a cycle.
- `voxelcore.signals` — `Signal`, a minimal callback list with `connect`,
  `disconnect` and `publish`.
- `voxelcore.utilities` — `align`, `read_file` and `distance2`.

## Installation

```
pip install .
```

## Example

```python
from voxelcore.chunk import split, chunk_to_world
from voxelcore.allocator import FreeListAllocator

world_chunk, in_chunk = split((-1, 17, 5))
assert world_chunk == (-1, 1, 0)
assert in_chunk == (15, 1, 5)
assert chunk_to_world(in_chunk, world_chunk) == (-1, 17, 5)

allocator = FreeListAllocator(0, 1024)
allocation = allocator.allocate(100, 16)
allocator.free(allocation)
assert allocator.free_blocks() == [(0, 1024)]
```

## What it does not do

There is no window, no rendering, no GPU resource management and no game loop
here. `Input` does not read devices itself: a window layer must call its
`handle_*` methods, and cursor mode changes are passed to an optional object
with `set_mode` and `position` methods. A `Chunk` reports pending updates to a
world object through `queue_chunk_update`; no world, terrain generation,
meshing or saving is provided.

## Running the tests

```
pip install .[test]
pytest
```