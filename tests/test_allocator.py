import pytest

from voxelcore.allocator import Allocation, AllocationError, FreeListAllocator


def _free_total(allocator):
    return sum(size for _, size in allocator.free_blocks())


def _assert_disjoint(allocator, allocations):
    ranges = sorted(
        [(o, o + s) for o, s in allocator.free_blocks()]
        + [(a.offset, a.offset + a.size) for a in allocations]
    )
    for (_, end), (start, _) in zip(ranges, ranges[1:]):
        assert end <= start


def test_fresh_allocator_has_one_block():
    allocator = FreeListAllocator(100, 1000)
    assert allocator.free_blocks() == [(100, 1000)]


def test_allocate_takes_from_start():
    allocator = FreeListAllocator(100, 1000)
    allocation = allocator.allocate(64, 1)
    assert allocation.offset == 100
    assert allocation.size == 64
    assert allocation.allocator is allocator
    assert _free_total(allocator) + 64 == 1000


def test_allocate_respects_alignment():
    allocator = FreeListAllocator(3, 1000)
    allocation = allocator.allocate(10, 8)
    assert allocation.offset % 8 == 0
    assert allocation.offset >= 3
    assert _free_total(allocator) + allocation.size == 1000
    _assert_disjoint(allocator, [allocation])


def test_alignment_gap_stays_free():
    allocator = FreeListAllocator(3, 1000)
    allocation = allocator.allocate(10, 8)
    blocks = allocator.free_blocks()
    assert blocks[0][0] == 3
    assert blocks[0][0] + blocks[0][1] == allocation.offset


def test_exact_fit_consumes_everything():
    allocator = FreeListAllocator(0, 256)
    allocation = allocator.allocate(256, 4)
    assert allocation.offset == 0
    assert allocator.free_blocks() == []


def test_free_restores_single_block():
    allocator = FreeListAllocator(0, 512)
    allocation = allocator.allocate(128, 16)
    allocator.free(allocation)
    assert allocator.free_blocks() == [(0, 512)]


def test_free_into_empty_list():
    allocator = FreeListAllocator(0, 256)
    allocation = allocator.allocate(256, 1)
    allocator.free(allocation)
    assert allocator.free_blocks() == [(0, 256)]


@pytest.mark.parametrize("order", [(0, 1, 2), (1, 0, 2), (2, 1, 0), (1, 2, 0), (0, 2, 1)])
def test_free_in_any_order_coalesces(order):
    allocator = FreeListAllocator(0, 300)
    allocations = [allocator.allocate(100, 4) for _ in range(3)]
    assert allocator.free_blocks() == []
    for index in order:
        allocator.free(allocations[index])
        remaining = [allocations[i] for i in range(3) if i not in order[: order.index(index) + 1]]
        _assert_disjoint(allocator, remaining)
    assert allocator.free_blocks() == [(0, 300)]


def test_middle_free_leaves_hole():
    allocator = FreeListAllocator(0, 300)
    first, middle, last = (allocator.allocate(100, 1) for _ in range(3))
    allocator.free(middle)
    assert allocator.free_blocks() == [(middle.offset, middle.size)]


def test_too_large_raises():
    allocator = FreeListAllocator(0, 64)
    with pytest.raises(AllocationError):
        allocator.allocate(65, 1)


def test_no_fitting_block_returns_none():
    allocator = FreeListAllocator(0, 64)
    allocator.allocate(40, 1)
    assert allocator.allocate(40, 1) is None


def test_free_none_is_ignored():
    allocator = FreeListAllocator(0, 64)
    allocator.allocate(16, 1)
    before = allocator.free_blocks()
    allocator.free(None)
    assert allocator.free_blocks() == before


def test_reset_frees_everything():
    allocator = FreeListAllocator(8, 64)
    allocator.allocate(16, 1)
    allocator.allocate(16, 1)
    allocator.reset()
    assert allocator.free_blocks() == [(8, 64)]


def test_allocations_compare_by_range():
    allocator = FreeListAllocator(0, 64)
    allocation = allocator.allocate(16, 1)
    assert allocation == Allocation(allocator, allocation.offset, allocation.size)