import pytest

from voxelcore.utilities import align, distance2, read_file


@pytest.mark.parametrize("ptr", [0, 1, 3, 4, 7, 15, 16, 17, 255, 1000])
@pytest.mark.parametrize("alignment", [1, 2, 4, 8, 16, 64])
def test_align_rounds_up_to_multiple(ptr, alignment):
    result = align(ptr, alignment)
    assert result % alignment == 0
    assert result >= ptr
    assert result - ptr < alignment


def test_align_keeps_aligned_value():
    assert align(16, 16) == 16
    assert align(0, 8) == 0


def test_align_pins_known_value():
    assert align(5, 4) == 8


@pytest.mark.parametrize("alignment", [0, -4, 3, 12])
def test_align_rejects_bad_alignment(alignment):
    with pytest.raises(ValueError):
        align(10, alignment)


def test_read_file_round_trip(tmp_path):
    payload = bytes(range(256)) * 3
    path = tmp_path / "shader.spv"
    path.write_bytes(payload)
    assert read_file(path) == payload
    assert read_file(str(path)) == payload


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.bin")


def test_distance2_zero_for_same_point():
    assert distance2((1, 2, 3), (1, 2, 3)) == 0


def test_distance2_is_symmetric():
    a, b = (4, -2, 7), (-1, 5, 0)
    assert distance2(a, b) == distance2(b, a)


def test_distance2_pythagorean_example():
    assert distance2((0, 0, 0), (3, 4, 0)) == 25


def test_distance2_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        distance2((1, 2, 3), (1, 2))