import pytest

from voxelcore.clock import Clock


def test_start_time_and_zero_delta():
    clock = Clock(2.0)
    assert clock.time == 2.0
    assert clock.delta == 0.0


def test_fixed_step_accumulates():
    clock = Clock(2.0)
    clock.update(0.5)
    assert clock.time == pytest.approx(2.5)
    assert clock.delta == pytest.approx(0.5)
    clock.update(0.25)
    assert clock.time == pytest.approx(2.75)
    assert clock.delta == pytest.approx(0.25)


def test_real_time_uses_source():
    readings = iter([10.0, 10.5, 12.0])
    clock = Clock(source=lambda: next(readings))
    assert clock.time == 10.0
    clock.update()
    assert clock.delta == pytest.approx(0.5)
    assert clock.time == 10.5
    clock.update()
    assert clock.delta == pytest.approx(1.5)
    assert clock.time == 12.0


def test_explicit_start_time_ignores_source_until_update():
    readings = iter([7.0])
    clock = Clock(5.0, source=lambda: next(readings))
    assert clock.time == 5.0
    clock.update()
    assert clock.delta == pytest.approx(2.0)