import pytest

from voxelcore.clock import Clock
from voxelcore.system import System, SystemGroup


class Recorder(System):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def update(self, clock):
        self.log.append((self.name, clock.time))


@pytest.fixture
def clock():
    return Clock(1.0)


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()


def test_runs_in_priority_order(clock):
    log = []
    group = SystemGroup(clock)
    group.add(Recorder("late", log), 10)
    group.add(Recorder("early", log), -5)
    group.add(Recorder("middle", log), 3)
    group.update()
    assert [name for name, _ in log] == ["early", "middle", "late"]
    assert all(t == clock.time for _, t in log)


def test_priority_change_reorders(clock):
    log = []
    group = SystemGroup(clock)
    first = Recorder("first", log)
    second = Recorder("second", log)
    group.add(first, 1)
    group.add(second, 2)
    group.update()
    assert [name for name, _ in log] == ["first", "second"]
    log.clear()
    first.priority = 3
    assert first.priority == 3
    group.update()
    assert [name for name, _ in log] == ["second", "first"]
    assert group.systems == (second, first)


def test_add_sets_priority(clock):
    group = SystemGroup(clock)
    system = Recorder("a", [])
    group.add(system, 7)
    assert system.priority == 7
    assert group.systems == (system,)


def test_remove(clock):
    log = []
    group = SystemGroup(clock)
    kept = Recorder("kept", log)
    dropped = Recorder("dropped", log)
    group.add(kept, 0)
    group.add(dropped, 1)
    group.remove(dropped)
    group.update()
    assert [name for name, _ in log] == ["kept"]
    assert group.systems == (kept,)


def test_update_sees_clock_changes(clock):
    log = []
    group = SystemGroup(clock)
    group.add(Recorder("a", log), 0)
    clock.update(0.5)
    group.update()
    assert log == [("a", clock.time)]