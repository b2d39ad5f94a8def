"""Systems that run once per tick, ordered by priority within a group."""

from __future__ import annotations

from abc import ABC, abstractmethod

from voxelcore.clock import Clock


class System(ABC):
    """A unit of per-tick work; lower priorities run first."""

    def __init__(self) -> None:
        self._priority = 0
        self._group: SystemGroup | None = None

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        self._priority = value
        if self._group is not None:
            self._group._mark_dirty()

    @abstractmethod
    def update(self, clock: Clock) -> None:
        """Run one tick."""


class SystemGroup:
    """Runs its systems in ascending priority order against one clock."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._systems: list[System] = []
        self._dirty = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def systems(self) -> tuple[System, ...]:
        return tuple(self._systems)

    def add(self, system: System, priority: int) -> None:
        system._group = self
        system.priority = priority
        self._systems.append(system)
        self._mark_dirty()

    def remove(self, system: System) -> None:
        self._systems = [s for s in self._systems if s is not system]
        if system._group is self:
            system._group = None

    def update(self) -> None:
        if self._dirty:
            self._systems.sort(key=lambda s: s.priority)
            self._dirty = False
        for system in list(self._systems):
            system.update(self._clock)

    def _mark_dirty(self) -> None:
        self._dirty = True