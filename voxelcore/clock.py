"""A clock that tracks elapsed time and the step between updates."""

from __future__ import annotations

import time
from collections.abc import Callable


class Clock:
    """Holds the current time and the delta since the previous update."""

    def __init__(
        self,
        start_time: float | None = None,
        *,
        source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._time = float(source()) if start_time is None else float(start_time)
        self._delta = 0.0

    @property
    def time(self) -> float:
        return self._time

    @property
    def delta(self) -> float:
        return self._delta

    def update(self, step: float | None = None) -> None:
        """Advance by ``step``, or to the time source's current reading if omitted."""
        if step is None:
            now = float(self._source())
            self._delta = now - self._time
            self._time = now
        else:
            self._delta = float(step)
            self._time += float(step)