"""A minimal publish/subscribe signal."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Signal:
    """Calls every connected callback, in connection order, on publish."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect a callback; connecting the same callback twice has no effect."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Disconnect a callback if it is connected."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def publish(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)