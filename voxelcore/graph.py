"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


class CycleError(ValueError):
    """Raised when the graph being sorted contains a cycle."""


def topological_sort(nodes: Iterable[T], out_nodes: Callable[[T], Iterable[T]]) -> list[T]:
    """Order nodes so that every node comes before the nodes it points to.

    ``out_nodes`` gives the successors of a node. Successors reachable from
    ``nodes`` are included in the result even if not listed in ``nodes``.
    """
    visiting: set[T] = set()
    done: set[T] = set()
    order: list[T] = []

    def visit(vertex: T) -> None:
        if vertex in done:
            return
        if vertex in visiting:
            raise CycleError("Not a directed acyclic graph")
        visiting.add(vertex)
        for successor in out_nodes(vertex):
            visit(successor)
        done.add(vertex)
        order.append(vertex)

    for node in nodes:
        visit(node)

    order.reverse()
    return order