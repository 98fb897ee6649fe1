"""Dependency graph construction and ordering."""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Iterable, List, Set

from ..errors import DependencyCycleError

DependencyGraph = Dict[str, List[str]]


def build_dependency_graph(identifiers: Iterable[str], extract: Callable[[str], List[str]]) -> DependencyGraph:
    """Map every identifier reachable from ``identifiers`` to its direct dependencies."""
    graph: DependencyGraph = {}

    def visit(identifier: str) -> None:
        if identifier in graph:
            return
        graph[identifier] = extract(identifier)
        for dep in graph[identifier]:
            visit(dep)

    for identifier in identifiers:
        visit(identifier)
    return graph


def order_dependencies(graph: DependencyGraph) -> List[str]:
    """Order graph keys so that each one follows all of its dependencies.

    Candidates are tried in lexicographic order; one whose dependencies are not
    all placed yet is moved to the back of the queue. A full pass with no
    progress means the remaining modules form a cycle.
    """
    pending = deque(sorted(graph))
    ordered: List[str] = []
    placed: Set[str] = set()
    stalled = 0
    while pending:
        head = pending.popleft()
        if all(dep in placed for dep in graph[head]):
            ordered.append(head)
            placed.add(head)
            stalled = 0
            continue
        pending.append(head)
        stalled += 1
        if stalled >= len(pending):
            remaining = ", ".join(sorted(pending))
            raise DependencyCycleError(f"Circular dependency between modules: {remaining}")
    return ordered
