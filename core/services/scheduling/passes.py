from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Sequence, TypeVar

from core.exceptions import BusinessRuleError

K = TypeVar("K", bound=Hashable)
A = TypeVar("A")


def topological_order(
    nodes: Iterable[K],
    outgoing: Mapping[K, Sequence[A]],
    target: Callable[[A], K],
) -> list[K]:
    """Kahn's algorithm; ties keep the order of `nodes`."""
    node_list = list(nodes)
    indegree: Dict[K, int] = {node: 0 for node in node_list}
    for node in node_list:
        for arc in outgoing.get(node, ()):
            indegree[target(arc)] += 1

    queue = deque(node for node in node_list if indegree[node] == 0)
    order: List[K] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for arc in outgoing.get(node, ()):
            succ = target(arc)
            indegree[succ] -= 1
            if indegree[succ] == 0:
                queue.append(succ)

    if len(order) != len(node_list):
        raise BusinessRuleError(
            "Cannot order network: circular dependency detected.",
            code="DEPENDENCY_CYCLE",
        )
    return order


def run_forward_pass(
    order: Sequence[K],
    incoming: Mapping[K, Sequence[A]],
    source: Callable[[A], K],
    weight: Callable[[A], int],
) -> Dict[K, int]:
    """
    Longest path from the roots.

    value[n] = max(value[source(a)] + weight(a)) over arcs a into n,
    or 0 when n has no incoming arcs. `order` must be topological.
    """
    earliest: Dict[K, int] = {}
    for node in order:
        arcs = incoming.get(node, ())
        earliest[node] = max(
            (earliest[source(arc)] + weight(arc) for arc in arcs),
            default=0,
        )
    return earliest


def run_backward_pass(
    order: Sequence[K],
    outgoing: Mapping[K, Sequence[A]],
    target: Callable[[A], K],
    weight: Callable[[A], int],
    terminal: Callable[[K], int],
) -> Dict[K, int]:
    """
    Mirror of run_forward_pass walked from the sinks.

    value[n] = min(value[target(a)] - weight(a)) over arcs a out of n,
    or terminal(n) when n has no outgoing arcs.
    """
    latest: Dict[K, int] = {}
    for node in reversed(order):
        arcs = outgoing.get(node, ())
        if not arcs:
            latest[node] = terminal(node)
            continue
        latest[node] = min(latest[target(arc)] - weight(arc) for arc in arcs)
    return latest


__all__ = ["topological_order", "run_forward_pass", "run_backward_pass"]
