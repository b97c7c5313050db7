from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from core.services.pert.models import NetworkEdge, NetworkNode
from core.services.pert.network import PertNetwork


def compute_slack(
    network: PertNetwork,
    earliest: Mapping[int, int],
    latest: Mapping[int, int],
) -> tuple[tuple[NetworkNode, ...], tuple[NetworkEdge, ...]]:
    """
    Node slack = latest - earliest.
    Edge slack = latest(target) - earliest(source) - duration.
    Criticality is judged per node and per edge, never inherited.
    """
    nodes = tuple(
        NetworkNode(
            id=spec.id,
            key=spec.key,
            name=spec.name,
            kind=spec.kind,
            number=spec.id,
            task_id=spec.task_id,
            earliest_time=earliest[spec.id],
            latest_time=latest[spec.id],
            slack=latest[spec.id] - earliest[spec.id],
            is_critical=latest[spec.id] == earliest[spec.id],
        )
        for spec in network.nodes
    )

    edges = []
    for spec in network.edges:
        slack = latest[spec.target] - earliest[spec.source] - spec.duration
        edges.append(
            NetworkEdge(
                id=spec.id,
                source=spec.source,
                target=spec.target,
                task=spec.task,
                duration=spec.duration,
                is_dummy=spec.is_dummy,
                slack=slack,
                is_critical=slack == 0,
            )
        )
    return nodes, tuple(edges)


def find_critical_path(
    edges: Sequence[NetworkEdge],
    start_id: int,
    end_id: int,
) -> list[NetworkEdge]:
    """
    First start->end path made only of critical edges.

    Depth-first, trying outgoing edges in creation order. Nodes that were
    fully explored without reaching the end are not revisited. Returns an
    empty list when no such path exists.
    """
    if start_id == end_id:
        return []

    outgoing: Dict[int, List[NetworkEdge]] = {}
    for edge in edges:
        if edge.is_critical:
            outgoing.setdefault(edge.source, []).append(edge)

    dead_ends: set[int] = set()
    path: List[NetworkEdge] = []
    stack = [iter(outgoing.get(start_id, ()))]

    while stack:
        for edge in stack[-1]:
            if edge.target in dead_ends:
                continue
            path.append(edge)
            if edge.target == end_id:
                return path
            stack.append(iter(outgoing.get(edge.target, ())))
            break
        else:
            stack.pop()
            if path:
                dead_ends.add(path.pop().target)

    return []


__all__ = ["compute_slack", "find_critical_path"]
