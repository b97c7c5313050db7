from __future__ import annotations

from typing import Sequence

from core.services.pert.models import NetworkEdge, NetworkNode
from core.services.pert.network import PertNetwork
from core.services.scheduling.graph import TaskGraph
from core.services.scheduling.models import TaskMetrics


def build_task_metrics(
    graph: TaskGraph,
    network: PertNetwork,
    nodes: Sequence[NetworkNode],
    edges: Sequence[NetworkEdge],
) -> tuple[TaskMetrics, ...]:
    """
    Per-task view of the network, read off each task's real edge.

    Latest start comes from the event after the task, not from the event
    before it: the source event may also feed other, tighter tasks.
    """
    metrics = []
    for task in graph.tasks:
        edge = edges[network.edge_by_task[task.id].id]
        before = nodes[edge.source]
        after = nodes[edge.target]

        # Every task event has at least one outgoing edge (successor or end).
        free_slack = (
            min(nodes[out.target].earliest_time - out.duration for out in network.outgoing[after.id])
            - after.earliest_time
        )

        metrics.append(
            TaskMetrics(
                task_id=task.id,
                name=task.name,
                duration=task.duration,
                earliest_start=before.earliest_time,
                latest_start=after.latest_time - task.duration,
                earliest_finish=after.earliest_time,
                latest_finish=after.latest_time,
                total_slack=edge.slack,
                free_slack=free_slack,
                is_critical=edge.is_critical,
            )
        )
    return tuple(metrics)


__all__ = ["build_task_metrics"]
