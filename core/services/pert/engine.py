from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from core.exceptions import DomainError
from core.models import Task
from core.services.pert.critical_path import compute_slack, find_critical_path
from core.services.pert.metrics import build_task_metrics
from core.services.pert.models import PertResult
from core.services.pert.network import EdgeSpec, build_network
from core.services.scheduling.graph import TaskGraph, build_task_graph
from core.services.scheduling.passes import run_backward_pass, run_forward_pass, topological_order

logger = logging.getLogger(__name__)


def _source(edge: EdgeSpec) -> int:
    return edge.source


def _target(edge: EdgeSpec) -> int:
    return edge.target


def _weight(edge: EdgeSpec) -> int:
    return edge.duration


class PertEngine:
    """
    PERT (activity-on-arrow) engine:
    - builds the event network from the task list
    - propagates earliest/latest event times
    - computes node/edge slack and one critical path
    """

    def calculate(self, tasks: Iterable[Task | Mapping[str, Any]]) -> PertResult:
        try:
            graph = build_task_graph(tasks)
        except DomainError as exc:
            logger.warning("PERT network rejected [%s]: %s", exc.code, exc)
            raise
        return self.calculate_graph(graph)

    def calculate_graph(self, graph: TaskGraph) -> PertResult:
        network = build_network(graph)
        node_ids = [node.id for node in network.nodes]
        order = topological_order(node_ids, network.outgoing, _target)

        earliest = run_forward_pass(order, network.incoming, _source, _weight)
        project_duration = earliest[network.end_id]

        def terminal(node_id: int) -> int:
            if node_id == network.end_id:
                return project_duration
            return earliest[node_id]

        latest = run_backward_pass(order, network.outgoing, _target, _weight, terminal)

        nodes, edges = compute_slack(network, earliest, latest)
        critical_path = find_critical_path(edges, network.start_id, network.end_id)
        task_metrics = build_task_metrics(graph, network, nodes, edges)

        logger.info(
            "PERT network computed: %d nodes, %d edges, duration %d, critical path of %d edges",
            len(nodes),
            len(edges),
            project_duration,
            len(critical_path),
        )
        return PertResult(
            nodes=nodes,
            edges=edges,
            critical_path=tuple(critical_path),
            project_duration=project_duration,
            task_metrics=task_metrics,
        )


__all__ = ["PertEngine"]
