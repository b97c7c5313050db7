from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from core.models import NodeKind, Task
from core.services.scheduling.models import TaskMetrics


@dataclass(frozen=True)
class NetworkNode:
    """An event: the moment by which some set of tasks has completed."""

    id: int
    key: str
    name: str
    kind: NodeKind
    number: int
    task_id: Optional[str]
    earliest_time: int
    latest_time: int
    slack: int
    is_critical: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "kind": self.kind.value,
            "nodeNumber": self.number,
            "taskId": self.task_id,
            "earliestTime": self.earliest_time,
            "latestTime": self.latest_time,
            "slack": self.slack,
            "isCritical": self.is_critical,
        }


@dataclass(frozen=True)
class NetworkEdge:
    id: int
    source: int
    target: int
    task: Optional[Task]
    duration: int
    is_dummy: bool
    slack: int
    is_critical: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "from": self.source,
            "to": self.target,
            "task": self.task.to_dict() if self.task is not None else None,
            "duration": self.duration,
            "isDummy": self.is_dummy,
            "slack": self.slack,
            "isCritical": self.is_critical,
        }


@dataclass(frozen=True)
class PertResult:
    nodes: tuple[NetworkNode, ...]
    edges: tuple[NetworkEdge, ...]
    critical_path: tuple[NetworkEdge, ...]
    project_duration: int
    task_metrics: tuple[TaskMetrics, ...]

    def node(self, node_id: int) -> NetworkNode:
        return self.nodes[node_id]

    def node_by_key(self, key: str) -> NetworkNode:
        for node in self.nodes:
            if node.key == key:
                return node
        raise KeyError(key)

    @property
    def start(self) -> NetworkNode:
        return self.nodes[0]

    @property
    def end(self) -> NetworkNode:
        return self.nodes[-1]

    def task_edge(self, task_id: str) -> NetworkEdge:
        for edge in self.edges:
            if edge.task is not None and edge.task.id == task_id:
                return edge
        raise KeyError(task_id)

    def convergence_nodes(self) -> list[NetworkNode]:
        return [node for node in self.nodes if node.kind == NodeKind.CONVERGENCE]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "criticalPath": [edge.to_dict() for edge in self.critical_path],
            "projectDuration": self.project_duration,
            "taskMetrics": [m.to_dict() for m in self.task_metrics],
        }


__all__ = ["NetworkNode", "NetworkEdge", "PertResult"]
