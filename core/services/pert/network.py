from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core.models import NodeKind, Task
from core.services.scheduling.graph import TaskGraph


@dataclass(frozen=True)
class NodeSpec:
    id: int
    key: str
    name: str
    kind: NodeKind
    task_id: Optional[str] = None


@dataclass(frozen=True)
class EdgeSpec:
    id: int
    source: int
    target: int
    task: Optional[Task]
    duration: int

    @property
    def is_dummy(self) -> bool:
        return self.task is None


@dataclass
class PertNetwork:
    """
    Activity-on-arrow graph under construction.

    Nodes live in an arena indexed by integer id; the id doubles as the
    display number, so creation order matters (start first, end last).
    """

    nodes: List[NodeSpec] = field(default_factory=list)
    edges: List[EdgeSpec] = field(default_factory=list)
    incoming: Dict[int, List[EdgeSpec]] = field(default_factory=dict)
    outgoing: Dict[int, List[EdgeSpec]] = field(default_factory=dict)
    event_by_task: Dict[str, int] = field(default_factory=dict)
    edge_by_task: Dict[str, EdgeSpec] = field(default_factory=dict)
    start_id: int = -1
    end_id: int = -1

    def add_node(
        self,
        key: str,
        name: str,
        kind: NodeKind,
        task_id: Optional[str] = None,
    ) -> int:
        node = NodeSpec(id=len(self.nodes), key=key, name=name, kind=kind, task_id=task_id)
        self.nodes.append(node)
        self.incoming[node.id] = []
        self.outgoing[node.id] = []
        return node.id

    def add_edge(self, source: int, target: int, task: Optional[Task] = None) -> EdgeSpec:
        edge = EdgeSpec(
            id=len(self.edges),
            source=source,
            target=target,
            task=task,
            duration=task.duration if task is not None else 0,
        )
        self.edges.append(edge)
        self.outgoing[source].append(edge)
        self.incoming[target].append(edge)
        if task is not None:
            self.edge_by_task[task.id] = edge
        return edge

    def event_after(self, task_id: str) -> int:
        return self.event_by_task[task_id]


def build_network(graph: TaskGraph) -> PertNetwork:
    """
    Expand a validated task list into an event-node network.

    - one event node per task ("after <id>")
    - a task with several dependencies gets its own convergence node fed by
      dummy edges; its real edge leaves from there
    - every final task gets a dummy edge into the end node
    """
    network = PertNetwork()
    network.start_id = network.add_node("start", "Start", NodeKind.START)

    for task in graph.tasks:
        network.event_by_task[task.id] = network.add_node(
            f"after:{task.id}",
            f"after {task.id}",
            NodeKind.TASK_EVENT,
            task_id=task.id,
        )

    for task in graph.tasks:
        deps = task.dependencies
        if not deps:
            source = network.start_id
        elif len(deps) == 1:
            source = network.event_after(deps[0])
        else:
            source = network.add_node(
                f"join:{task.id}",
                f"Convergence {task.id}",
                NodeKind.CONVERGENCE,
                task_id=task.id,
            )
            for dep_id in deps:
                network.add_edge(network.event_after(dep_id), source)
        network.add_edge(source, network.event_after(task.id), task)

    network.end_id = network.add_node("end", "End", NodeKind.END)
    for task_id in graph.final_task_ids():
        network.add_edge(network.event_after(task_id), network.end_id)

    return network


__all__ = ["NodeSpec", "EdgeSpec", "PertNetwork", "build_network"]
