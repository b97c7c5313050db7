# core/services/scheduling/engine.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from core.exceptions import DomainError
from core.models import Task
from core.services.scheduling.graph import TaskGraph, build_task_graph
from core.services.scheduling.models import CPMResult
from core.services.scheduling.passes import run_backward_pass, run_forward_pass
from core.services.scheduling.results import build_schedule_result

logger = logging.getLogger(__name__)

Arc = tuple[str, str]


class SchedulingEngine:
    """
    CPM scheduling engine over an activity-on-node task list:
    - Forward pass: ES/EF (longest path over dependencies)
    - Backward pass: LS/LF from the project duration
    - Total/free slack and critical tasks

    Holds no state between calls; each run starts from a fresh TaskGraph.
    """

    def calculate(self, tasks: Iterable[Task | Mapping[str, Any]]) -> CPMResult:
        try:
            graph = build_task_graph(tasks)
        except DomainError as exc:
            logger.warning("CPM schedule rejected [%s]: %s", exc.code, exc)
            raise
        return self.calculate_graph(graph)

    def calculate_graph(self, graph: TaskGraph) -> CPMResult:
        durations = {task.id: task.duration for task in graph.tasks}
        incoming: Dict[str, List[Arc]] = {
            task.id: [(dep_id, task.id) for dep_id in task.dependencies] for task in graph.tasks
        }
        outgoing: Dict[str, List[Arc]] = {
            task.id: [(task.id, succ_id) for succ_id in graph.successors_of(task.id)]
            for task in graph.tasks
        }

        # Arc weight is the duration of the task the arc leaves.
        es = run_forward_pass(
            order=graph.topo_order,
            incoming=incoming,
            source=lambda arc: arc[0],
            weight=lambda arc: durations[arc[0]],
        )
        project_duration = max(
            (es[task_id] + durations[task_id] for task_id in graph.topo_order),
            default=0,
        )
        ls = run_backward_pass(
            order=graph.topo_order,
            outgoing=outgoing,
            target=lambda arc: arc[1],
            weight=lambda arc: durations[arc[0]],
            terminal=lambda task_id: project_duration - durations[task_id],
        )

        result = build_schedule_result(graph=graph, es=es, ls=ls, project_duration=project_duration)
        logger.info(
            "CPM schedule computed: %d tasks, duration %d, %d critical",
            len(graph),
            project_duration,
            len(result.critical_tasks),
        )
        return result


__all__ = ["SchedulingEngine"]
