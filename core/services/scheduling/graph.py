from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from core.exceptions import CyclicDependencyError, DuplicateTaskError, UnknownDependencyError
from core.models import Task
from core.services.scheduling.helpers import as_duration

_ACTIVE = 1
_DONE = 2


@dataclass(frozen=True)
class TaskGraph:
    """Validated, indexed task list shared by the CPM and PERT engines."""

    tasks: tuple[Task, ...]
    tasks_by_id: Mapping[str, Task]
    successors: Mapping[str, tuple[str, ...]]
    topo_order: tuple[str, ...]

    def predecessors_of(self, task_id: str) -> tuple[str, ...]:
        return self.tasks_by_id[task_id].dependencies

    def successors_of(self, task_id: str) -> tuple[str, ...]:
        return self.successors.get(task_id, ())

    def final_task_ids(self) -> list[str]:
        return [task.id for task in self.tasks if not self.successors_of(task.id)]

    def __len__(self) -> int:
        return len(self.tasks)


def coerce_task(item: Task | Mapping[str, Any]) -> Task:
    if isinstance(item, Task):
        return item
    return Task.from_dict(item)


def build_task_graph(items: Iterable[Task | Mapping[str, Any]]) -> TaskGraph:
    """
    Validate a task list and index it.

    Raises InvalidDurationError, DuplicateTaskError, UnknownDependencyError
    or CyclicDependencyError. Returned tasks carry int durations and are new
    objects, never the caller's instances.
    """
    tasks: List[Task] = []
    tasks_by_id: Dict[str, Task] = {}
    for item in items:
        task = coerce_task(item)
        duration = as_duration(task.id, task.duration)
        if task.id in tasks_by_id:
            raise DuplicateTaskError(task.id)
        task = dataclasses.replace(task, duration=duration)
        tasks.append(task)
        tasks_by_id[task.id] = task

    successors: Dict[str, List[str]] = {}
    for task in tasks:
        for dep_id in task.dependencies:
            if dep_id not in tasks_by_id:
                raise UnknownDependencyError(task.id, dep_id)
            successors.setdefault(dep_id, []).append(task.id)

    topo_order = _dependency_first_order(tasks_by_id)

    return TaskGraph(
        tasks=tuple(tasks),
        tasks_by_id=tasks_by_id,
        successors={task_id: tuple(ids) for task_id, ids in successors.items()},
        topo_order=tuple(topo_order),
    )


def _dependency_first_order(tasks_by_id: Mapping[str, Task]) -> list[str]:
    """
    Iterative depth-first walk along dependency links.

    Post-order yields every task after all of its dependencies. Meeting a
    task that is still on the active path is a back-edge, i.e. a cycle.
    """
    state: Dict[str, int] = {}
    order: list[str] = []

    for root_id in tasks_by_id:
        if root_id in state:
            continue
        state[root_id] = _ACTIVE
        stack = [(root_id, iter(tasks_by_id[root_id].dependencies))]

        while stack:
            task_id, pending = stack[-1]
            for dep_id in pending:
                dep_state = state.get(dep_id)
                if dep_state == _ACTIVE:
                    path = [frame[0] for frame in stack]
                    cycle = path[path.index(dep_id):] + [dep_id]
                    raise CyclicDependencyError(cycle)
                if dep_state is None:
                    state[dep_id] = _ACTIVE
                    stack.append((dep_id, iter(tasks_by_id[dep_id].dependencies)))
                    break
            else:
                stack.pop()
                state[task_id] = _DONE
                order.append(task_id)

    return order


__all__ = ["TaskGraph", "build_task_graph", "coerce_task"]
