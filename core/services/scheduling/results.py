from __future__ import annotations

from typing import Dict, List

from core.services.scheduling.graph import TaskGraph
from core.services.scheduling.helpers import task_color
from core.services.scheduling.models import CPMResult, ScheduleItem


def build_schedule_result(
    graph: TaskGraph,
    es: Dict[str, int],
    ls: Dict[str, int],
    project_duration: int,
) -> CPMResult:
    items: List[ScheduleItem] = []

    for task in graph.tasks:
        est = es[task.id]
        eft = est + task.duration
        lst = ls[task.id]
        lft = lst + task.duration
        total_slack = lst - est

        successors = graph.successors_of(task.id)
        if successors:
            free_slack = min(es[succ_id] for succ_id in successors) - eft
        else:
            free_slack = total_slack

        items.append(
            ScheduleItem(
                task_id=task.id,
                name=task.name,
                duration=task.duration,
                dependencies=task.dependencies,
                start=est,
                end=eft,
                earliest_start=est,
                latest_start=lst,
                earliest_finish=eft,
                latest_finish=lft,
                total_slack=total_slack,
                free_slack=free_slack,
                is_critical=total_slack == 0,
                color=task_color(task.id),
            )
        )

    # sorted() is stable, so ties keep input order
    schedule = tuple(sorted(items, key=lambda entry: entry.start))

    return CPMResult(
        schedule=schedule,
        critical_tasks=tuple(entry for entry in schedule if entry.is_critical),
        project_duration=project_duration,
        task_metrics=tuple(entry.metrics() for entry in schedule),
    )


__all__ = ["build_schedule_result"]
