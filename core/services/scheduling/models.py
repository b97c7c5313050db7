from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TaskMetrics:
    task_id: str
    name: str
    duration: int
    earliest_start: int
    latest_start: int
    earliest_finish: int
    latest_finish: int
    total_slack: int
    free_slack: int
    is_critical: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.task_id,
            "name": self.name,
            "duration": self.duration,
            "earliestStart": self.earliest_start,
            "latestStart": self.latest_start,
            "earliestFinish": self.earliest_finish,
            "latestFinish": self.latest_finish,
            "totalSlack": self.total_slack,
            "freeSlack": self.free_slack,
            "isCritical": self.is_critical,
        }


@dataclass(frozen=True)
class ScheduleItem:
    task_id: str
    name: str
    duration: int
    dependencies: tuple[str, ...]
    start: int
    end: int
    earliest_start: int
    latest_start: int
    earliest_finish: int
    latest_finish: int
    total_slack: int
    free_slack: int
    is_critical: bool
    color: str

    def metrics(self) -> TaskMetrics:
        return TaskMetrics(
            task_id=self.task_id,
            name=self.name,
            duration=self.duration,
            earliest_start=self.earliest_start,
            latest_start=self.latest_start,
            earliest_finish=self.earliest_finish,
            latest_finish=self.latest_finish,
            total_slack=self.total_slack,
            free_slack=self.free_slack,
            is_critical=self.is_critical,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = self.metrics().to_dict()
        payload.update(
            {
                "dependencies": list(self.dependencies),
                "start": self.start,
                "end": self.end,
                "color": self.color,
            }
        )
        return payload


@dataclass(frozen=True)
class CPMResult:
    schedule: tuple[ScheduleItem, ...]
    critical_tasks: tuple[ScheduleItem, ...]
    project_duration: int
    task_metrics: tuple[TaskMetrics, ...]

    def item(self, task_id: str) -> ScheduleItem:
        for entry in self.schedule:
            if entry.task_id == task_id:
                return entry
        raise KeyError(task_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schedule": [entry.to_dict() for entry in self.schedule],
            "criticalTasks": [entry.to_dict() for entry in self.critical_tasks],
            "projectDuration": self.project_duration,
            "taskMetrics": [m.to_dict() for m in self.task_metrics],
        }


__all__ = ["TaskMetrics", "ScheduleItem", "CPMResult"]
