# core/services/reconciliation.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from core.exceptions import ScheduleMismatchError
from core.services.pert.models import PertResult
from core.services.scheduling.models import CPMResult

logger = logging.getLogger(__name__)

COMPARED_FIELDS = (
    "earliest_start",
    "latest_start",
    "earliest_finish",
    "latest_finish",
    "total_slack",
    "free_slack",
    "is_critical",
)


@dataclass(frozen=True)
class MetricMismatch:
    task_id: str
    field: str
    cpm_value: Any
    pert_value: Any


@dataclass(frozen=True)
class ReconciliationReport:
    cpm_duration: int
    pert_duration: int
    mismatches: tuple[MetricMismatch, ...] = field(default_factory=tuple)
    missing_task_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def durations_match(self) -> bool:
        return self.cpm_duration == self.pert_duration

    @property
    def is_consistent(self) -> bool:
        return self.durations_match and not self.mismatches and not self.missing_task_ids

    def summary(self) -> str:
        if self.is_consistent:
            return f"CPM and PERT agree (duration {self.cpm_duration})."
        parts = []
        if not self.durations_match:
            parts.append(f"duration CPM={self.cpm_duration} PERT={self.pert_duration}")
        if self.missing_task_ids:
            parts.append(f"tasks missing from one side: {', '.join(self.missing_task_ids)}")
        for m in self.mismatches[:5]:
            parts.append(f"{m.task_id}.{m.field}: CPM={m.cpm_value} PERT={m.pert_value}")
        extra = len(self.mismatches) - 5
        if extra > 0:
            parts.append(f"... {extra} more")
        return "CPM and PERT disagree: " + "; ".join(parts)


def reconcile(cpm: CPMResult, pert: PertResult) -> ReconciliationReport:
    """Compare per-task metrics of both engines for the same task list."""
    cpm_by_id = {m.task_id: m for m in cpm.task_metrics}
    pert_by_id = {m.task_id: m for m in pert.task_metrics}

    missing = sorted(set(cpm_by_id).symmetric_difference(pert_by_id))
    mismatches: list[MetricMismatch] = []
    for metrics in pert.task_metrics:
        other = cpm_by_id.get(metrics.task_id)
        if other is None:
            continue
        for name in COMPARED_FIELDS:
            cpm_value = getattr(other, name)
            pert_value = getattr(metrics, name)
            if cpm_value != pert_value:
                mismatches.append(
                    MetricMismatch(
                        task_id=metrics.task_id,
                        field=name,
                        cpm_value=cpm_value,
                        pert_value=pert_value,
                    )
                )

    return ReconciliationReport(
        cpm_duration=cpm.project_duration,
        pert_duration=pert.project_duration,
        mismatches=tuple(mismatches),
        missing_task_ids=tuple(missing),
    )


def ensure_consistent(cpm: CPMResult, pert: PertResult) -> ReconciliationReport:
    report = reconcile(cpm, pert)
    if not report.is_consistent:
        logger.error(report.summary())
        raise ScheduleMismatchError(report.summary(), code="SCHEDULE_MISMATCH")
    return report


__all__ = [
    "COMPARED_FIELDS",
    "MetricMismatch",
    "ReconciliationReport",
    "reconcile",
    "ensure_consistent",
]
