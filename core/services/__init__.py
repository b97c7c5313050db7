from .pert import PertEngine, PertResult
from .reconciliation import ReconciliationReport, ensure_consistent, reconcile
from .scheduling import CPMResult, SchedulingEngine, ScheduleItem, TaskMetrics

__all__ = [
    "SchedulingEngine",
    "CPMResult",
    "ScheduleItem",
    "TaskMetrics",
    "PertEngine",
    "PertResult",
    "ReconciliationReport",
    "reconcile",
    "ensure_consistent",
]
