from .engine import SchedulingEngine
from .graph import TaskGraph, build_task_graph
from .models import CPMResult, ScheduleItem, TaskMetrics

__all__ = [
    "SchedulingEngine",
    "TaskGraph",
    "build_task_graph",
    "CPMResult",
    "ScheduleItem",
    "TaskMetrics",
]
