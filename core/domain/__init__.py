from core.domain.enums import NodeKind
from core.domain.task import Task

__all__ = [
    "NodeKind",
    "Task",
]
