from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    START = "START"
    TASK_EVENT = "TASK_EVENT"
    CONVERGENCE = "CONVERGENCE"
    END = "END"


__all__ = ["NodeKind"]
