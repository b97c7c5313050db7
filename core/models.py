from __future__ import annotations

from core.domain import NodeKind, Task

__all__ = ["NodeKind", "Task"]
