from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


def _dependency_ids(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, int)):
        # A bare id, not a sequence of single-character ids.
        value = (value,)
    seen: dict[str, None] = {}
    for item in value:
        seen.setdefault(str(item), None)
    return tuple(seen)


@dataclass(frozen=True)
class Task:
    """
    Immutable scheduling input.

    `dependencies` holds the ids of tasks that must finish before this one
    starts. Order is kept (first occurrence wins) because it decides edge
    creation order in the PERT network. A single id may be passed as a
    plain string.
    """

    id: str
    name: str
    duration: Any
    dependencies: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "dependencies", _dependency_ids(self.dependencies))

    @staticmethod
    def create(
        id: str,
        duration: Any,
        dependencies: Iterable[str] | str | None = None,
        name: str | None = None,
    ) -> "Task":
        return Task(
            id=id,
            name=name if name is not None else str(id),
            duration=duration,
            dependencies=_dependency_ids(dependencies),
        )

    @staticmethod
    def from_dict(payload: Mapping[str, Any]) -> "Task":
        task_id = payload["id"]
        # Missing duration stays None so validation rejects it.
        return Task(
            id=task_id,
            name=str(payload.get("name") or task_id),
            duration=payload.get("duration"),
            dependencies=_dependency_ids(payload.get("dependencies")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "dependencies": list(self.dependencies),
        }


__all__ = ["Task"]
