from __future__ import annotations

from numbers import Real

from core.exceptions import InvalidDurationError

TASK_COLORS = (
    "#3B82F6",
    "#EF4444",
    "#10B981",
    "#F59E0B",
    "#8B5CF6",
    "#EC4899",
    "#06B6D4",
    "#84CC16",
    "#F97316",
    "#6366F1",
)


def task_color(task_id: str) -> str:
    """Stable palette colour for a task id (sum of code points)."""
    return TASK_COLORS[sum(ord(ch) for ch in str(task_id)) % len(TASK_COLORS)]


def as_duration(task_id: str, value: object) -> int:
    """
    Normalise a task duration to a non-negative int.

    Integral floats (3.0) are accepted; bools, fractions, negatives and
    non-numbers raise InvalidDurationError.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDurationError(task_id, value)
    if isinstance(value, int):
        duration = value
    else:
        as_float = float(value)
        if not as_float.is_integer():
            raise InvalidDurationError(task_id, value)
        duration = int(as_float)
    if duration < 0:
        raise InvalidDurationError(task_id, value)
    return duration


__all__ = ["TASK_COLORS", "task_color", "as_duration"]
