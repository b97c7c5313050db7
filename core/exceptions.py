# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when task data is invalid or violates constraints."""


class BusinessRuleError(DomainError):
    """Raised when scheduling rules are violated (e.g., circular dependencies)."""


class UnknownDependencyError(ValidationError):
    """Raised when a task depends on an id that is not in the task list."""
    def __init__(self, task_id: str, dependency_id: str):
        super().__init__(
            f"Task '{task_id}' depends on unknown task '{dependency_id}'.",
            code="UNKNOWN_DEPENDENCY",
        )
        self.task_id = task_id
        self.dependency_id = dependency_id


class InvalidDurationError(ValidationError):
    """Raised when a task duration is negative or not a whole number."""
    def __init__(self, task_id: str, duration: object):
        super().__init__(
            f"Task '{task_id}' has invalid duration {duration!r}; "
            "expected a non-negative integer.",
            code="INVALID_DURATION",
        )
        self.task_id = task_id
        self.duration = duration


class DuplicateTaskError(ValidationError):
    """Raised when two tasks share the same id."""
    def __init__(self, task_id: str):
        super().__init__(f"Duplicate task id '{task_id}'.", code="DUPLICATE_TASK")
        self.task_id = task_id


class CyclicDependencyError(BusinessRuleError):
    """Raised when the dependency graph contains a directed cycle."""
    def __init__(self, cycle: list[str]):
        super().__init__(
            "Cannot schedule project: circular dependency detected "
            f"({' -> '.join(cycle)}).",
            code="DEPENDENCY_CYCLE",
        )
        self.cycle = list(cycle)


class ScheduleMismatchError(BusinessRuleError):
    """Raised when CPM and PERT results disagree for the same task list."""
