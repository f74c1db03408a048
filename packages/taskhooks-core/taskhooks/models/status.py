"""
Task status and priority enumerations.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Status values taskwarrior supports."""

    PENDING = "pending"
    DELETED = "deleted"
    COMPLETED = "completed"
    WAITING = "waiting"
    RECURRING = "recurring"

    @classmethod
    def from_wire(cls, raw: str) -> "TaskStatus":
        """Parse a status token, rejecting anything unknown."""
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(
                f"Invalid status '{raw}'. Must be one of: {', '.join(TASK_STATUSES)}"
            ) from None

    @property
    def wire(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value.capitalize()


class TaskPriority(str, Enum):
    """Priority levels. A task without priority has no value at all."""

    LOW = "L"
    MEDIUM = "M"
    HIGH = "H"

    @classmethod
    def from_wire(cls, raw: str) -> "TaskPriority":
        """Parse a priority token, rejecting anything unknown."""
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(
                f"Invalid priority '{raw}'. Must be one of: {', '.join(TASK_PRIORITIES)}"
            ) from None

    @property
    def wire(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.name.capitalize()


# Valid status tokens
TASK_STATUSES = tuple(s.value for s in TaskStatus)

# Valid priority tokens
TASK_PRIORITIES = tuple(p.value for p in TaskPriority)
