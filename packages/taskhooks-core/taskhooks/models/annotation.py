"""
Annotation model.

Each annotation in taskwarrior consists of a date and a description; the
date is named "entry" and the text "description" in the JSON export.
"""

from dataclasses import dataclass
from datetime import datetime

from taskhooks.models.date import format_date, parse_date


@dataclass(frozen=True)
class Annotation:
    """A timestamped note attached to a task."""

    entry: datetime
    description: str

    def to_dict(self) -> dict:
        """Convert to the wire representation."""
        return {
            "entry": format_date(self.entry),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Annotation":
        """
        Create an Annotation from its wire representation.

        Raises:
            ValueError: If the object is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"annotation must be an object, got {type(data).__name__}")
        for key in ("entry", "description"):
            if key not in data:
                raise ValueError(f"annotation is missing '{key}'")

        description = data["description"]
        if not isinstance(description, str):
            raise ValueError("annotation description must be a string")

        return cls(entry=parse_date(data["entry"]), description=description)
