"""
Taskwarrior export format versions.

Taskwarrior 2.6.0 changed ``depends`` from a comma separated string of
uuids to a proper JSON array. Every codec entry point takes one of these
so the format is fixed by the caller, never guessed from the payload.
"""

from enum import Enum


class TaskwarriorVersion(Enum):
    """Wire format selector."""

    TW25 = "2.5"  # 2.5.3 and older: depends is "uuid,uuid"
    TW26 = "2.6"  # 2.6.0 and newer: depends is ["uuid", "uuid"]

    @classmethod
    def parse(cls, raw: str) -> "TaskwarriorVersion":
        """
        Parse a version string from configuration.

        Accepts "2.5", "2.5.3", "tw25", "2.6", "3.0" and similar.
        """
        text = str(raw).strip().lower()
        if text in ("tw25", "2.5") or text.startswith("2.5.") or text.startswith("2.4"):
            return cls.TW25
        if text in ("tw26", "2.6") or text.startswith("2.6.") or text.startswith("3"):
            return cls.TW26
        raise ValueError(f"Unknown taskwarrior version '{raw}'. Use 2.5 or 2.6")

    @property
    def legacy_depends(self) -> bool:
        """True when depends is a comma joined string."""
        return self is TaskwarriorVersion.TW25


TW25 = TaskwarriorVersion.TW25
TW26 = TaskwarriorVersion.TW26
