"""
Data models for taskwarrior tasks.
"""

from taskhooks.models.annotation import Annotation
from taskhooks.models.date import TASKWARRIOR_DATETIME_TEMPLATE, format_date, parse_date
from taskhooks.models.status import TaskPriority, TaskStatus
from taskhooks.models.task import FIXED_FIELDS, Task, decode_current, decode_legacy
from taskhooks.models.uda import UDA, UDAValue
from taskhooks.models.version import TW25, TW26, TaskwarriorVersion

__all__ = [
    "Task",
    "Annotation",
    "TaskStatus",
    "TaskPriority",
    "UDA",
    "UDAValue",
    "TaskwarriorVersion",
    "TW25",
    "TW26",
    "FIXED_FIELDS",
    "TASKWARRIOR_DATETIME_TEMPLATE",
    "parse_date",
    "format_date",
    "decode_legacy",
    "decode_current",
]
