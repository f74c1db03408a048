"""
Import, export and taskwarrior process services.
"""

from taskhooks.services.exports import export_task, export_tasks
from taskhooks.services.imports import (
    LineResult,
    import_lines,
    import_task,
    import_tasks,
    iter_lines,
)
from taskhooks.services.taskwarrior import TaskwarriorRunner, task_available

__all__ = [
    "import_task",
    "import_tasks",
    "import_lines",
    "iter_lines",
    "LineResult",
    "export_task",
    "export_tasks",
    "TaskwarriorRunner",
    "task_available",
]
