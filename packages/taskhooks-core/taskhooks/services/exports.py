"""
Export tasks to taskwarrior JSON.
"""

import logging
from typing import Any, Iterable

from taskhooks.models.task import Task, dump_json
from taskhooks.models.version import TW26, TaskwarriorVersion

logger = logging.getLogger(__name__)


def export_task(task: Task, version: TaskwarriorVersion = TW26, **kwargs: Any) -> str:
    """Serialize one task as a JSON object."""
    return task.to_json(version, **kwargs)


def export_tasks(tasks: Iterable[Task], version: TaskwarriorVersion = TW26, **kwargs: Any) -> str:
    """
    Serialize tasks as a JSON array, the shape `task import` reads.

    Args:
        tasks: Tasks to export
        version: Format of the depends field
        **kwargs: Passed to json.dumps (e.g. indent)

    Returns:
        JSON array text

    Raises:
        SerializeError: If a task cannot be represented as JSON
    """
    data = [task.to_dict(version) for task in tasks]
    logger.debug(f"Exporting {len(data)} task(s)")
    return dump_json(data, **kwargs)
