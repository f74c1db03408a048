"""
taskhooks

Typed import and export of taskwarrior JSON, including user defined
attributes and both historical formats of the depends field.
"""

__version__ = "0.1.0"

from taskhooks.config import TaskhooksConfig, load_config
from taskhooks.errors import (
    DecodeError,
    InvalidFieldError,
    MissingFieldError,
    SerializeError,
    StructuralError,
    TaskCommandError,
    TaskwarriorError,
    UnsupportedUDAValueError,
)
from taskhooks.models import (
    TW25,
    TW26,
    UDA,
    Annotation,
    Task,
    TaskPriority,
    TaskStatus,
    TaskwarriorVersion,
)
from taskhooks.services import (
    LineResult,
    TaskwarriorRunner,
    export_task,
    export_tasks,
    import_lines,
    import_task,
    import_tasks,
)

__all__ = [
    "load_config",
    "TaskhooksConfig",
    "Task",
    "Annotation",
    "TaskStatus",
    "TaskPriority",
    "UDA",
    "TaskwarriorVersion",
    "TW25",
    "TW26",
    "import_task",
    "import_tasks",
    "import_lines",
    "LineResult",
    "export_task",
    "export_tasks",
    "TaskwarriorRunner",
    "TaskwarriorError",
    "DecodeError",
    "StructuralError",
    "MissingFieldError",
    "InvalidFieldError",
    "UnsupportedUDAValueError",
    "SerializeError",
    "TaskCommandError",
]
