"""
Exceptions raised by taskhooks.

Decode failures subclass ValueError so callers that already catch
ValueError around parsing keep working.
"""

from typing import Optional


class TaskwarriorError(Exception):
    """Base class for all taskhooks errors."""


class DecodeError(TaskwarriorError, ValueError):
    """A payload could not be turned into Task records."""


class StructuralError(DecodeError):
    """The payload is not valid JSON or not the expected object/array shape."""


class MissingFieldError(DecodeError):
    """A required task field was absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field '{field}'")


class InvalidFieldError(DecodeError):
    """A known task field had a value of the wrong shape."""

    def __init__(self, field: str, detail: str):
        self.field = field
        self.detail = detail
        super().__init__(f"Invalid value for field '{field}': {detail}")


class UnsupportedUDAValueError(DecodeError):
    """An unknown key carried a value that is not a string or number."""

    def __init__(self, field: str, value: object = None, reason: Optional[str] = None):
        self.field = field
        if reason is None:
            kind = type(value).__name__ if value is not None else "null"
            reason = f"expected string or number, got {kind}"
        super().__init__(f"Unsupported value for user defined attribute '{field}': {reason}")


class SerializeError(TaskwarriorError, ValueError):
    """A task could not be converted to JSON."""


class TaskCommandError(TaskwarriorError, RuntimeError):
    """Calling the external `task` binary failed."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
