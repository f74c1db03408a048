"""
Task model for taskhooks.

A task is a Python representation of one object in taskwarrior's JSON
export. Four fields are always present (status, uuid, entry, description);
everything else is optional and is left out of the JSON entirely when unset.
Keys that are not part of the fixed schema are kept as user defined
attributes and written back as top-level keys.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union
from uuid import UUID, uuid4

from taskhooks.errors import (
    InvalidFieldError,
    MissingFieldError,
    SerializeError,
    StructuralError,
)
from taskhooks.models.annotation import Annotation
from taskhooks.models.date import format_date, now, parse_date
from taskhooks.models.status import TaskPriority, TaskStatus
from taskhooks.models.uda import UDA
from taskhooks.models.version import TW26, TaskwarriorVersion

logger = logging.getLogger(__name__)

# Fields that must be present in every exported task
REQUIRED_FIELDS = ("status", "uuid", "entry", "description")

# Timestamp fields besides entry
DATE_FIELDS = ("due", "end", "modified", "scheduled", "start", "until", "wait")

# Every key taskwarrior itself defines. Anything else is a UDA.
# Adding a name here reinterprets existing UDA data under that name.
FIXED_FIELDS = (
    "id",
    "status",
    "uuid",
    "entry",
    "description",
    "annotations",
    "depends",
    "due",
    "end",
    "imask",
    "mask",
    "modified",
    "parent",
    "priority",
    "project",
    "recur",
    "scheduled",
    "start",
    "tags",
    "until",
    "wait",
    "urgency",
)

# Output order of the optional fields
OPTIONAL_FIELDS = tuple(
    name for name in FIXED_FIELDS if name not in REQUIRED_FIELDS and name != "id"
)


@dataclass
class Task:
    """
    A taskwarrior task.

    Attributes:
        description: The main content of the task (no default)
        status: pending, deleted, completed, waiting or recurring
        uuid: Stable identity of the task, used for syncing
        entry: When the task was created
        id: Temporary working-set number assigned by taskwarrior
        annotations: Timestamped notes
        depends: UUIDs of tasks that block this one
        due: Due date
        end: When the task was completed or deleted
        imask: Recurrence bookkeeping (used internally by taskwarrior)
        mask: Recurrence bookkeeping (used internally by taskwarrior)
        modified: When the task was last modified
        parent: UUID of the recurring template this task was generated from
        priority: L, M or H; None means no priority
        project: Dotted project name, e.g. "home.garden"
        recur: Recurrence period, carried as-is
        scheduled: When the task becomes ready
        start: When the task became active
        tags: Tags in export order
        until: When recurrence stops
        wait: Task is hidden until this date
        urgency: Score computed by taskwarrior, carried as-is
        uda: User defined attributes
    """

    description: str
    status: TaskStatus = TaskStatus.PENDING
    uuid: UUID = field(default_factory=uuid4)
    entry: datetime = field(default_factory=now)
    id: Optional[int] = None
    annotations: Optional[List[Annotation]] = None
    depends: Optional[List[UUID]] = None
    due: Optional[datetime] = None
    end: Optional[datetime] = None
    imask: Optional[float] = None
    mask: Optional[str] = None
    modified: Optional[datetime] = None
    parent: Optional[UUID] = None
    priority: Optional[TaskPriority] = None
    project: Optional[str] = None
    recur: Optional[str] = None
    scheduled: Optional[datetime] = None
    start: Optional[datetime] = None
    tags: Optional[List[str]] = None
    until: Optional[datetime] = None
    wait: Optional[datetime] = None
    urgency: Optional[float] = None
    uda: UDA = field(default_factory=UDA)

    def __post_init__(self):
        if not isinstance(self.status, TaskStatus):
            self.status = TaskStatus.from_wire(self.status)
        if self.priority is not None and not isinstance(self.priority, TaskPriority):
            self.priority = TaskPriority.from_wire(self.priority)
        if isinstance(self.uuid, str):
            self.uuid = UUID(self.uuid)
        if isinstance(self.parent, str):
            self.parent = UUID(self.parent)
        if not isinstance(self.uda, UDA):
            self.uda = UDA(self.uda)

    @classmethod
    def create(
        cls,
        description: str,
        *,
        clock: Callable[[], datetime] = now,
        uuid_factory: Callable[[], UUID] = uuid4,
        **fields: Any,
    ) -> "Task":
        """
        Build a new task, filling uuid and entry from the given sources.

        Args:
            description: Task description
            clock: Returns the entry timestamp when entry is not given
            uuid_factory: Returns the uuid when uuid is not given
            **fields: Any other Task field

        Returns:
            New Task
        """
        fields.setdefault("uuid", uuid_factory())
        fields.setdefault("entry", clock())
        return cls(description=description, **fields)

    @property
    def is_pending(self) -> bool:
        return self.status == TaskStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @property
    def is_deleted(self) -> bool:
        return self.status == TaskStatus.DELETED

    @property
    def is_waiting(self) -> bool:
        return self.status == TaskStatus.WAITING

    @property
    def is_recurring(self) -> bool:
        return self.status == TaskStatus.RECURRING

    def same_task(self, other: "Task") -> bool:
        """Check identity by uuid; id differs between exports."""
        return self.uuid == other.uuid

    def has_tag(self, tag: str) -> bool:
        return bool(self.tags) and tag in self.tags

    def add_tag(self, tag: str) -> None:
        """Add a tag if not already present."""
        if self.tags is None:
            self.tags = []
        if tag not in self.tags:
            self.tags.append(tag)

    def add_annotation(self, description: str, entry: Optional[datetime] = None) -> Annotation:
        """Append an annotation, timestamped now unless entry is given."""
        annotation = Annotation(entry=entry or now(), description=description)
        if self.annotations is None:
            self.annotations = []
        self.annotations.append(annotation)
        return annotation

    def add_dependency(self, other: Union["Task", UUID]) -> None:
        """Mark this task as blocked by another task."""
        dep = other.uuid if isinstance(other, Task) else other
        if self.depends is None:
            self.depends = []
        if dep not in self.depends:
            self.depends.append(dep)

    def to_dict(self, version: TaskwarriorVersion = TW26) -> dict:
        """
        Convert to the taskwarrior export representation.

        Unset optional fields are omitted, never written as null.
        UDA entries follow the fixed fields in key order.

        Raises:
            SerializeError: If a UDA name collides with a fixed field
        """
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data["status"] = self.status.wire
        data["uuid"] = str(self.uuid)
        data["entry"] = format_date(self.entry)
        data["description"] = self.description

        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            data[name] = _FIELD_ENCODERS[name](value, version)

        for name, value in self.uda.items():
            if name in FIXED_FIELDS:
                raise SerializeError(
                    f"User defined attribute '{name}' collides with a task field"
                )
            data[name] = value

        return data

    def to_json(self, version: TaskwarriorVersion = TW26, **kwargs: Any) -> str:
        """
        Serialize to a JSON object string.

        Extra keyword arguments are passed to json.dumps.

        Raises:
            SerializeError: For non-finite numbers or UDA name collisions
        """
        return dump_json(self.to_dict(version), **kwargs)

    @classmethod
    def from_dict(cls, data: dict, version: TaskwarriorVersion = TW26) -> "Task":
        """
        Create a Task from a decoded taskwarrior export object.

        Keys are processed in input order. A malformed known field or an
        unsupported UDA value fails at once; required fields are checked
        after every key has been seen, in the order status, uuid, entry,
        description.

        Args:
            data: Decoded JSON object
            version: Format of the depends field

        Returns:
            Task

        Raises:
            StructuralError: If data is not an object
            InvalidFieldError: If a known field has the wrong shape
            UnsupportedUDAValueError: If an unknown key holds a non-scalar
            MissingFieldError: If a required field is absent
        """
        if not isinstance(data, dict):
            raise StructuralError(f"Expected a JSON object, got {_json_kind(data)}")

        values: Dict[str, Any] = {}
        uda = UDA()

        for key, raw in data.items():
            if not isinstance(key, str):
                raise StructuralError(f"Object keys must be strings, got {key!r}")

            decoder = _FIELD_DECODERS.get(key)
            if decoder is None:
                uda[key] = raw
                continue

            if raw is None:
                if key in REQUIRED_FIELDS:
                    raise InvalidFieldError(key, "must not be null")
                continue

            try:
                values[key] = decoder(raw, version)
            except (ValueError, TypeError) as e:
                raise InvalidFieldError(key, str(e)) from e

        for name in REQUIRED_FIELDS:
            if name not in values:
                raise MissingFieldError(name)

        task = cls(uda=uda, **values)
        if uda:
            logger.debug(f"Task {task.uuid}: kept {len(uda)} user defined attribute(s)")
        return task

    @classmethod
    def from_json(cls, text: Union[str, bytes], version: TaskwarriorVersion = TW26) -> "Task":
        """Parse a single JSON object into a Task."""
        return cls.from_dict(parse_json(text), version)


def parse_json(text: Union[str, bytes, bytearray]) -> Any:
    """
    Parse JSON text the way taskwarrior writes it.

    NaN and Infinity are not valid JSON and are rejected, as are numbers
    too large to be represented as a finite float.

    Raises:
        StructuralError: If the text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except ValueError as e:
        raise StructuralError(f"Invalid JSON: {e}") from e


def dump_json(value: Any, **kwargs: Any) -> str:
    """Serialize to JSON, raising SerializeError for unrepresentable values."""
    kwargs.setdefault("ensure_ascii", False)
    try:
        return json.dumps(value, allow_nan=False, **kwargs)
    except (ValueError, TypeError) as e:
        raise SerializeError(f"Task could not be converted to JSON: {e}") from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _json_kind(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


# Field decoders: (json value, version) -> python value


def _decode_str(value: Any, version: TaskwarriorVersion) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {_json_kind(value)}")
    return value


def _decode_uuid(value: Any, version: TaskwarriorVersion = TW26) -> UUID:
    if not isinstance(value, str):
        raise ValueError(f"expected a uuid string, got {_json_kind(value)}")
    if len(value) != 36:
        raise ValueError(f"'{value}' is not a hyphenated uuid")
    try:
        parsed = UUID(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid uuid") from None
    if str(parsed) != value.lower():
        raise ValueError(f"'{value}' is not a hyphenated uuid")
    return parsed


def _decode_date(value: Any, version: TaskwarriorVersion) -> datetime:
    return parse_date(value)


def _decode_float(value: Any, version: TaskwarriorVersion) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {_json_kind(value)}")
    try:
        return float(value)
    except OverflowError:
        raise ValueError("number is out of range") from None


def _decode_id(value: Any, version: TaskwarriorVersion) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {_json_kind(value)}")
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value}")
    return value


def _decode_status(value: Any, version: TaskwarriorVersion) -> TaskStatus:
    return TaskStatus.from_wire(_decode_str(value, version))


def _decode_priority(value: Any, version: TaskwarriorVersion) -> TaskPriority:
    return TaskPriority.from_wire(_decode_str(value, version))


def _decode_annotations(value: Any, version: TaskwarriorVersion) -> List[Annotation]:
    if not isinstance(value, list):
        raise ValueError(f"expected an array, got {_json_kind(value)}")
    return [Annotation.from_dict(item) for item in value]


def _decode_tags(value: Any, version: TaskwarriorVersion) -> List[str]:
    if not isinstance(value, list):
        raise ValueError(f"expected an array, got {_json_kind(value)}")
    return [_decode_str(tag, version) for tag in value]


def _decode_depends(value: Any, version: TaskwarriorVersion) -> List[UUID]:
    if version.legacy_depends:
        if not isinstance(value, str):
            raise ValueError(f"expected a comma separated string, got {_json_kind(value)}")
        if value == "":
            return []
        return [_decode_uuid(part) for part in value.split(",")]

    if not isinstance(value, list):
        raise ValueError(f"expected an array of uuids, got {_json_kind(value)}")
    return [_decode_uuid(item) for item in value]


_FIELD_DECODERS: Dict[str, Callable[[Any, TaskwarriorVersion], Any]] = {
    "id": _decode_id,
    "status": _decode_status,
    "uuid": _decode_uuid,
    "entry": _decode_date,
    "description": _decode_str,
    "annotations": _decode_annotations,
    "depends": _decode_depends,
    "imask": _decode_float,
    "mask": _decode_str,
    "parent": _decode_uuid,
    "priority": _decode_priority,
    "project": _decode_str,
    "recur": _decode_str,
    "tags": _decode_tags,
    "urgency": _decode_float,
    **{name: _decode_date for name in DATE_FIELDS},
}


# Field encoders for optional fields: (python value, version) -> json value


def _encode_depends(value: List[UUID], version: TaskwarriorVersion) -> Union[str, List[str]]:
    uuids = [str(dep) for dep in value]
    if version.legacy_depends:
        return ",".join(uuids)
    return uuids


def _encode_float(value: float, version: TaskwarriorVersion) -> float:
    return float(value)


def _identity(value: Any, version: TaskwarriorVersion) -> Any:
    return value


_FIELD_ENCODERS: Dict[str, Callable[[Any, TaskwarriorVersion], Any]] = {
    "annotations": lambda value, version: [a.to_dict() for a in value],
    "depends": _encode_depends,
    "imask": _encode_float,
    "mask": _identity,
    "parent": lambda value, version: str(value),
    "priority": lambda value, version: value.wire,
    "project": _identity,
    "recur": _identity,
    "tags": lambda value, version: list(value),
    "urgency": _encode_float,
    **{name: (lambda value, version: format_date(value)) for name in DATE_FIELDS},
}


def decode_legacy(data: Union[dict, str, bytes]) -> Task:
    """Decode a task exported by taskwarrior 2.5 or older."""
    if isinstance(data, dict):
        return Task.from_dict(data, TaskwarriorVersion.TW25)
    return Task.from_json(data, TaskwarriorVersion.TW25)


def decode_current(data: Union[dict, str, bytes]) -> Task:
    """Decode a task exported by taskwarrior 2.6 or newer."""
    if isinstance(data, dict):
        return Task.from_dict(data, TaskwarriorVersion.TW26)
    return Task.from_json(data, TaskwarriorVersion.TW26)
