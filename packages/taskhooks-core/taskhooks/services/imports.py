"""
Import tasks from taskwarrior JSON.

Three shapes are supported:
- a single task object (import_task)
- a JSON array of task objects, as written by `task export` (import_tasks)
- one task object per line (import_lines / iter_lines)

Array import is all-or-nothing. Line import decodes every line on its own
so one corrupt record does not lose the rest.
"""

import logging
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, List, Optional, Union

from taskhooks.errors import StructuralError, TaskwarriorError
from taskhooks.models.task import Task, parse_json
from taskhooks.models.version import TW26, TaskwarriorVersion

logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, IO]


def _read_source(source: Source) -> Union[str, bytes, bytearray]:
    if isinstance(source, (str, bytes, bytearray)):
        return source
    if hasattr(source, "read"):
        return source.read()
    raise TypeError(f"Cannot import tasks from {type(source).__name__}")


def import_task(text: Union[str, bytes], version: TaskwarriorVersion = TW26) -> Task:
    """
    Import a single JSON formatted task.

    Args:
        text: JSON object text
        version: Format of the depends field

    Returns:
        Task

    Raises:
        DecodeError: If the text is not a valid task
    """
    return Task.from_json(text, version)


def import_tasks(source: Source, version: TaskwarriorVersion = TW26) -> List[Task]:
    """
    Import a JSON array of tasks, as exported by taskwarrior.

    Fails on the first element that cannot be decoded.

    Args:
        source: JSON text, bytes, or a readable file object
        version: Format of the depends field

    Returns:
        List of tasks in input order

    Raises:
        StructuralError: If the payload is not a JSON array
        DecodeError: If any element is not a valid task
    """
    data = parse_json(_read_source(source))
    if not isinstance(data, list):
        raise StructuralError(f"Expected a JSON array of tasks, got {type(data).__name__}")

    tasks = []
    for index, item in enumerate(data):
        try:
            tasks.append(Task.from_dict(item, version))
        except TaskwarriorError as e:
            logger.debug(f"Task at index {index} failed to decode: {e}")
            raise

    logger.info(f"Imported {len(tasks)} task(s)")
    return tasks


@dataclass
class LineResult:
    """
    Outcome of decoding one line of line-oriented input.

    Exactly one of task and error is set.
    """

    line_number: int
    task: Optional[Task] = None
    error: Optional[TaskwarriorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def result(self) -> Task:
        """Return the task, or raise the error this line produced."""
        if self.error is not None:
            raise self.error
        return self.task


def _lines(reader: Union[Source, Iterable[Union[str, bytes]]]) -> Iterable[Union[str, bytes]]:
    if isinstance(reader, str):
        return reader.split("\n")
    if isinstance(reader, (bytes, bytearray)):
        return reader.split(b"\n")
    return reader


def iter_lines(
    reader: Union[Source, Iterable[Union[str, bytes]]],
    version: TaskwarriorVersion = TW26,
) -> Iterator[LineResult]:
    """
    Lazily decode one task per line.

    Blank lines are skipped. Every other line yields a LineResult,
    successful or not.

    Args:
        reader: File object, iterable of lines, or the whole text
        version: Format of the depends field

    Yields:
        LineResult per non-blank line
    """
    for line_number, line in enumerate(_lines(reader), start=1):
        if isinstance(line, (bytes, bytearray)):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.warning(f"Line {line_number} is not valid UTF-8: {e}")
                yield LineResult(line_number, error=StructuralError(f"Invalid UTF-8: {e}"))
                continue

        if not line.strip():
            continue

        try:
            task = Task.from_json(line, version)
        except TaskwarriorError as e:
            logger.warning(f"Skipping line {line_number}: {e}")
            yield LineResult(line_number, error=e)
        else:
            yield LineResult(line_number, task=task)


def import_lines(
    reader: Union[Source, Iterable[Union[str, bytes]]],
    version: TaskwarriorVersion = TW26,
) -> List[LineResult]:
    """
    Read line by line and decode a task object per line.

    Returns one result per non-blank line, in input order.
    """
    results = list(iter_lines(reader, version))
    failed = sum(1 for r in results if not r.ok)
    logger.info(f"Imported {len(results) - failed} task(s) from lines, {failed} failed")
    return results
