"""
Taskwarrior process integration.

Calls the `task` binary and never touches the data directory itself, in
accordance with taskwarrior's API guidelines. Filters passed to query()
are not sanitized; never build them from untrusted input.
"""

import logging
import os
import shutil
import subprocess
from typing import Dict, Iterable, List, Optional

from taskhooks.config import TaskwarriorConfig, get_config
from taskhooks.errors import TaskCommandError
from taskhooks.models.task import Task
from taskhooks.models.version import TaskwarriorVersion
from taskhooks.services.exports import export_tasks
from taskhooks.services.imports import import_tasks

logger = logging.getLogger(__name__)

# Cache for binary availability checks
_task_available: Dict[str, bool] = {}


def task_available(binary: str = "task") -> bool:
    """Check if the task binary is installed."""
    if binary in _task_available:
        return _task_available[binary]

    available = shutil.which(binary) is not None
    if not available:
        logger.debug(f"{binary} not found in PATH")
    _task_available[binary] = available
    return available


class TaskwarriorRunner:
    """
    Runs `task export` and `task import`.

    Output of export is decoded with import_tasks, input of import is
    produced with export_tasks, both in the configured format version.
    """

    def __init__(self, config: Optional[TaskwarriorConfig] = None):
        """
        Initialize the runner.

        Args:
            config: Optional TaskwarriorConfig. If not provided, uses global config.
        """
        self._config = config

    @property
    def config(self) -> TaskwarriorConfig:
        if self._config is None:
            self._config = get_config().taskwarrior
        return self._config

    @property
    def version(self) -> TaskwarriorVersion:
        return self.config.format_version

    def _command(self, args: List[str]) -> List[str]:
        return [self.config.binary, *self.config.rc_overrides, *args]

    def _env(self) -> Dict[str, str]:
        env = dict(os.environ)
        if self.config.taskrc:
            env["TASKRC"] = os.path.expanduser(self.config.taskrc)
        if self.config.taskdata:
            env["TASKDATA"] = os.path.expanduser(self.config.taskdata)
        return env

    def _run(self, args: List[str], stdin: Optional[str] = None) -> str:
        if not task_available(self.config.binary):
            raise TaskCommandError(f"task binary not found: {self.config.binary}")

        cmd = self._command(args)
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                input=stdin,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
                env=self._env(),
            )
        except FileNotFoundError as e:
            raise TaskCommandError(f"task binary not found: {self.config.binary}") from e
        except subprocess.TimeoutExpired as e:
            raise TaskCommandError(
                f"task timed out after {self.config.timeout}s: {' '.join(cmd)}"
            ) from e

        if result.returncode != 0:
            raise TaskCommandError(
                f"task error ({result.returncode}): {result.stderr.strip()}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return result.stdout

    def query(self, filters: str = "") -> List[Task]:
        """
        Return all tasks matching a filter in taskwarrior's query syntax.

        Args:
            filters: e.g. "project:home status:pending"

        Returns:
            Matching tasks

        Raises:
            TaskCommandError: If task fails
            DecodeError: If its output cannot be decoded
        """
        stdout = self._run([*filters.split(), "export"])
        tasks = import_tasks(stdout, self.version)
        logger.info(f"Query '{filters}' returned {len(tasks)} task(s)")
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """
        Hand tasks to `task import`, creating or updating them by uuid.

        Raises:
            TaskCommandError: If task fails
            SerializeError: If a task cannot be converted to JSON
        """
        tasks = list(tasks)
        payload = export_tasks(tasks, self.version)
        self._run(["import"], stdin=payload)
        logger.info(f"Saved {len(tasks)} task(s) to taskwarrior")
