"""
taskhooks Configuration

Loads settings from ~/.taskhooks/config.yaml with environment variable overrides.
Controls how the `task` binary is called and which export format it speaks.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, List
import os
import logging

import yaml

from taskhooks.models.version import TaskwarriorVersion

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".taskhooks"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


@dataclass
class TaskwarriorConfig:
    """How to call the external `task` binary."""

    binary: str = "task"
    version: str = "2.6"  # "2.5" for comma separated depends
    taskrc: Optional[str] = None
    taskdata: Optional[str] = None
    timeout: int = 30
    rc_overrides: List[str] = field(default_factory=list)  # e.g. ["rc.confirmation=off"]

    @property
    def format_version(self) -> TaskwarriorVersion:
        return TaskwarriorVersion.parse(self.version)


@dataclass
class TaskhooksConfig:
    """
    Complete taskhooks configuration.

    Loaded from ~/.taskhooks/config.yaml with environment variable overrides.
    """

    taskwarrior: TaskwarriorConfig = field(default_factory=TaskwarriorConfig)

    @property
    def format_version(self) -> TaskwarriorVersion:
        return self.taskwarrior.format_version

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return asdict(self)


def _parse_taskwarrior_config(data: dict) -> TaskwarriorConfig:
    """Parse taskwarrior configuration from YAML data."""
    tw_data = data.get("taskwarrior", {}) or {}

    rc_overrides = tw_data.get("rc_overrides", [])
    if isinstance(rc_overrides, dict):
        # Also accept {"confirmation": "off"} style
        rc_overrides = [f"rc.{k}={v}" for k, v in rc_overrides.items()]

    return TaskwarriorConfig(
        binary=tw_data.get("binary", "task"),
        version=str(tw_data.get("version", "2.6")),
        taskrc=tw_data.get("taskrc"),
        taskdata=tw_data.get("taskdata"),
        timeout=int(tw_data.get("timeout", 30)),
        rc_overrides=list(rc_overrides),
    )


def load_config(config_path: Optional[Path] = None) -> TaskhooksConfig:
    """
    Load configuration from file with environment variable overrides.

    Args:
        config_path: Optional path to config file. Defaults to ~/.taskhooks/config.yaml

    Returns:
        TaskhooksConfig instance

    Raises:
        ValueError: If the configured format version is unknown
    """
    config_file = config_path or CONFIG_FILE
    config = TaskhooksConfig()

    if config_file.exists():
        try:
            with open(config_file, 'r') as f:
                data = yaml.safe_load(f) or {}

            config.taskwarrior = _parse_taskwarrior_config(data)

        except yaml.YAMLError as e:
            logger.warning(f"Could not parse config file at {config_file}: {e}")
        except (OSError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Unexpected error loading config from {config_file}: {e}")

    # Environment variable overrides
    if os.environ.get("TASKHOOKS_TASK_BINARY"):
        config.taskwarrior.binary = os.environ["TASKHOOKS_TASK_BINARY"]

    if os.environ.get("TASKHOOKS_FORMAT_VERSION"):
        config.taskwarrior.version = os.environ["TASKHOOKS_FORMAT_VERSION"]

    if os.environ.get("TASKRC"):
        config.taskwarrior.taskrc = os.environ["TASKRC"]

    if os.environ.get("TASKDATA"):
        config.taskwarrior.taskdata = os.environ["TASKDATA"]

    # Unknown versions raise ValueError
    config.taskwarrior.format_version

    return config


def save_config(config: TaskhooksConfig, config_path: Optional[Path] = None) -> None:
    """
    Save configuration to file.

    Args:
        config: TaskhooksConfig instance to save
        config_path: Optional path to config file. Defaults to ~/.taskhooks/config.yaml
    """
    config_file = config_path or CONFIG_FILE

    # Ensure config directory exists
    config_file.parent.mkdir(parents=True, exist_ok=True)

    tw = config.taskwarrior
    data = {
        "taskwarrior": {
            "binary": tw.binary,
            "version": tw.version,
            "timeout": tw.timeout,
        },
    }

    if tw.taskrc:
        data["taskwarrior"]["taskrc"] = tw.taskrc
    if tw.taskdata:
        data["taskwarrior"]["taskdata"] = tw.taskdata
    if tw.rc_overrides:
        data["taskwarrior"]["rc_overrides"] = list(tw.rc_overrides)

    with open(config_file, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Configuration saved to {config_file}")


# Cached config instance
_config: Optional[TaskhooksConfig] = None


def get_config() -> TaskhooksConfig:
    """Get cached config instance, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> TaskhooksConfig:
    """Force reload config from file."""
    global _config
    _config = load_config()
    return _config
