"""
Pytest configuration and fixtures for taskhooks tests.
"""

import pytest
import sys
from pathlib import Path

# Add packages to path for testing
packages_dir = Path(__file__).parent.parent / "packages"
sys.path.insert(0, str(packages_dir / "taskhooks-core"))


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / ".taskhooks"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def sample_task_json():
    """A task as exported by taskwarrior 2.6."""
    return """{
        "id": 1,
        "description": "some description",
        "entry": "20150619T165438Z",
        "modified": "20160327T164007Z",
        "project": "someproject",
        "status": "waiting",
        "tags": ["some", "tags", "are", "here"],
        "uuid": "8ca953d5-18b4-4eb9-bd56-18f2e5b752f0",
        "depends": ["8ca953d5-18b4-4eb9-bd56-18f2e5b752f0", "5a04bb1e-3f4b-49fb-b9ba-44407ca223b5"],
        "wait": "20160508T164007Z",
        "urgency": 0.583562
    }"""


@pytest.fixture
def sample_task_data():
    """Minimal valid task object."""
    return {
        "status": "pending",
        "uuid": "5a04bb1e-3f4b-49fb-b9ba-44407ca223b5",
        "entry": "20160423T125820Z",
        "description": "Some long description for a task",
    }
