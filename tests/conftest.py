"""Test fixtures for Image Tag Deriver.

This module provides shared fixtures used across multiple test modules.

Fixtures:
    sha: A full length commit sha
    fixed_clock: A clock returning a fixed UTC time
    config_yaml: Creates a temporary YAML config file
"""

from datetime import datetime, timezone

import pytest
import yaml


@pytest.fixture
def sha():
    """Full length commit sha used across tests."""
    return "abcdef1234567890abcdef1234567890abcdef12"


@pytest.fixture
def fixed_clock():
    """Clock returning 2024-01-31 15:45:02.123456 UTC."""
    return lambda: datetime(2024, 1, 31, 15, 45, 2, 123456, tzinfo=timezone.utc)


@pytest.fixture
def config_yaml(tmp_path):
    """Creates a temporary .image-tags.yaml file.

    Args:
        tmp_path (Path): Built-in pytest fixture providing a temporary directory path

    Returns:
        dict: A dictionary containing:
            - config_file (Path): Path to the YAML file
            - data (dict): The YAML content
    """
    config_file = tmp_path / ".image-tags.yaml"
    data = {
        "image": "app",
        "registry": "registry.example.com",
        "tag": {"semver": "fail", "extra": ["stable", "edge"]},
        "semver": {"prerelease": "short", "higher": True},
    }

    with config_file.open("w") as f:
        yaml.dump(data, f)

    return {"config_file": config_file, "data": data}
