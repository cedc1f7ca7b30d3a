"""
Shared fixtures for the gradle.properties tests.
"""

from unittest.mock import MagicMock

import pytest
from loguru import logger

from gradle_utils import GradlePropertiesEditor


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop sinks added by a test so later tests never write to closed streams."""
    yield
    logger.remove()


@pytest.fixture
def platform_dir(tmp_path):
    """An empty Android platform directory."""
    directory = tmp_path / "android"
    directory.mkdir()
    return directory


@pytest.fixture
def gradle_file(platform_dir):
    return platform_dir / "gradle.properties"


@pytest.fixture
def write_gradle_file(gradle_file):
    """Write raw content to gradle.properties, byte for byte."""

    def write(content: str):
        gradle_file.write_bytes(content.encode("latin-1"))
        return gradle_file

    return write


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def editor(platform_dir, mock_logger):
    return GradlePropertiesEditor(platform_dir, logger=mock_logger)


@pytest.fixture
def log_records():
    """Collect (level, message) pairs logged through loguru."""
    records = []
    logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    return records


def messages(mock_method):
    return [call.args[0] for call in mock_method.call_args_list]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every GRADLE_PROPS_* variable."""
    for name in ("PLATFORM_DIR", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"GRADLE_PROPS_{name}", raising=False)
    return monkeypatch
