"""Pytest configuration and shared fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskbot.config import Config  # noqa: E402
from taskbot.storage import FileStorage  # noqa: E402

from fakes import MemoryStorage  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep config, data and log files out of the real home directory."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    Config._instance = None
    yield
    Config._instance = None
    logger = logging.getLogger("taskbot")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def data_file(tmp_path):
    """Path of a task data file that does not exist yet."""
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture
def file_storage(data_file):
    return FileStorage(data_file)


@pytest.fixture
def memory_storage():
    return MemoryStorage()
