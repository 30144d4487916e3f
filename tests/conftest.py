# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import Logger
from logging import getLogger

# Third party imports
import pytest

# Local imports
from record_export.infrastructure.config import ConfigLoader

# Shared fixtures available to every test
from tests.fixtures.products import sample_products  # noqa: F401
from tests.fixtures.products import small_products  # noqa: F401


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation(monkeypatch):
    """Minimal isolation for every test - reset logging and the cached default config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(30)  # WARNING level

    Logger.manager.loggerDict.clear()

    monkeypatch.setattr("record_export.infrastructure.config._loader._default_config", None)

    yield


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary working directory"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def default_config(work_dir) -> ConfigLoader:
    """Configuration with every default (no config.json in the working directory)"""
    return ConfigLoader()
