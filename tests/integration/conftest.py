# tests/integration/conftest.py

"""Integration test fixtures and configuration"""

# Standard library imports
from pathlib import Path

# Third party imports
import pytest


@pytest.fixture
def temp_output_dir(work_dir: Path) -> Path:
    """Empty output directory inside the temporary working directory"""
    output_dir = work_dir / "output"
    output_dir.mkdir()
    return output_dir
