# record_export/infrastructure/logging/__init__.py

"""Logging infrastructure for the record export tool.

This module provides centralized logging configuration and setup.
"""

# Local imports
from record_export.infrastructure.logging._setup import get_default_log_path
from record_export.infrastructure.logging._setup import log_run_summary
from record_export.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "get_default_log_path", "log_run_summary"]
