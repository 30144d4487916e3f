# record_export/infrastructure/config/__init__.py

"""Configuration infrastructure for the record export tool.

This module manages configuration loading, validation, and models.
"""

# Local imports
from record_export.infrastructure.config._loader import ConfigLoader
from record_export.infrastructure.config._loader import get_config
from record_export.infrastructure.config._models import AppConfig
from record_export.infrastructure.config._models import OutputConfig
from record_export.infrastructure.config._models import PDFConfig
from record_export.infrastructure.config._models import XLSXConfig
from record_export.infrastructure.config._models import check_archive_name

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "OutputConfig",
    "PDFConfig",
    "XLSXConfig",
    "check_archive_name",
    "get_config",
]
