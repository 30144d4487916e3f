# record_export/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger
from zipfile import ZIP_DEFLATED
from zipfile import ZIP_STORED

# Local imports
from record_export.infrastructure.config._models import AppConfig
from record_export.infrastructure.config._models import LoggingConfig
from record_export.infrastructure.config._models import OutputConfig
from record_export.infrastructure.config._models import PDFConfig
from record_export.infrastructure.config._models import SampleConfig
from record_export.infrastructure.config._models import XLSXConfig

logger = getLogger(__name__)

_COMPRESSION_METHODS = {"deflated": ZIP_DEFLATED, "stored": ZIP_STORED}


class ConfigLoader:
    """Configuration loader giving typed access to each config section"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @property
    def output(self) -> OutputConfig:
        """Output configuration"""
        return self._app_config.output

    @property
    def xlsx(self) -> XLSXConfig:
        """Spreadsheet renderer configuration"""
        return self._app_config.xlsx

    @property
    def pdf(self) -> PDFConfig:
        """PDF renderer configuration"""
        return self._app_config.pdf

    @property
    def sample(self) -> SampleConfig:
        """Sample data configuration"""
        return self._app_config.sample

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    @property
    def compression_method(self) -> int:
        """zipfile constant for the configured archive compression"""
        return _COMPRESSION_METHODS[self._app_config.output.compression]


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
