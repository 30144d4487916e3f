# record_export/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import Literal

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

logger = getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config.json")


def check_archive_name(name: str) -> str:
    """Return the name unchanged if it is a plain .zip file name

    Raises:
        ValueError: If the name lacks a .zip suffix or has a directory part
    """
    if not name.lower().endswith(".zip"):
        raise ValueError(f"Archive name must end with .zip, got {name!r}")
    if Path(name).name != name:
        raise ValueError(f"Archive name must not contain a directory, got {name!r}")
    return name


class OutputConfig(BaseModel):
    """Output location and archive configuration"""

    directory: str = Field(".", description="Directory export files are written to")
    archive_name: str = Field("files.zip", description="File name of the combined archive")
    compression: Literal["deflated", "stored"] = Field(
        "deflated", description="Per-entry compression used inside the archive"
    )
    formats: list[Literal["xlsx", "pdf"]] = Field(
        default_factory=lambda: ["xlsx", "pdf"], description="Formats exported by default"
    )

    @field_validator("archive_name")
    @classmethod
    def validate_archive_name(cls, v: str) -> str:
        """Archive name must be a plain .zip file name"""
        return check_archive_name(v)


class XLSXConfig(BaseModel):
    """Spreadsheet renderer configuration"""

    currency_format: str = Field("#,##0.00", description="Number format for currency cells")


class PDFConfig(BaseModel):
    """PDF renderer configuration"""

    page_size: Literal["A4", "LETTER"] = Field("A4", description="Page size")
    font_size: int = Field(10, ge=6, le=24, description="Bullet text font size in points")
    title: str | None = Field(None, description="Document title metadata")
    invariant: bool = Field(
        True, description="Omit timestamps and random ids so identical input gives identical bytes"
    )


class SampleConfig(BaseModel):
    """Sample data configuration for the CLI"""

    count: int = Field(30, ge=0, description="Number of sample products to export")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    output: OutputConfig = Field(default_factory=OutputConfig)
    xlsx: XLSXConfig = Field(default_factory=XLSXConfig)
    pdf: PDFConfig = Field(default_factory=PDFConfig)
    sample: SampleConfig = Field(default_factory=SampleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Read and validate a JSON config file

        A missing file means all defaults. An unreadable or invalid file is
        reported as a warning and also gives the defaults, so a bad config
        never stops an export.

        Args:
            config_path: JSON file, ./config.json if None

        Returns:
            Validated AppConfig instance
        """
        path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            return cls.model_validate_json(path.read_bytes())
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config from {path}: {e}. Using defaults.")
            return cls()
