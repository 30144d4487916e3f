# record_export/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import ArgumentTypeError

# Local imports
from record_export.core.domain.enums import OutputFormat
from record_export.infrastructure.config import check_archive_name
from record_export.infrastructure.config import get_config


def archive_name_arg(value: str) -> str:
    """argparse type for --archive-name"""
    try:
        return check_archive_name(value)
    except ValueError as e:
        raise ArgumentTypeError(str(e)) from e


def create_argument_parser(config_path: str | None = None) -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Args:
        config_path: Configuration file supplying the defaults, auto-detected if None
    """
    config = get_config(config_path)

    output_config = config.output
    sample_config = config.sample
    logging_config = config.logging

    parser = ArgumentParser(
        description="Export product records to spreadsheet and PDF files, optionally zipped"
    )

    # Configuration file
    parser.add_argument(
        "--config",
        default=config_path,
        help="Path to JSON configuration file (default: ./config.json if present)",
    )

    # Output options
    parser.add_argument(
        "--formats",
        nargs="+",
        choices=[fmt.value for fmt in OutputFormat],
        default=list(output_config.formats),
        help=f"Output formats to generate (default: {' '.join(output_config.formats)})",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        default=output_config.directory,
        help=f"Directory for output files (default: {output_config.directory})",
    )
    # Standalone files by default, so use store_true to enable archiving
    parser.add_argument(
        "--archive",
        action="store_true",
        help="Bundle all formats into a single ZIP archive instead of separate files",
    )
    parser.add_argument(
        "--archive-name",
        type=archive_name_arg,
        default=output_config.archive_name,
        help=f"File name of the ZIP archive (default: {output_config.archive_name})",
    )

    # Sample data
    parser.add_argument(
        "--count",
        type=int,
        default=sample_config.count,
        help=f"Number of sample products to export (default: {sample_config.count})",
    )

    # Logging options
    parser.add_argument(
        "--log-file",
        default=logging_config.log_file,
        help="Path to log file (default: logs/record_export_[timestamp].log)",
    )
    # File logging is enabled by default, so use store_true to disable it
    parser.add_argument("--disable-file-logging", action="store_true", help="Disable file logging")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="DEBUG" if logging_config.debug else "INFO",
        help="Console logging level (default: INFO)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress all console output")

    return parser
