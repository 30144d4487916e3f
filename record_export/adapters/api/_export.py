# record_export/adapters/api/_export.py

"""High-level export entry point used by the CLI and library callers"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import Iterable

# Local imports
from record_export.application.commands import create_command
from record_export.application.services import ExportInvoker
from record_export.core.domain.enums import OutputFormat
from record_export.core.domain.schema import RecordSchema
from record_export.infrastructure.config import ConfigLoader
from record_export.infrastructure.config import get_config

logger = getLogger(__name__)


def export_records[R](
    records: Iterable[R],
    schema: RecordSchema[R],
    formats: list[str] | None = None,
    archive: bool = False,
    output_dir: Path | str | None = None,
    archive_name: str | None = None,
    config: ConfigLoader | None = None,
) -> list[Path]:
    """Export records in each requested format

    Args:
        records: Records to export
        schema: Ordered field declarations for the record type
        formats: Output formats (xlsx, pdf), configured formats if None
        archive: If True, bundle all formats into one archive instead of
            writing standalone files
        output_dir: Output directory, configured directory if None
        archive_name: Archive file name, configured name if None
        config: Configuration loader, uses default if None

    Returns:
        Paths written: one per format, or the archive alone in archive mode
    """
    if config is None:
        config = get_config()
    if formats is None:
        formats = list(config.output.formats)

    records = tuple(records)
    output_formats = [OutputFormat(fmt.lower()) for fmt in formats]
    invoker = ExportInvoker(output_dir=output_dir, archive_name=archive_name, config=config)

    logger.info(f"Exporting {len(records)} {schema.type_name} record(s) to {invoker.output_dir}")
    logger.info(f"Formats: {', '.join(fmt.value for fmt in output_formats)}")

    if archive:
        for fmt in output_formats:
            invoker.register(create_command(fmt, schema, records, config))
        archive_path = invoker.run_all_into_one_archive()
        logger.info(f"  ✓ ZIP: {archive_path}")
        return [archive_path]

    written: list[Path] = []
    for fmt in output_formats:
        invoker.set_command(create_command(fmt, schema, records, config))
        path = invoker.run_active()
        logger.info(f"  ✓ {fmt.name}: {path}")
        written.append(path)

    return written
