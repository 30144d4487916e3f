# record_export/application/commands/_factories.py

"""Factory functions pairing a renderer with its records"""

# Standard library imports
from typing import Iterable

# Local imports
from record_export.adapters.renderers import PDFRenderer
from record_export.adapters.renderers import XLSXRenderer
from record_export.application.commands._export_command import ExportCommand
from record_export.core.domain.enums import OutputFormat
from record_export.core.domain.schema import RecordSchema
from record_export.infrastructure.config import ConfigLoader


def create_xlsx_command[R](
    schema: RecordSchema[R], records: Iterable[R], config: ConfigLoader | None = None
) -> ExportCommand[R]:
    """Command exporting records as a spreadsheet table"""
    return ExportCommand(XLSXRenderer(schema, config), records)


def create_pdf_command[R](
    schema: RecordSchema[R], records: Iterable[R], config: ConfigLoader | None = None
) -> ExportCommand[R]:
    """Command exporting records as a bulleted PDF list"""
    return ExportCommand(PDFRenderer(schema, config), records)


def create_command[R](
    output_format: OutputFormat | str,
    schema: RecordSchema[R],
    records: Iterable[R],
    config: ConfigLoader | None = None,
) -> ExportCommand[R]:
    """Command for the given output format

    Args:
        output_format: OutputFormat member or its value ("xlsx", "pdf")
        schema: Ordered field declarations for the record type
        records: Records to export
        config: Optional configuration, default config if None

    Returns:
        ExportCommand bound to the matching renderer

    Raises:
        ValueError: If the format is not supported
    """
    fmt = OutputFormat(output_format.lower() if isinstance(output_format, str) else output_format)

    if fmt is OutputFormat.XLSX:
        return create_xlsx_command(schema, records, config)
    return create_pdf_command(schema, records, config)
