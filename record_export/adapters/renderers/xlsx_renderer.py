# record_export/adapters/renderers/xlsx_renderer.py

"""Tabular XLSX rendering of record sequences"""

# Standard library imports
from io import BytesIO
from logging import getLogger
from typing import Sequence

# Third party imports
from openpyxl import Workbook
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.worksheet.worksheet import Worksheet

# Local imports
from record_export.adapters.renderers.base_renderer import BaseRenderer
from record_export.core.domain.enums import FieldType
from record_export.core.domain.enums import OutputFormat
from record_export.core.domain.errors import RenderError
from record_export.core.domain.schema import RecordSchema
from record_export.infrastructure.config import ConfigLoader
from record_export.shared.mixins import ConfigurableMixin

logger = getLogger(__name__)

# Excel limits sheet titles to 31 characters
MAX_SHEET_TITLE = 31


class XLSXRenderer[R](BaseRenderer[R], ConfigurableMixin):
    """Render records as a single-sheet spreadsheet table

    The sheet holds one header row of schema field names followed by one
    row per record, in input order. Currency fields keep their numeric
    value and get a number format; everything else is written as-is.
    """

    output_format = OutputFormat.XLSX

    def __init__(self, schema: RecordSchema[R], config: ConfigLoader | None = None):
        """Initialize the renderer

        Args:
            schema: Ordered field declarations for the record type
            config: Optional configuration, default config if None
        """
        super().__init__(schema)
        config = self._init_config(config)
        self.currency_format = config.xlsx.currency_format

    @property
    def sheet_title(self) -> str:
        """Worksheet title derived from the record type name"""
        return self.schema.type_name[:MAX_SHEET_TITLE]

    def render(self, records: Sequence[R]) -> bytes:
        """Render records to XLSX bytes

        Raises:
            RenderError: If there are no records, a field value does not match
                its declared type, or a value or the type name cannot be stored
                in a sheet
        """
        if not records:
            raise RenderError(
                f"Cannot render {self.file_name}: a spreadsheet table needs at least one record"
            )

        wb = Workbook()
        ws = wb.active
        try:
            ws.title = self.sheet_title
        except ValueError as e:
            raise RenderError(f"Cannot use '{self.sheet_title}' as a sheet title: {e}") from e

        self._append_row(ws, self.schema.field_names, "header")
        for index, record in enumerate(records, 1):
            self._append_row(ws, self.schema.values(record), f"record {index}")

        self._apply_number_formats(ws)

        buffer = BytesIO()
        wb.save(buffer)
        content = buffer.getvalue()

        logger.debug(f"Rendered {len(records)} rows into {self.file_name} ({len(content):,} bytes)")
        return content

    @staticmethod
    def _append_row(ws: Worksheet, values: list, label: str) -> None:
        """Append one row, turning openpyxl value errors into RenderError"""
        try:
            ws.append(values)
        except (IllegalCharacterError, ValueError) as e:
            raise RenderError(f"Cannot write {label} to the sheet: {e}") from e

    def _apply_number_formats(self, ws: Worksheet) -> None:
        """Give currency columns the configured number format"""
        for col_num, spec in enumerate(self.schema.fields, 1):
            if spec.field_type is not FieldType.CURRENCY:
                continue
            for (cell,) in ws.iter_rows(min_row=2, min_col=col_num, max_col=col_num):
                cell.number_format = self.currency_format
