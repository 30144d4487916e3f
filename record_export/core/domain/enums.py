# record_export/core/domain/enums.py

"""Domain enumerations for the record export tool"""

# Standard library imports
from enum import Enum


class FieldType(Enum):
    """Semantic type of a record field

    Determines how a value is validated before rendering and which cell
    type it becomes in tabular output.
    """

    INTEGER = "integer"
    TEXT = "text"
    CURRENCY = "currency"  # Monetary amount, kept as Decimal where possible
    QUANTITY = "quantity"  # Non-fractional count (stock, units)


class OutputFormat(Enum):
    """Supported output document formats"""

    XLSX = "xlsx"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        """Conventional file extension, without the leading dot"""
        return self.value
