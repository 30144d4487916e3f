# record_export/__init__.py

"""Record Export Tool Package

A library for exporting in-memory records to spreadsheet and PDF files,
either as standalone files or bundled into one ZIP archive.
"""

# Local imports
# High-level API
from record_export.adapters.api import export_records

# Renderers and commands
from record_export.adapters.renderers import PDFRenderer
from record_export.adapters.renderers import XLSXRenderer
from record_export.application.commands import ExportCommand
from record_export.application.commands import create_command
from record_export.application.commands import create_pdf_command
from record_export.application.commands import create_xlsx_command
from record_export.application.services import ExportInvoker

# Data models
from record_export.core.domain import PRODUCT_SCHEMA
from record_export.core.domain import FieldSpec
from record_export.core.domain import FieldType
from record_export.core.domain import OutputFormat
from record_export.core.domain import Product
from record_export.core.domain import RecordSchema
from record_export.core.domain import generate_sample_products

# Errors
from record_export.core.domain import ArchiveError
from record_export.core.domain import ExportError
from record_export.core.domain import PreconditionError
from record_export.core.domain import RenderError

# For users who want lower-level control
from record_export.infrastructure import ArchiveWriter
from record_export.infrastructure.config import ConfigLoader

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "export_records",
    "ExportInvoker",
    "ExportCommand",
    "create_command",
    "create_xlsx_command",
    "create_pdf_command",
    # Renderers
    "XLSXRenderer",
    "PDFRenderer",
    # Data models
    "Product",
    "PRODUCT_SCHEMA",
    "FieldSpec",
    "FieldType",
    "OutputFormat",
    "RecordSchema",
    "generate_sample_products",
    # Errors
    "ExportError",
    "RenderError",
    "ArchiveError",
    "PreconditionError",
    # Advanced usage - infrastructure
    "ArchiveWriter",
    "ConfigLoader",
    # Version
    "__version__",
]
