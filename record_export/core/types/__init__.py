# record_export/core/types/__init__.py

"""Type definitions for the record export tool

This package contains type aliases, protocols and result models used
throughout the codebase. These are pure type definitions with no
implementation logic.
"""

# Local imports
from record_export.core.types.aliases import CellValue
from record_export.core.types.aliases import FieldAccessor
from record_export.core.types.models import RenderedOutput
from record_export.core.types.protocols import ArchiveWriterProtocol
from record_export.core.types.protocols import ExportCommandProtocol
from record_export.core.types.protocols import RendererProtocol

__all__ = [
    # Aliases
    "CellValue",
    "FieldAccessor",
    # Models
    "RenderedOutput",
    # Protocols
    "ArchiveWriterProtocol",
    "ExportCommandProtocol",
    "RendererProtocol",
]
