# record_export/infrastructure/persistence/__init__.py

"""Persistence of rendered output: atomic file writes and ZIP archives"""

# Local imports
from record_export.infrastructure.persistence._archive_writer import ArchiveWriter
from record_export.infrastructure.persistence._file_writer import write_bytes_atomic

__all__ = ["ArchiveWriter", "write_bytes_atomic"]
