# record_export/infrastructure/__init__.py

"""System infrastructure components for configuration, logging and persistence.

This module provides the services export commands rely on: configuration
loading, log setup, atomic file writes and in-memory archives.
"""

# Local imports
from record_export.infrastructure.config import ConfigLoader
from record_export.infrastructure.persistence import ArchiveWriter
from record_export.infrastructure.persistence import write_bytes_atomic

__all__ = ["ArchiveWriter", "ConfigLoader", "write_bytes_atomic"]
