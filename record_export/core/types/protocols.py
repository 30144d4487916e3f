# record_export/core/types/protocols.py

"""Protocol definitions for the export interfaces using modern Python 3.13 features."""

# Standard library imports
from pathlib import Path
from typing import Protocol
from typing import Sequence

# ============================================================================
# Rendering Protocols
# ============================================================================


class RendererProtocol[R](Protocol):
    """Anything that turns a record sequence into the bytes of one file."""

    @property
    def file_name(self) -> str: ...

    def render(self, records: Sequence[R]) -> bytes: ...


# ============================================================================
# Persistence Protocols
# ============================================================================


class ArchiveWriterProtocol(Protocol):
    """An open archive that accepts named entries one after another."""

    def __contains__(self, entry_name: object) -> bool: ...
    def append(self, entry_name: str, content: bytes) -> None: ...


# ============================================================================
# Command Protocols
# ============================================================================


class ExportCommandProtocol(Protocol):
    """The two persistence operations every export command offers."""

    @property
    def file_name(self) -> str: ...

    def write_standalone(self, directory: Path | str | None = None) -> Path: ...
    def write_into_archive(self, archive_writer: ArchiveWriterProtocol) -> None: ...


__all__ = [
    "ArchiveWriterProtocol",
    "ExportCommandProtocol",
    "RendererProtocol",
]
