# record_export/infrastructure/persistence/_archive_writer.py

"""In-memory ZIP archive shared by the commands of one batch export"""

# Standard library imports
from io import BytesIO
from logging import getLogger
from types import TracebackType
from typing import Self
from zipfile import BadZipFile
from zipfile import LargeZipFile
from zipfile import ZIP_DEFLATED
from zipfile import ZipFile

# Local imports
from record_export.core.domain.errors import ArchiveError

logger = getLogger(__name__)


class ArchiveWriter:
    """Single-writer archive built in memory

    Entries are appended one at a time and their names must be unique.
    Nothing touches the disk: once closed, ``getvalue()`` hands the finished
    archive to the caller, who decides whether to persist it. Used as a
    context manager the archive is closed on every exit path.
    """

    __slots__ = ("compression", "_buffer", "_zip", "_entries", "_closed")

    def __init__(self, compression: int = ZIP_DEFLATED):
        """Open an empty archive for writing

        Args:
            compression: zipfile compression constant applied to every entry
        """
        self.compression = compression
        self._buffer = BytesIO()
        self._zip = ZipFile(self._buffer, mode="w", compression=compression)
        self._entries: list[str] = []
        self._closed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __contains__(self, entry_name: object) -> bool:
        return entry_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entry_names(self) -> tuple[str, ...]:
        """Entry names in the order they were appended"""
        return tuple(self._entries)

    @property
    def closed(self) -> bool:
        return self._closed

    def append(self, entry_name: str, content: bytes) -> None:
        """Add one entry to the archive

        Args:
            entry_name: Name of the entry inside the archive
            content: Entry bytes, stored exactly as given

        Raises:
            ArchiveError: If the archive is closed, the name is already taken,
                or the entry cannot be written
        """
        if self._closed:
            raise ArchiveError(f"Cannot add '{entry_name}': archive is already closed")
        if entry_name in self._entries:
            raise ArchiveError(f"Archive already contains an entry named '{entry_name}'")

        try:
            self._zip.writestr(entry_name, content)
        except (BadZipFile, LargeZipFile, ValueError) as e:
            raise ArchiveError(f"Failed to write archive entry '{entry_name}': {e}") from e

        self._entries.append(entry_name)
        logger.debug(f"Added {entry_name} ({len(content):,} bytes) to archive")

    def close(self) -> None:
        """Finish the archive; safe to call more than once"""
        if self._closed:
            return
        self._closed = True
        self._zip.close()

    def getvalue(self) -> bytes:
        """Bytes of the finished archive

        Raises:
            ArchiveError: If the archive has not been closed yet
        """
        if not self._closed:
            raise ArchiveError("Archive must be closed before its content can be read")
        return self._buffer.getvalue()
