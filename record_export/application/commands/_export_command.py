# record_export/application/commands/_export_command.py

"""Export command binding one renderer to its two persistence operations"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import Iterable

# Local imports
from record_export.core.domain.errors import ArchiveError
from record_export.core.types.protocols import ArchiveWriterProtocol
from record_export.core.types.protocols import RendererProtocol
from record_export.infrastructure.persistence import write_bytes_atomic

logger = getLogger(__name__)


class ExportCommand[R]:
    """Render a fixed record sequence and persist it alone or into an archive

    The command holds one renderer and the records it renders for its whole
    lifetime. Which format sits behind it is invisible to callers: both
    operations render afresh and then persist the bytes under the
    renderer's file name.
    """

    __slots__ = ("renderer", "records")

    def __init__(self, renderer: RendererProtocol[R], records: Iterable[R]):
        """Initialize the command

        Args:
            renderer: Renderer producing the file bytes
            records: Records to render, captured as a tuple
        """
        self.renderer = renderer
        self.records: tuple[R, ...] = tuple(records)

    @property
    def file_name(self) -> str:
        """Name of the file (or archive entry) this command produces"""
        return self.renderer.file_name

    def write_standalone(self, directory: Path | str | None = None) -> Path:
        """Render and write the result to ``<directory>/<file_name>``

        Any existing file of that name is replaced. A failed write leaves
        the previous file (or no file) in place.

        Args:
            directory: Target directory, current working directory if None

        Returns:
            Path of the written file

        Raises:
            RenderError: If the renderer rejects the records
            OSError: If the file cannot be written
        """
        target_dir = Path(directory) if directory is not None else Path.cwd()
        content = self.renderer.render(self.records)
        path = write_bytes_atomic(target_dir / self.file_name, content)
        logger.info(f"Wrote {path} ({len(content):,} bytes)")
        return path

    def write_into_archive(self, archive_writer: ArchiveWriterProtocol) -> None:
        """Render and append the result as one entry of an open archive

        Opening and closing the archive is the caller's job, so several
        commands can append to the same archive in turn.

        Args:
            archive_writer: Archive currently being built

        Raises:
            ArchiveError: If the archive already holds an entry of this name
            RenderError: If the renderer rejects the records
        """
        if self.file_name in archive_writer:
            raise ArchiveError(f"Archive already contains an entry named '{self.file_name}'")

        content = self.renderer.render(self.records)
        archive_writer.append(self.file_name, content)
        logger.info(f"Added {self.file_name} to archive ({len(content):,} bytes)")

    def __repr__(self) -> str:
        return f"ExportCommand({self.renderer!r}, records={len(self.records)})"
