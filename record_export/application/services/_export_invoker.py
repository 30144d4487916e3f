# record_export/application/services/_export_invoker.py

"""Invoker running export commands one at a time or as one archived batch.

Single-shot runs go through the active command. Batch runs write every
registered command into one archive that reaches the disk only if all of
them succeed.
"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Local imports
from record_export.core.domain.errors import ArchiveError
from record_export.core.domain.errors import PreconditionError
from record_export.core.types.protocols import ExportCommandProtocol
from record_export.infrastructure.config import ConfigLoader
from record_export.infrastructure.config import check_archive_name
from record_export.infrastructure.persistence import ArchiveWriter
from record_export.infrastructure.persistence import write_bytes_atomic
from record_export.shared.mixins import ConfigurableMixin

logger = getLogger(__name__)


class ExportInvoker(ConfigurableMixin):
    """Holds an active command and an ordered registry of commands

    Registration order is archive order. Commands are never removed or
    deduplicated.
    """

    def __init__(
        self,
        output_dir: Path | str | None = None,
        archive_name: str | None = None,
        config: ConfigLoader | None = None,
    ) -> None:
        """Initialize the invoker

        Args:
            output_dir: Directory for standalone files and the archive,
                configured output directory if None
            archive_name: File name of the combined archive, configured name if None
            config: Configuration loader, uses default if None

        Raises:
            ValueError: If archive_name is not a plain .zip file name
        """
        config = self._init_config(config)
        self.output_dir = Path(output_dir if output_dir is not None else config.output.directory)
        self.archive_name = (
            check_archive_name(archive_name)
            if archive_name is not None
            else config.output.archive_name
        )
        self.compression = config.compression_method
        self._active: ExportCommandProtocol | None = None
        self._commands: list[ExportCommandProtocol] = []

    @property
    def active_command(self) -> ExportCommandProtocol | None:
        """Command used by ``run_active``, None until one is set"""
        return self._active

    @property
    def commands(self) -> tuple[ExportCommandProtocol, ...]:
        """Registered commands in registration order"""
        return tuple(self._commands)

    @property
    def archive_path(self) -> Path:
        """Where ``run_all_into_one_archive`` writes the archive"""
        return self.output_dir / self.archive_name

    def set_command(self, command: ExportCommandProtocol) -> None:
        """Make a command the active one, replacing any previous choice"""
        self._active = command

    def register(self, command: ExportCommandProtocol) -> None:
        """Append a command to the batch registry"""
        self._commands.append(command)
        logger.debug(f"Registered {command.file_name} (#{len(self._commands)})")

    def run_active(self) -> Path:
        """Write the active command's output as a standalone file

        Returns:
            Path of the written file

        Raises:
            PreconditionError: If no command has been set
        """
        if self._active is None:
            raise PreconditionError("No command set: call set_command() before run_active()")

        return self._active.write_standalone(self.output_dir)

    def run_all_into_one_archive(self) -> Path:
        """Write every registered command into one archive on disk

        An empty registry yields a valid archive with no entries. The first
        failure aborts the batch: the archive is closed and discarded, no
        file is written, and the error propagates.

        Returns:
            Path of the written archive

        Raises:
            ArchiveError: If two registered commands share a file name, or an
                entry cannot be written
        """
        self._check_unique_names()

        archive_path = self.archive_path
        logger.info(f"Exporting {len(self._commands)} file(s) into {archive_path}")

        try:
            with ArchiveWriter(compression=self.compression) as archive:
                for command in self._commands:
                    command.write_into_archive(archive)
        except Exception as e:
            logger.error(f"Batch export aborted, {archive_path} was not written: {e}")
            raise

        content = archive.getvalue()
        write_bytes_atomic(archive_path, content)
        logger.info(f"Wrote {archive_path} with {len(archive)} entries ({len(content):,} bytes)")
        return archive_path

    def _check_unique_names(self) -> None:
        """Reject a batch whose commands would collide inside the archive"""
        names = [command.file_name for command in self._commands]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ArchiveError(
                f"Registered commands produce duplicate archive entries: {', '.join(duplicates)}"
            )
