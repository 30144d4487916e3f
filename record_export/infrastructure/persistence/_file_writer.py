# record_export/infrastructure/persistence/_file_writer.py

"""Atomic file writes for export output"""

# Standard library imports
from contextlib import suppress
from logging import getLogger
from os import chmod
from os import fdopen
from os import fsync
from os import replace
from os import umask
from os import unlink
from pathlib import Path
from tempfile import mkstemp

logger = getLogger(__name__)


def _new_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask"""
    # umask can only be read by setting it
    mask = umask(0)
    umask(mask)
    return 0o666 & ~mask


def _missing_dirs(directory: Path) -> list[Path]:
    """Ancestors of directory (itself included) that do not exist yet, deepest first"""
    missing = []
    while not directory.exists() and directory != directory.parent:
        missing.append(directory)
        directory = directory.parent
    return missing


def write_bytes_atomic(path: Path | str, data: bytes) -> Path:
    """Write bytes to a file, replacing any existing file in one step

    The content goes to a temporary file next to the target first and is
    moved into place only once fully written, so a failed write leaves the
    target untouched and no partial file behind. Directories created for
    the target are removed again when the write fails.

    Args:
        path: Destination file path
        data: Bytes to write

    Returns:
        The destination path

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
    """
    target = Path(path)
    created = _missing_dirs(target.parent)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    except BaseException:
        _remove_dirs(created)
        raise

    try:
        with fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            fsync(handle.fileno())
        # mkstemp creates files as 0600
        chmod(temp_path, _new_file_mode())
        replace(temp_path, target)
    except BaseException:
        with suppress(FileNotFoundError):
            unlink(temp_path)
        _remove_dirs(created)
        raise

    logger.debug(f"Wrote {len(data):,} bytes to {target}")
    return target


def _remove_dirs(directories: list[Path]) -> None:
    """Remove directories deepest first, keeping any that are no longer empty"""
    for directory in directories:
        try:
            directory.rmdir()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning(f"Could not remove directory {directory} after failed write: {e}")
            return
