# record_export/infrastructure/logging/_setup.py

"""Root logger setup for CLI runs and the end-of-run summary"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import Handler
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from pathlib import Path

LOG_DIR = Path("logs")
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
RULE = "=" * 80


def get_default_log_path() -> str:
    """Timestamped log file under ./logs, creating the directory if needed"""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return str(LOG_DIR / f"record_export_{datetime.now():%Y%m%d_%H%M%S}.log")


def _with_format(handler: Handler, level: int, fmt: str) -> Handler:
    handler.setLevel(level)
    handler.setFormatter(Formatter(fmt))
    return handler


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Replace the root logger's handlers for one CLI run

    The console shows messages at ``log_level`` and above; the log file,
    unless disabled, receives everything down to DEBUG with logger names.

    Args:
        log_file: Log file path, a timestamped file under ./logs if None
        log_level: Console level name, case-insensitive; unknown names mean INFO
        silent: Suppress console output entirely
        disable_file_logging: Do not write a log file

    Returns:
        The log file path, or None when file logging is disabled
    """
    console_level = getLevelNamesMapping().get(log_level.upper(), INFO)

    handlers: list[Handler] = []
    if not silent:
        handlers.append(_with_format(StreamHandler(), console_level, CONSOLE_FORMAT))
    if not disable_file_logging:
        log_file = log_file or get_default_log_path()
        handlers.append(_with_format(FileHandler(log_file), DEBUG, FILE_FORMAT))

    root_logger = getLogger()
    root_logger.handlers = handlers
    # Debug records must reach the root logger for the file handler to see them
    root_logger.setLevel(console_level if disable_file_logging else DEBUG)

    if disable_file_logging:
        return None

    getLogger(__name__).info(f"Logging to file: {log_file}")
    return log_file


def log_run_summary(
    log_file: str | None,
    start_time: float,
    end_time: float,
    record_count: int,
    written_files: list[Path],
    archived: bool,
) -> None:
    """Log the closing block of a CLI run

    Args:
        log_file: Path to log file (if any)
        start_time: Export start time
        end_time: Export end time
        record_count: Number of records exported
        written_files: Files written to disk (the archive alone in archive mode)
        archived: Whether outputs were bundled into one archive
    """
    minutes, seconds = divmod(end_time - start_time, 60)

    lines = [
        "",
        RULE,
        "EXPORT COMPLETE",
        RULE,
        f"Records exported: {record_count:,}",
        f"Export time: {int(minutes)}m {seconds:.1f}s",
        f"Mode: {'single archive' if archived else 'standalone files'}",
        "",
        "Output:",
    ]
    lines += [f"  {path}" for path in written_files]
    if log_file:
        lines.append(f"  Log: {log_file}")
    lines.append(RULE)

    getLogger(__name__).info("\n".join(lines))
