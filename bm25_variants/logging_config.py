"""Logging setup for applications embedding the scorers (the library itself never calls this)"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .settings import ScorerSettings

LOGGER_NAME = "bm25_variants"
KEEP_SESSION_LOGS = 5


def _cleanup_session_logs(log_path: Path, keep: int = KEEP_SESSION_LOGS) -> None:
    """Delete all but the newest `keep - 1` session logs (room for the new one)"""
    pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(pattern), reverse=True)  # Newest first
    for old_log in existing_logs[keep - 1:]:
        try:
            Path(old_log).unlink()
        except OSError:
            pass  # Another process may hold or have removed it


def setup_logging(
    log_file: Optional[str] = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    logger_name: str = LOGGER_NAME,
    settings: Optional[ScorerSettings] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    - Console: brief lines at console_level (INFO by default)
    - File (only when log_file is given): detailed lines at file_level,
      one timestamped file per session, rotated at 10MB, last 5 sessions kept

    Per-term IDF lines are DEBUG, so they only reach the file by default.

    Args:
        log_file: Base path of the log file, e.g. "logs/bm25.log"
        console_level: Console logging level
        file_level: File logging level
        logger_name: Logger to configure (default: the package logger)
        settings: Loaded settings; LOG_LEVEL then sets the console level

    Returns:
        The configured logger
    """
    if settings is not None:
        console_level = settings.console_level

    target = logging.getLogger(logger_name)
    target.setLevel(min(console_level, file_level) if log_file else console_level)

    # Remove existing handlers to avoid duplicates
    target.handlers.clear()
    target.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    target.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _cleanup_session_logs(log_path)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

        file_handler = RotatingFileHandler(
            session_log,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=10,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        target.addHandler(file_handler)
        target.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    else:
        target.debug(f"Logging configured: console={logging.getLevelName(console_level)}")

    return target
