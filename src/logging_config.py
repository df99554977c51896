"""Logging setup: brief console output plus optional detailed session log file"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'


def _prune_session_logs(log_path: Path, keep_files: int) -> None:
    """Delete old session logs so at most keep_files remain after a new one is created"""
    pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(pattern), reverse=True)  # Newest first
    for old_log in existing_logs[max(keep_files - 1, 0):]:
        try:
            Path(old_log).unlink()
        except OSError:
            logging.getLogger(__name__).debug(f"Could not delete old log {old_log}")


def setup_logging(
    log_file: Optional[str] = "logs/docmind.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    keep_files: int = 5,
) -> Optional[Path]:
    """
    Configure root logging.

    - Console: brief logs (INFO by default)
    - File: detailed logs (DEBUG by default), one timestamped file per
      process start, rotated at 10MB, newest keep_files kept

    Args:
        log_file: Base path of the log file; None or "" disables file logging
        console_level: Console logging level
        file_level: File logging level
        keep_files: Number of session log files to retain

    Returns:
        Path of this session's log file, or None without file logging
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    # Keep framework access logs out of the console
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not log_file:
        logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, no log file")
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _prune_session_logs(log_path, keep_files)

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
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
