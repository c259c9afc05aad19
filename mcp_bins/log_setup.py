import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _has_stderr_handler(root_logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.StreamHandler) and getattr(handler, 'stream', None) is sys.stderr
        for handler in root_logger.handlers
    )


def _has_file_handler(root_logger: logging.Logger, log_file: str) -> bool:
    path = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == path
        for handler in root_logger.handlers
    )


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Sends log records to stderr (stdout carries the MCP protocol) and,
    optionally, to a log file. Safe to call more than once.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not _has_stderr_handler(root_logger):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    if log_file and not _has_file_handler(root_logger, log_file):
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
