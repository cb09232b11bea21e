"""Logging configuration for SuffixPy using loguru."""

from pathlib import Path
import sys

from loguru import logger

_DEBUG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(verbose: bool = False, debug: bool = False, log_file: str | None = None) -> None:
    """Route log records to stderr and, when log_file is given, to that file too.

    WARNING and above are shown by default, INFO with verbose and DEBUG with
    debug. Debug output carries a timestamp and call site on both sinks.
    """
    logger.remove()

    level = "DEBUG" if debug else "INFO" if verbose else "WARNING"
    message_format = _DEBUG_FORMAT if debug else "{message}"

    logger.add(sys.stderr, format=f"<level>{message_format}</level>", level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, format=message_format, level=level, encoding="utf-8")
