"""Logging configuration for accname.

The library itself only emits records; hosts that want them on screen or
on disk call ``setup_logging`` once at startup.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from accname.config import load_config

_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def setup_logging(level: Optional[str] = None, log_dir: Optional[Path] = None):
    """Send accname records to stderr and, optionally, a log file.

    Args:
        level: Minimum level; ACCNAME_LOG_LEVEL when omitted
        log_dir: Directory for ``accname.log``; ACCNAME_LOG_DIR when
            omitted, stderr only if neither is set
    """
    if level is None or log_dir is None:
        config = load_config()
        level = level or config.log_level
        log_dir = log_dir or config.log_dir

    logger.remove()
    logger.add(sys.stderr, format=_FORMAT, level=level)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(log_dir / "accname.log", format=_FORMAT, level=level, rotation="10 MB")

    logger.debug(f"[Logging] Configured at {level}, log_dir={log_dir}")
