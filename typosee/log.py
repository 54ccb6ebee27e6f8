"""
Logging setup for the typosee command-line tool.

Log records go to stderr so stdout carries nothing but CSV.  Library
modules only create child loggers of "typosee"; configuring handlers is
left to the entry point.
"""

import logging
import sys
from typing import Any, Dict, Optional

logger = logging.getLogger("typosee")


def configure_logging(level: str = "WARNING", fmt: Optional[str] = None) -> None:
    """
    Configure the root logger once for a CLI run.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...)
        fmt: Record format; defaults to the timestamped layout
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def log_skipped_pair(keyword: str, line: str, error: Exception) -> None:
    """
    Log a keyword/line pair dropped from a scan.

    Args:
        keyword: Normalized keyword
        line: Raw candidate line
        error: Exception raised while comparing the pair
    """
    logger.warning(
        f"Skipping {keyword!r} against {line.strip()!r}: {error}",
        extra={
            "event": "pair_skipped",
            "keyword": keyword,
            "error_type": type(error).__name__,
        }
    )


def log_error(message: str, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log an error with context information.

    Args:
        message: Error description
        error: Exception object
        context: Additional context data
    """
    extra_data = {"event": "error", "error_type": type(error).__name__}
    if context:
        extra_data.update(context)

    logger.error(
        f"{message}: {str(error)}",
        extra=extra_data
    )
