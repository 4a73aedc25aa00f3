"""Notification tasks for the screening flows.

Each task writes one line to the module logger and echoes it to the console
so CLI runs show progress without a Prefect UI. Context dicts (row counts,
bucket sizes, paths) are appended as ``| Context: {...}``.
"""

import logging
from typing import Optional

from prefect import task

logger = logging.getLogger(__name__)

# level name -> (logging level, console marker)
_LEVELS = {
    "INFO": (logging.INFO, "✓"),
    "WARNING": (logging.WARNING, "⚠️ "),
    "ERROR": (logging.ERROR, "❌"),
}


def _notify(level: str, message: str, context: Optional[dict]) -> str:
    log_level, marker = _LEVELS[level]
    log_msg = f"{level}: {message}"
    if context:
        log_msg += f" | Context: {context}"
    logger.log(log_level, log_msg)
    print(f"{marker} {log_msg}")
    return log_msg


@task(name="log_info")
def log_info(message: str, context: Optional[dict] = None):
    """Report a pipeline step (reads, row counts, output path)."""
    _notify("INFO", message, context)


@task(name="log_warning")
def log_warning(message: str, context: Optional[dict] = None):
    """Report a recoverable condition, e.g. a bucket with no assignees.

    Args:
        message: Warning message
        context: Optional context dictionary
    """
    _notify("WARNING", message, context)


@task(name="log_error")
def log_error(message: str, context: Optional[dict] = None):
    """Report a terminal screening failure and fail the flow.

    Args:
        message: Error message (usually the ScreeningError text)
        context: Optional context dictionary, e.g. the error type

    Raises:
        RuntimeError: Always, carrying the formatted message
    """
    raise RuntimeError(_notify("ERROR", message, context))
