"""
Utility functions shared across tools: size formatting, external command lookup.
"""

import shutil
import logging

logger = logging.getLogger(__name__)

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]


def format_size(size: int) -> str:
    """
    Format a byte count with a 1024 base, e.g. 512 -> "512 B", 1536 -> "1.5 KB".
    Bytes are shown as an integer, larger units with one decimal.
    """
    value = float(size)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_index += 1

    if unit_index == 0:
        return f"{int(value)} {SIZE_UNITS[0]}"
    return f"{value:.1f} {SIZE_UNITS[unit_index]}"


def command_exists(command: str) -> bool:
    """Return True if an executable named `command` is on PATH."""
    found = shutil.which(command)
    logger.debug("Lookup %s -> %s", command, found)
    return found is not None
