"""Logging utility for ellipsoids"""

__all__ = ['LOGGER', 'reset_warnings', 'set_log_level', 'warn_once']

import logging
from typing import Union

LOGGER = logging.getLogger('ellipsoids')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

# Messages already emitted by warn_once; shared by every caller in the process
_WARNINGS = set()


def set_log_level(level: Union[int, str]):
    """
    Sets the level of the ellipsoids logger, e.g. 'DEBUG' to report points that could
    not be projected onto the ellipsoid surface.

    Args:
        level:
            A logging level name or number
    """
    LOGGER.setLevel(level.upper() if isinstance(level, str) else level)


def warn_once(warning: str):
    """Logs a warning only the first time a given message is seen"""
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)


def reset_warnings():
    """Forgets previously emitted warnings, so that warn_once will log them again"""
    _WARNINGS.clear()
