"""Logging utility for geogrid"""

__all__ = ['LOGGER', 'set_log_level', 'warn_once']

import logging
from typing import Union

LOGGER = logging.getLogger('geogrid')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def set_log_level(level: Union[int, str]):
    """
    Sets the verbosity of the geogrid logger.

    Args:
        level:
            A logging level, either as the int constant (logging.DEBUG) or
            its name ('DEBUG')
    """
    if isinstance(level, str):
        level = level.upper()

    LOGGER.setLevel(level)


def warn_once(warning: str):
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
