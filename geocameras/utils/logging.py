"""Package logger and one-shot warnings for geocameras"""

__all__ = ['LOGGER', 'reset_warnings', 'set_log_level', 'warn_once']

import logging
from typing import Union

LOGGER = logging.getLogger('geocameras')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def set_log_level(level: Union[int, str]):
    """
    Sets the level of the geocameras logger, e.g. to surface the debug trace
    emitted when a quaternion cannot be produced for a camera.

    Args:
        level:
            A logging level, either as an int (logging.DEBUG) or a name ('DEBUG')
    """
    LOGGER.setLevel(level.upper() if isinstance(level, str) else level)


def warn_once(warning: str):
    """Logs a warning, unless the identical message has already been logged"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def reset_warnings():
    """Forgets which one-shot warnings have been emitted"""
    _WARNINGS.clear()
