import logging
import re

from geocameras.utils.logging import LOGGER, reset_warnings, set_log_level, warn_once


def test_warn_once(caplog):
    reset_warnings()
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1

    reset_warnings()
    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 2


def test_set_log_level():
    original = LOGGER.level
    try:
        set_log_level('debug')
        assert LOGGER.level == logging.DEBUG

        set_log_level(logging.ERROR)
        assert LOGGER.level == logging.ERROR
    finally:
        LOGGER.setLevel(original)
