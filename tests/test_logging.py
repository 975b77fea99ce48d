"""Tests for package logger setup."""

import logging

from pydosefit._logging import PACKAGE_LOGGER, get_logger
from pydosefit.session import ParameterStore


class TestGetLogger:

    def test_module_loggers_are_plain_children(self):
        logger = get_logger("pydosefit.session._store")
        assert logger.handlers == []
        assert logger.level == logging.NOTSET
        assert logger.propagate
        assert logger.parent is logging.getLogger(PACKAGE_LOGGER)

    def test_parent_has_single_handler(self):
        get_logger("pydosefit.a")
        get_logger("pydosefit.b")
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1

    def test_root_debug_level_reaches_package_messages(self, caplog):
        """Configuring only the root logger surfaces package DEBUG records once."""
        with caplog.at_level(logging.DEBUG):
            ParameterStore().update("Emax", "h", 2.0)
        records = [r for r in caplog.records if r.name == "pydosefit.session._store"]
        assert len(records) == 1
        assert records[0].getMessage() == "Emax.h = 2.0"
