from __future__ import annotations

import logging

from interval_map import IntervalMap
from interval_map.utils import config, logger


def test_logger_is_package_scoped() -> None:
    assert logger.name == "interval_map"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_config_defaults() -> None:
    assert config.debug is False
    assert config.check_invariants is False


def test_debug_logging_reports_assign(debug_logging, caplog) -> None:
    imap = IntervalMap(0)
    with caplog.at_level(logging.DEBUG, logger="interval_map"):
        imap.assign(1, 3, 1)
        imap.assign(4, 4, 1)

    messages = [record.getMessage() for record in caplog.records]
    assert "assign [1, 3) -> 1: removed 0, inserted 2, now 2 breakpoints." in messages
    assert "Ignoring empty interval [4, 4)." in messages


def test_no_logging_when_debug_disabled(caplog) -> None:
    imap = IntervalMap(0)
    with caplog.at_level(logging.DEBUG, logger="interval_map"):
        imap.assign(1, 3, 1)
    assert caplog.records == []
