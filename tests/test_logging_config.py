import logging

import pytest

from frappuccino.core.logging_config import (
    TRACE_LEVEL,
    LogLevelFilter,
    log_db_timing,
    parse_allowed_levels,
    resolve_level,
)


def test_parse_allowed_levels():
    assert parse_allowed_levels("info, error") == {logging.INFO, logging.ERROR}
    assert parse_allowed_levels("TRACE") == {TRACE_LEVEL}
    everything = {TRACE_LEVEL, logging.INFO, logging.WARNING, logging.ERROR}
    assert parse_allowed_levels("") == everything
    assert parse_allowed_levels("verbose") == everything


def test_resolve_level():
    assert resolve_level("trace") == TRACE_LEVEL
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level(None) == logging.INFO
    assert resolve_level("nonsense") == logging.INFO


def test_level_filter():
    level_filter = LogLevelFilter({logging.ERROR})
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert level_filter.filter(record) is False
    record.levelno = logging.ERROR
    assert level_filter.filter(record) is True


class _Repo:
    @log_db_timing
    def fetch(self, key, flag=False):
        return key

    @log_db_timing
    def explode(self, key):
        raise ValueError("boom")


def test_log_db_timing_logs_success(caplog):
    caplog.set_level(logging.INFO)
    assert _Repo().fetch(7, flag=True) == 7
    messages = [r.getMessage() for r in caplog.records]
    assert any("_Repo.fetch" in m and "args=(7, flag=True)" in m for m in messages)


def test_log_db_timing_logs_and_reraises_errors(caplog):
    caplog.set_level(logging.INFO)
    with pytest.raises(ValueError):
        _Repo().explode(3)
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and "error=boom" in errors[0].getMessage()
