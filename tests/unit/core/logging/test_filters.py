"""
Tests for level filtering.
"""

import logging

import pytest

from http_logger.core.logging.config import LogLevel
from http_logger.core.logging.entry import create_entry
from http_logger.core.logging.filters import LevelFilter, should_log

LEVELS = ["debug", "info", "warn", "error"]


class TestShouldLog:
    """Tests for should_log."""

    @pytest.mark.parametrize("threshold_index,threshold", list(enumerate(LEVELS)))
    def test_threshold_matrix(self, threshold_index, threshold):
        for index, level in enumerate(LEVELS):
            assert should_log(level, threshold) is (index >= threshold_index)

    def test_unknown_threshold_is_info(self):
        assert should_log("debug", "chatty") is False
        assert should_log("info", "chatty") is True


class TestLevelFilter:
    """Tests for LevelFilter."""

    def test_default_threshold(self):
        assert LevelFilter().threshold == LogLevel.INFO

    def test_allows(self):
        level_filter = LevelFilter("warn")

        assert level_filter.allows("error") is True
        assert level_filter.allows("warn") is True
        assert level_filter.allows("info") is False

    def test_is_logging_filter(self):
        assert isinstance(LevelFilter(), logging.Filter)

    def test_filters_record_by_entry_level(self):
        level_filter = LevelFilter("warn")
        record = logging.LogRecord("test", logging.ERROR, "", 0, "msg", (), None)
        record.entry = create_entry("info", "downgraded")

        assert level_filter.filter(record) is False

    def test_filters_plain_record_by_levelno(self):
        level_filter = LevelFilter("warn")
        warning = logging.LogRecord("test", logging.WARNING, "", 0, "msg", (), None)
        info = logging.LogRecord("test", logging.INFO, "", 0, "msg", (), None)

        assert level_filter.filter(warning) is True
        assert level_filter.filter(info) is False
