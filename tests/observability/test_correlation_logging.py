"""Tests for correlation id context and log record injection."""

import logging

from vaccine_registry.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from vaccine_registry.observability.logger import CorrelationIdFilter


class TestCorrelationContext:
    """Tests for set/get/clear of the correlation id."""

    def test_set_returns_supplied_id(self) -> None:
        assert set_correlation_id("abc") == "abc"
        assert get_correlation_id() == "abc"
        clear_correlation_id()

    def test_set_generates_id_when_absent(self) -> None:
        generated = set_correlation_id()

        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_clear_resets_to_empty(self) -> None:
        set_correlation_id("abc")

        clear_correlation_id()

        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    """Tests for CorrelationIdFilter."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    def test_filter_attaches_current_id(self) -> None:
        set_correlation_id("req-1")
        record = self._record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-1"
        clear_correlation_id()

    def test_filter_uses_placeholder_outside_requests(self) -> None:
        clear_correlation_id()
        record = self._record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"
