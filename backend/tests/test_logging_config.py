"""Logging setup: correlation ids reach every record."""

import logging

from officeops.config.logging_config import (
    NO_CORRELATION_ID,
    CorrelationIdFilter,
    SafeFormatter,
    correlation_id_var,
)


def make_record(message="hello"):
    return logging.LogRecord("officeops.test", logging.INFO, __file__, 1, message, None, None)


def test_filter_stamps_current_correlation_id():
    token = correlation_id_var.set("req-7")
    try:
        record = make_record()
        assert CorrelationIdFilter().filter(record)
    finally:
        correlation_id_var.reset(token)

    assert record.correlation_id == "req-7"


def test_filter_defaults_outside_a_request():
    record = make_record()
    CorrelationIdFilter().filter(record)

    assert record.correlation_id == NO_CORRELATION_ID


def test_safe_formatter_tolerates_missing_correlation_id():
    formatter = SafeFormatter("[%(correlation_id)s] %(message)s")

    assert formatter.format(make_record()) == f"[{NO_CORRELATION_ID}] hello"
