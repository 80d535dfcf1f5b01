"""Tests for structured logging."""

import json
import logging

import pytest

from shamir256.core.logging import (
    HumanFormatter,
    StructuredFormatter,
    StructuredLogger,
    get_logger,
    log_operation,
    mask_sensitive,
    setup_logging,
)


def _record(level=logging.INFO, msg="Secret split", **fields):
    record = logging.LogRecord(
        name="shamir256.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    if fields:
        record.extra_fields = fields
    return record


@pytest.fixture
def package_logger():
    """Restore the package logger after setup_logging reconfigures it."""
    logger = logging.getLogger("shamir256")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestMaskSensitive:

    def test_masks_secret_values(self):
        masked = mask_sensitive({"secret": b"hunter2", "share_value": "abcd"})

        assert masked == {"secret": "[REDACTED]", "share_value": "[REDACTED]"}

    def test_keeps_counts(self):
        masked = mask_sensitive({"shares": 5, "secret_length": 32, "threshold": 3})

        assert masked == {"shares": 5, "secret_length": 32, "threshold": 3}

    def test_nested(self):
        masked = mask_sensitive({"context": {"polynomial": [1, 2, 3]}})

        assert masked == {"context": {"polynomial": "[REDACTED]"}}


class TestFormatters:

    def test_structured_output_is_json(self):
        output = StructuredFormatter().format(_record(shares=5, threshold=3))
        entry = json.loads(output)

        assert entry["message"] == "Secret split"
        assert entry["level"] == "INFO"
        assert entry["shares"] == 5
        assert entry["threshold"] == 3
        assert "source" not in entry

    def test_structured_output_adds_source_for_errors(self):
        entry = json.loads(StructuredFormatter().format(_record(level=logging.ERROR)))

        assert entry["source"]["line"] == 1

    def test_human_output(self):
        output = HumanFormatter().format(_record(shares=5, secret=b"x"))

        assert "[shamir256.test] Secret split" in output
        assert "shares=5" in output
        assert "secret=[REDACTED]" in output


class TestStructuredLogger:

    def test_get_logger_returns_structured_logger(self):
        assert isinstance(get_logger("shamir256.tests.structured"), StructuredLogger)

    def test_setup_logging_json(self, package_logger, capsys):
        setup_logging(json_output=True, level="DEBUG")
        logger = get_logger("shamir256.tests.json")

        logger.info("Secret combined", shares=3)

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["message"] == "Secret combined"
        assert entry["shares"] == 3

    def test_setup_logging_uses_settings(self, package_logger, monkeypatch):
        monkeypatch.setenv("SHAMIR256_LOG_LEVEL", "WARNING")

        logger = setup_logging()

        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, HumanFormatter)


class TestLogOperation:

    def test_returns_result(self):
        @log_operation("double")
        def double(x):
            return x * 2

        assert double(4) == 8
        assert double.__name__ == "double"

    def test_reraises_errors(self):
        @log_operation("explode")
        def explode():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            explode()
