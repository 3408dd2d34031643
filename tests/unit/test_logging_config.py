"""Tests for logging setup."""

import json
import logging

from profile_ocr.logging_config import JSONFormatter, SensitiveDataFilter, setup_logging


def _record(msg, args=(), **extra):
    record = logging.LogRecord("test", logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    output = json.loads(JSONFormatter().format(_record("Profile extracted", file_name="a.png")))

    assert output["message"] == "Profile extracted"
    assert output["level"] == "INFO"
    assert output["file_name"] == "a.png"


def test_sensitive_data_filter_redacts_keys():
    redactor = SensitiveDataFilter(["my-secret-value"])
    record = _record("key sk-abcdefghijklmnop and %s", ("my-secret-value",))

    redactor.filter(record)

    message = record.getMessage()
    assert "sk-abcdefghijklmnop" not in message
    assert "my-secret-value" not in message
    assert "****REDACTED****" in message


def test_setup_logging_writes_to_log_dir(tmp_path, monkeypatch):
    from profile_ocr import logging_config

    monkeypatch.setattr(logging_config.settings, "log_dir", str(tmp_path))
    logger = setup_logging("unit_test_logger")
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()

    assert (tmp_path / "unit_test_logger.log").exists()
    assert len(logger.handlers) == 2
