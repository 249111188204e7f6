import io
import json
import logging
import sys

import pytest

from marty_mrz import BadCheckDigitError, MRZParser, MRZParserConfig
from marty_mrz.logging_config import (
    MRZJSONFormatter,
    ServiceNameFilter,
    TraceContextFilter,
    mrz_error_details,
    setup_logging,
)
from tests.fixtures.mrz_samples import TD3_BAD_COMPOSITE, TD3_ERIKSSON


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_setup_logging_json(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "json")
    stream = io.StringIO()

    setup_logging(service_name="mrz-test", stream=stream)
    MRZParser(MRZParserConfig(reference_year=2024)).parse(TD3_ERIKSSON)

    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert restore_root_logger.level == logging.DEBUG
    assert any(entry["message"].startswith("Parsing TD3 MRZ") for entry in entries)
    assert all(entry["service"] == "mrz-test" for entry in entries)
    assert all("trace_id" not in entry for entry in entries)


def test_setup_logging_plain_format(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "%(service_name)s|%(levelname)s|%(message)s")
    stream = io.StringIO()

    setup_logging(service_name="mrz-test", stream=stream)
    logging.getLogger("marty_mrz.test").warning("hello")
    logging.getLogger("marty_mrz.test").info("hidden")

    assert stream.getvalue().splitlines() == ["mrz-test|WARNING|hello"]


def test_setup_logging_off(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "OFF")

    assert setup_logging() is None

    assert restore_root_logger.handlers == []
    assert restore_root_logger.level > logging.CRITICAL


def test_unknown_level_falls_back_to_info(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    setup_logging(stream=io.StringIO())

    assert restore_root_logger.level == logging.INFO


def test_filters_and_formatter():
    record = logging.LogRecord("marty_mrz", logging.ERROR, __file__, 1, "failed %s", ("TD3",), None)
    assert ServiceNameFilter("svc").filter(record)
    assert TraceContextFilter().filter(record)
    assert record.trace_id is None

    entry = json.loads(MRZJSONFormatter().format(record))
    assert entry["service"] == "svc"
    assert entry["message"] == "failed TD3"
    assert entry["level"] == "ERROR"


def test_setup_logging_returns_installed_handler(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_FORMAT", "json")

    handler = setup_logging(stream=io.StringIO())

    assert restore_root_logger.handlers == [handler]
    assert isinstance(handler.formatter, MRZJSONFormatter)


def test_parse_failure_logged_with_mrz_error(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")
    stream = io.StringIO()

    setup_logging(service_name="mrz-test", stream=stream)
    with pytest.raises(BadCheckDigitError):
        MRZParser(MRZParserConfig(reference_year=2024)).parse(TD3_BAD_COMPOSITE)

    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    failures = [entry for entry in entries if "mrz_error" in entry]
    assert len(failures) == 1
    assert failures[0]["message"].startswith("Failed to parse TD3 MRZ")
    assert failures[0]["mrz_error"] == {
        "error_code": "BAD_CHECK_DIGIT",
        "field_name": "composite",
        "position": 87,
    }


def test_mrz_error_details_from_exc_info():
    try:
        raise BadCheckDigitError("bad", field_name="date of birth", position=63)
    except BadCheckDigitError:
        record = logging.LogRecord(
            "app", logging.ERROR, __file__, 1, "rejected", (), sys.exc_info()
        )

    assert mrz_error_details(record) == {
        "error_code": "BAD_CHECK_DIGIT",
        "field_name": "date of birth",
        "position": 63,
    }
    entry = json.loads(MRZJSONFormatter().format(record))
    assert entry["mrz_error"]["position"] == 63
    assert "BadCheckDigitError" in entry["exception"]


def test_mrz_error_details_absent_for_other_records():
    record = logging.LogRecord("app", logging.INFO, __file__, 1, "hello", (), None)
    assert mrz_error_details(record) is None
    assert "mrz_error" not in json.loads(MRZJSONFormatter().format(record))
