import io
import json
import logging

from tle_codec.logging import configure_logging, get_logger, log_context


def _setup_logger(level="INFO"):
    stream = io.StringIO()
    configure_logging(level=level, stream=stream, force=True)
    return get_logger("tests"), stream


def test_json_logging_includes_context_and_extras():
    logger, stream = _setup_logger()
    with log_context(satellite_number=25544, title="ISS (ZARYA)"):
        logger.info("record.parsed", extra={"line_number": 1, "drag_term": 0.0004298})
    payload = json.loads(stream.getvalue())
    assert payload["message"] == "record.parsed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tle_codec.tests"
    assert payload["context"] == {"satellite_number": 25544, "title": "ISS (ZARYA)"}
    assert payload["extra"] == {"line_number": 1, "drag_term": 0.0004298}


def test_context_is_restored_and_skips_none():
    logger, stream = _setup_logger()
    with log_context(title=None, satellite_number=1):
        with log_context(satellite_number=2):
            logger.info("inner")
        logger.info("outer")
    logger.info("after")
    inner, outer, after = (json.loads(line) for line in stream.getvalue().splitlines())
    assert inner["context"] == {"satellite_number": 2}
    assert outer["context"] == {"satellite_number": 1}
    assert "context" not in after


def test_exception_is_rendered():
    logger, stream = _setup_logger()
    try:
        raise ValueError("bad field")
    except ValueError:
        logger.exception("line.failed")
    payload = json.loads(stream.getvalue())
    assert "ValueError: bad field" in payload["exception"]


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("TLE_CODEC_LOG_LEVEL", "debug")
    configure_logging(stream=io.StringIO(), force=True)
    assert get_logger().level == logging.DEBUG
    configure_logging(level="INFO", stream=io.StringIO(), force=True)
    assert get_logger().level == logging.INFO


def test_get_logger_namespaces():
    assert get_logger().name == "tle_codec"
    assert get_logger("tle_codec.record").name == "tle_codec.record"
    assert get_logger("helper").name == "tle_codec.helper"
