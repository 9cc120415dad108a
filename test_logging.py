"""
Test Structured Logging
=======================

JSON rendering of StructuredLogger records.
"""

import json
import logging

from shapekit_calculator import InvalidShapeError
from shapekit_calculator.logging import JSONFormatter, LogEvent, StructuredLogger


def render_last(caplog, name):
    record = [r for r in caplog.records if r.name == name][-1]
    return json.loads(JSONFormatter().format(record))


def test_info_record_renders_as_json(caplog):
    logger = StructuredLogger("test-json")
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded shape file",
        metadata={'shape_count': 3}
    )

    entry = render_last(caplog, "shapekit.test-json")
    assert entry['level'] == "INFO"
    assert entry['component'] == "test-json"
    assert entry['event'] == "config.loaded"
    assert entry['message'] == "Loaded shape file"
    assert entry['metadata'] == {'shape_count': 3}
    assert 'exception' not in entry
    assert entry['timestamp'].endswith("+00:00")


def test_error_embeds_exception(caplog):
    logger = StructuredLogger("test-json-error")
    error = InvalidShapeError(1, object())
    logger.error(
        event=LogEvent.INVALID_SHAPE_ERROR,
        message="Calculation aborted",
        exc_info=error,
        metadata={'index': 1}
    )

    entry = render_last(caplog, "shapekit.test-json-error")
    assert entry['level'] == "ERROR"
    assert entry['exception']['type'] == "InvalidShapeError"
    assert "index 1" in entry['exception']['message']


def test_level_filters_events(caplog):
    logger = StructuredLogger("test-json-level", level=logging.WARNING)
    logger.info(event=LogEvent.SUM_COMPUTED, message="hidden")
    logger.warning(event=LogEvent.SHAPE_REJECTED, message="shown")

    records = [r for r in caplog.records if r.name == "shapekit.test-json-level"]
    assert [r.getMessage() for r in records] == ["shown"]

    logger.set_level(logging.INFO)
    logger.info(event=LogEvent.SUM_COMPUTED, message="now shown")
    assert caplog.records[-1].getMessage() == "now shown"


def test_foreign_records_still_render():
    record = logging.LogRecord("other", logging.INFO, __file__, 1, "plain", None, None)
    entry = json.loads(JSONFormatter().format(record))
    assert entry['component'] == "other"
    assert entry['event'] is None


def test_default_level_keeps_existing_level(caplog):
    StructuredLogger("test-json-keep", level=logging.WARNING)
    logger = StructuredLogger("test-json-keep")

    assert logger.logger.level == logging.WARNING
    logger.info(event=LogEvent.SUM_COMPUTED, message="hidden")
    assert not [r for r in caplog.records if r.name == "shapekit.test-json-keep"]
