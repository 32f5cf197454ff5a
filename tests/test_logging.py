import json
import logging

from cadgeo_logging import LogEvent, StructuredLogger, create_logger
from cadgeo_logging.events import BACKEND_EVENTS, ERROR_EVENTS


def test_records_are_json(caplog):
    logger = StructuredLogger("canvas", logger_name="cadgeo.test.canvas")

    with caplog.at_level(logging.INFO, logger="cadgeo.test.canvas"):
        logger.info(LogEvent.CANVAS_RESIZED, "Resized", metadata={'new_size': [10, 20]})

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["component"] == "canvas"
    assert entry["event"] == "canvas.resized"
    assert entry["level"] == "INFO"
    assert entry["metadata"] == {"new_size": [10, 20]}


def test_exception_is_serialized(caplog):
    logger = StructuredLogger("engine", logger_name="cadgeo.test.engine")

    with caplog.at_level(logging.ERROR, logger="cadgeo.test.engine"):
        logger.error(LogEvent.BACKEND_CALL_FAILED, "Failed", exc_info=RuntimeError("boom"))

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["exception"] == {"type": "RuntimeError", "message": "boom"}


def test_records_below_level_are_skipped(caplog):
    logger = create_logger("quiet", level=logging.WARNING)

    with caplog.at_level(logging.DEBUG, logger="cadgeo.quiet"):
        logger.set_level(logging.WARNING)
        logger.info(LogEvent.SHAPE_ADDED, "Not emitted")

    assert not [r for r in caplog.records if r.name == "cadgeo.quiet"]


def test_event_categories():
    assert LogEvent.BACKEND_UNAVAILABLE in BACKEND_EVENTS
    assert LogEvent.BACKEND_CALL_FAILED in ERROR_EVENTS
    assert LogEvent("shape.stale_reference") is LogEvent.SHAPE_STALE_REFERENCE
