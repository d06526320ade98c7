"""
Tests for structured logging.
"""

import json
import logging

from shapevault_core.logging import LogEvent, create_logger
from shapevault_core.logging.events import ERROR_EVENTS, INGEST_EVENTS, REPOSITORY_EVENTS


class TestStructuredLogger:
    def test_emits_json_document(self, caplog):
        logger = create_logger("test")
        logger.info(
            event=LogEvent.REPOSITORY_SHAPE_ADDED,
            message="Shape added",
            metadata={'shape_id': 'rect_1'}
        )

        entry = json.loads(caplog.records[-1].getMessage())
        assert entry['component'] == "test"
        assert entry['event'] == "repository.shape.added"
        assert entry['level'] == "INFO"
        assert entry['metadata'] == {'shape_id': 'rect_1'}
        assert "timestamp" in entry

    def test_error_carries_exception(self, caplog):
        logger = create_logger("test")
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            logger.error(event=LogEvent.INGEST_FILE_ERROR, message="failed", exc_info=e)

        record = caplog.records[-1]
        entry = json.loads(record.getMessage())
        assert record.levelno == logging.ERROR
        assert entry['exception'] == {'type': "RuntimeError", 'message': "boom"}
        assert record.exc_info is not None

    def test_set_level_filters(self, caplog):
        logger = create_logger("quiet")
        logger.set_level(logging.ERROR)
        logger.warning(event=LogEvent.INGEST_RECORD_SKIPPED, message="skipped")
        assert not any(r.name == "shapevault.quiet" for r in caplog.records)

    def test_bind_adds_context(self, caplog):
        logger = create_logger("test").bind(path="data/cones.txt")
        logger.warning(
            event=LogEvent.INGEST_RECORD_SKIPPED,
            message="skipped",
            metadata={'line': 4}
        )

        entry = json.loads(caplog.records[-1].getMessage())
        assert entry['metadata'] == {'path': "data/cones.txt", 'line': 4}

    def test_bind_leaves_parent_untouched(self, caplog):
        parent = create_logger("test")
        parent.bind(path="x.txt")
        parent.info(event=LogEvent.INGEST_FILE_STARTED, message="started")

        entry = json.loads(caplog.records[-1].getMessage())
        assert "metadata" not in entry

    def test_single_handler_per_component(self):
        create_logger("handlers")
        logger = create_logger("handlers")
        assert len(logger.logger.handlers) == 1


class TestEventCategories:
    def test_categories_match_prefixes(self):
        assert all(event.value.startswith("repository.") for event in REPOSITORY_EVENTS)
        assert all(event.value.startswith("ingest.") for event in INGEST_EVENTS)
        assert LogEvent.INGEST_FILE_ERROR in ERROR_EVENTS
