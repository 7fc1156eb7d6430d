"""
Unit tests for structured run events and logging configuration.
"""

import json
import logging

from retail_fixtures.shared.logging_config import configure_logging
from retail_fixtures.shared.logging_utils import RunLogger, get_run_logger

LOGGER_NAME = "tests.run_events"


def _entries(caplog) -> list[dict]:
    return [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == LOGGER_NAME
    ]


class TestRunLogger:
    """Run lifecycle and event payloads."""

    def test_run_id_lifecycle(self):
        run_logger = get_run_logger(LOGGER_NAME)
        run_id = run_logger.start_run([10, 12])

        assert run_id.startswith("RUN_")
        assert len(run_id) == len("RUN_") + 12
        assert run_logger.run_id == run_id

        run_logger.end_run()
        assert run_logger.run_id is None

    def test_each_run_gets_new_id(self):
        run_logger = RunLogger(LOGGER_NAME)
        first = run_logger.start_run([1, 2])
        run_logger.end_run()

        assert run_logger.start_run([1, 2]) != first

    def test_events_are_json_with_run_id(self, caplog):
        run_logger = RunLogger(LOGGER_NAME)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            run_id = run_logger.start_run([10, 12])
            run_logger.table_generated("stores", 7)
            run_logger.run_complete({"Stores": 7}, draws=42)
            run_logger.end_run()

        entries = _entries(caplog)
        assert [e["event"] for e in entries] == [
            "run_started",
            "table_generated",
            "run_complete",
        ]
        assert all(e["run_id"] == run_id for e in entries)
        assert entries[0]["context"] == {"seed": [10, 12]}
        assert entries[1]["context"] == {"table": "stores", "rows": 7}
        assert entries[2]["context"] == {"tables": {"Stores": 7}, "draws": 42}

    def test_run_failed_is_error(self, caplog):
        run_logger = RunLogger(LOGGER_NAME)

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            run_logger.run_failed(ValueError("bad input"))

        record = [r for r in caplog.records if r.name == LOGGER_NAME][-1]
        entry = json.loads(record.getMessage())
        assert record.levelno == logging.ERROR
        assert entry["run_id"] == "none"
        assert entry["context"] == {"error_type": "ValueError", "error": "bad input"}


class TestConfigureLogging:
    def test_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("DEBUG")
            assert root.level == logging.DEBUG
            configure_logging("warning", structured=True)
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
