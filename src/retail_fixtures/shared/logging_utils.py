"""Structured run events for fixture generation."""
import json
import logging
import uuid
from datetime import UTC, datetime
from typing import Any, Optional


class RunLogger:
    """
    Emits one JSON log entry per generation event, tagged with the run ID.

    A run is bracketed by ``start_run`` and ``end_run``; entries logged
    outside a run carry ``"run_id": "none"``.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._run_id: Optional[str] = None

    @property
    def run_id(self) -> Optional[str]:
        return self._run_id

    def _emit(self, level: int, event: str, **context: Any) -> None:
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "event": event,
            "run_id": self._run_id or "none",
        }
        if context:
            entry["context"] = context
        self.logger.log(level, json.dumps(entry, default=str))

    def start_run(self, seed: list[int]) -> str:
        """Open a run with a fresh ID and log its seed pair."""
        self._run_id = f"RUN_{uuid.uuid4().hex[:12]}"
        self._emit(logging.INFO, "run_started", seed=seed)
        return self._run_id

    def table_generated(self, table: str, rows: int) -> None:
        self._emit(logging.DEBUG, "table_generated", table=table, rows=rows)

    def run_complete(self, tables: dict[str, int], draws: int) -> None:
        """Log final row counts and the number of random draws consumed."""
        self._emit(logging.INFO, "run_complete", tables=tables, draws=draws)

    def run_failed(self, error: Exception) -> None:
        self._emit(
            logging.ERROR,
            "run_failed",
            error_type=type(error).__name__,
            error=str(error),
        )

    def end_run(self) -> None:
        self._run_id = None


def get_run_logger(name: str) -> RunLogger:
    """Get a run logger writing to the named stdlib logger."""
    return RunLogger(name)
