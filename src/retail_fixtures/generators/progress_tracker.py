"""
Progress tracking for fixture generation.

TableProgressTracker keeps completion state separate from progress
percentages: tables stay "in_progress" until the whole run finishes, even
when their own progress has reached 1.0.
"""

import logging

logger = logging.getLogger(__name__)


class TableProgressTracker:
    """
    Tracker for table generation states and progress.

    State Transitions:
        not_started → in_progress (when mark_table_started() called)
        in_progress → completed (when mark_generation_complete() called)
    """

    STATE_NOT_STARTED = "not_started"
    STATE_IN_PROGRESS = "in_progress"
    STATE_COMPLETED = "completed"

    def __init__(self, table_names: list[str]) -> None:
        """
        Initialize tracker with list of table names to track.

        Args:
            table_names: Tables to track. All start 'not_started' at 0.0.
        """
        self._states: dict[str, str] = {}
        self._progress: dict[str, float] = {}

        for table_name in table_names:
            self._states[table_name] = self.STATE_NOT_STARTED
            self._progress[table_name] = 0.0

        logger.debug(f"Initialized TableProgressTracker with {len(table_names)} tables")

    def _require(self, table_name: str) -> None:
        if table_name not in self._states:
            raise KeyError(f"Table '{table_name}' is not being tracked")

    def mark_table_started(self, table_name: str) -> None:
        """
        Mark a table as in_progress when generation starts for it.

        Raises:
            KeyError: If table_name is not being tracked.
        """
        self._require(table_name)
        old_state = self._states[table_name]
        self._states[table_name] = self.STATE_IN_PROGRESS

        logger.debug(
            f"Table '{table_name}' state transition: "
            f"{old_state} → {self.STATE_IN_PROGRESS}"
        )

    def update_progress(self, table_name: str, progress: float) -> None:
        """
        Update progress (0.0-1.0) for a table. Does NOT change state.

        Raises:
            KeyError: If table_name is not being tracked.
            ValueError: If progress is not between 0.0 and 1.0.
        """
        if not 0.0 <= progress <= 1.0:
            raise ValueError(f"Progress must be between 0.0 and 1.0, got {progress}")

        self._require(table_name)
        old_progress = self._progress[table_name]
        self._progress[table_name] = progress

        # Log only every 10%
        if int(old_progress * 10) != int(progress * 10):
            logger.debug(
                f"Table '{table_name}' progress: {old_progress:.1%} → {progress:.1%}"
            )

    def mark_generation_complete(self) -> None:
        """Mark all in_progress tables as completed. Called once per run."""
        completed_count = 0
        for table_name, state in self._states.items():
            if state == self.STATE_IN_PROGRESS:
                self._states[table_name] = self.STATE_COMPLETED
                completed_count += 1

        logger.debug(f"Marked {completed_count} tables as completed")

    def get_state(self, table_name: str) -> str:
        self._require(table_name)
        return self._states[table_name]

    def get_progress(self, table_name: str) -> float:
        self._require(table_name)
        return self._progress[table_name]

    def get_all_states(self) -> dict[str, str]:
        return self._states.copy()
