"""
Base generator infrastructure for fixture generation.

Provides configuration access, progress tracking and progress callbacks.
"""

import logging
from typing import Callable

from retail_fixtures.config.models import FixtureConfig

from ..progress_tracker import TableProgressTracker

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, float, str | None], None]


class BaseGenerator:
    """
    Base class providing shared infrastructure for fixture generation.

    Handles:
    - Configuration
    - Progress tracking and callbacks
    """

    def __init__(self, config: FixtureConfig):
        """
        Initialize base generator infrastructure.

        Args:
            config: Fixture configuration containing generation parameters
        """
        self.config = config
        self._progress_callback: ProgressCallback | None = None
        self._progress_tracker: TableProgressTracker | None = None

    def set_progress_callback(self, callback: ProgressCallback | None) -> None:
        """Register or clear a callback for incremental progress updates."""
        self._progress_callback = callback

    @property
    def progress_tracker(self) -> TableProgressTracker | None:
        return self._progress_tracker

    def _start_table(self, table_name: str, message: str | None = None) -> None:
        if self._progress_tracker:
            self._progress_tracker.mark_table_started(table_name)
        self._emit_progress(table_name, 0.0, message)

    def _emit_progress(
        self,
        table_name: str,
        progress: float,
        message: str | None = None,
    ) -> None:
        """Record progress and send it to the registered callback (if any)."""
        clamped = max(0.0, min(1.0, progress))

        if (
            self._progress_tracker
            and table_name in self._progress_tracker.get_all_states()
        ):
            self._progress_tracker.update_progress(table_name, clamped)

        if not self._progress_callback:
            return

        try:
            self._progress_callback(table_name, clamped, message)
        except Exception as exc:
            logger.warning(
                "Progress callback failed for %s: %s",
                table_name,
                exc,
                exc_info=True,
            )
