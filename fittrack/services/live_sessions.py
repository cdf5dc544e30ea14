"""In-process registry of live workout sessions, one per user."""

from __future__ import annotations

import logging
import uuid

from fittrack.core.enums import SessionState
from fittrack.core.errors import LiveSessionConflict, LiveSessionNotFound
from fittrack.services.session_runner import WorkoutSessionRunner

logger = logging.getLogger(__name__)


class LiveSessionRegistry:
    def __init__(self):
        self._runners: dict[uuid.UUID, WorkoutSessionRunner] = {}

    def __len__(self) -> int:
        return len(self._runners)

    def open(self, user_id: uuid.UUID, runner: WorkoutSessionRunner) -> WorkoutSessionRunner:
        """Register a new runner; a completed one is replaced, an unfinished one is a conflict."""
        existing = self._runners.get(user_id)
        if existing is not None:
            if existing.state is not SessionState.COMPLETED:
                raise LiveSessionConflict("Finish or abandon the current session first")
            existing.close()
        self._runners[user_id] = runner
        return runner

    def get(self, user_id: uuid.UUID) -> WorkoutSessionRunner:
        runner = self._runners.get(user_id)
        if runner is None:
            raise LiveSessionNotFound("No live session")
        return runner

    def discard(self, user_id: uuid.UUID) -> bool:
        """Close and drop the user's runner. Raises InvalidSessionTransition while it is saving."""
        runner = self._runners.get(user_id)
        if runner is None:
            return False
        runner.close()
        del self._runners[user_id]
        return True

    def release(self, user_id: uuid.UUID) -> bool:
        """Drop the user's runner once it is completed; unfinished runners stay."""
        runner = self._runners.get(user_id)
        if runner is None or runner.state is not SessionState.COMPLETED:
            return False
        return self.discard(user_id)

    def close_all(self) -> None:
        if self._runners:
            logger.info("Closing %d live session(s)", len(self._runners))
        for user_id, runner in self._runners.items():
            if runner.finishing:
                logger.warning("Live session for user %s is still saving at shutdown", user_id)
                continue
            runner.close()
        self._runners.clear()
