"""Live workout session: set/exercise progression, rest countdown and PR checks.

A ``WorkoutSessionRunner`` walks one user through a ``WorkoutDefinition``:

    not_started -> active <-> paused -> completed

Operations are applied one at a time on the event loop. Every in-memory
mutation of an operation happens before its first ``await``, so a slow record
check or persistence call never observes (or leaves) half-applied state.
Invalid operations raise ``InvalidSessionTransition`` and change nothing.

Elapsed time is wall-clock: ``duration_minutes`` counts paused time too.
``paused_seconds`` is tracked alongside so callers can derive active time.
"""

from __future__ import annotations

import asyncio
import logging
import math
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from fittrack.core.enums import RecordType, SessionState
from fittrack.core.errors import InvalidSessionTransition, SessionPersistenceError
from fittrack.services.rest_timer import RestTimer

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def round_minutes(seconds: float) -> int:
    """Whole minutes, halves rounded up."""
    return int(math.floor(seconds / 60 + 0.5))


# ── Definition (immutable input) ─────────────────────────────────────────


@dataclass(frozen=True)
class ExercisePrescription:
    exercise_id: uuid.UUID
    sets: int
    reps: int | None = None
    weight: float | None = None
    rest_seconds: int = 0

    def __post_init__(self):
        if self.sets < 1:
            raise ValueError("sets must be >= 1")
        if self.reps is not None and self.reps < 1:
            raise ValueError("reps must be >= 1")
        if self.weight is not None and self.weight < 0:
            raise ValueError("weight must be >= 0")
        if self.rest_seconds < 0:
            raise ValueError("rest_seconds must be >= 0")


@dataclass(frozen=True)
class WorkoutDefinition:
    workout_id: uuid.UUID | None
    name: str
    exercises: tuple[ExercisePrescription, ...]

    def __post_init__(self):
        if not self.exercises:
            raise ValueError("a workout needs at least one exercise")


# ── Session state ────────────────────────────────────────────────────────


@dataclass
class SetState:
    reps: int | None
    weight: float | None = None
    rest_seconds: int | None = None
    completed: bool = False


@dataclass
class SessionExerciseState:
    exercise_id: uuid.UUID
    sets: list[SetState]
    notes: str = ""


@dataclass
class SessionCursor:
    exercise_index: int = 0
    set_index: int = 0


@dataclass
class RestCountdown:
    total_seconds: int
    seconds_remaining: int


@dataclass(frozen=True)
class RecordAchieved:
    exercise_id: uuid.UUID
    exercise_name: str
    record_type: RecordType
    value: float
    unit: str


# ── Finalized output ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class SetResult:
    reps: int | None
    weight: float | None
    rest_seconds: int | None
    completed: bool


@dataclass(frozen=True)
class ExerciseResult:
    exercise_id: uuid.UUID
    sets: tuple[SetResult, ...]
    notes: str = ""


@dataclass(frozen=True)
class FinalizedSession:
    user_id: uuid.UUID
    workout_id: uuid.UUID | None
    name: str
    exercises: tuple[ExerciseResult, ...]
    started_at: datetime
    ended_at: datetime
    duration_minutes: int
    paused_seconds: int = 0
    notes: str | None = None
    completed: bool = True


# ── Collaborators ────────────────────────────────────────────────────────


class ExerciseCatalog(Protocol):
    async def get_name(self, exercise_id: uuid.UUID) -> str | None: ...


class RecordChecker(Protocol):
    async def check(
        self,
        user_id: uuid.UUID,
        exercise_id: uuid.UUID,
        metric_type: RecordType,
        value: float,
        unit: str,
    ) -> bool: ...


class SessionSink(Protocol):
    async def save(self, session: FinalizedSession) -> uuid.UUID: ...


# ── Runner ───────────────────────────────────────────────────────────────


class WorkoutSessionRunner:
    def __init__(
        self,
        definition: WorkoutDefinition,
        *,
        user_id: uuid.UUID,
        records: RecordChecker,
        sink: SessionSink,
        catalog: ExerciseCatalog | None = None,
        on_record: Callable[[RecordAchieved], None] | None = None,
        clock: Callable[[], datetime] = utcnow,
        rest_tick_seconds: float | None = 1.0,
        weight_unit: str = "kg",
    ):
        self.definition = definition
        self.user_id = user_id
        self._records = records
        self._sink = sink
        self._catalog = catalog
        self._on_record = on_record
        self._clock = clock
        self._weight_unit = weight_unit
        # None: no background ticking, the caller drives tick()
        self._rest_timer = (
            RestTimer(self.tick, interval=rest_tick_seconds) if rest_tick_seconds is not None else None
        )

        self.state = SessionState.NOT_STARTED
        self.exercises: list[SessionExerciseState] = []
        self.cursor = SessionCursor()
        self.rest: RestCountdown | None = None
        self.started_at: datetime | None = None
        self.paused_seconds: float = 0.0
        self._paused_at: datetime | None = None
        self._finishing = False
        self._record_lock = asyncio.Lock()
        self.record_notifications: list[RecordAchieved] = []
        self.finalized: FinalizedSession | None = None
        self.session_id: uuid.UUID | None = None

    # ── Queries ──

    @property
    def current_prescription(self) -> ExercisePrescription:
        return self.definition.exercises[self.cursor.exercise_index]

    @property
    def finishing(self) -> bool:
        """True while the finalized session is being handed to the sink."""
        return self._finishing

    @property
    def current_set(self) -> SetState | None:
        if not self.exercises:
            return None
        return self.exercises[self.cursor.exercise_index].sets[self.cursor.set_index]

    @property
    def all_sets_completed(self) -> bool:
        return bool(self.exercises) and all(s.completed for ex in self.exercises for s in ex.sets)

    def elapsed_seconds(self) -> float:
        """Wall-clock seconds since start (until finish, once completed)."""
        if self.started_at is None:
            return 0.0
        end = self.finalized.ended_at if self.finalized is not None else self._clock()
        return max(0.0, (end - self.started_at).total_seconds())

    # ── Transitions ──

    def _require(self, action: str, *allowed: SessionState) -> None:
        if self._finishing:
            raise InvalidSessionTransition(f"Cannot {action}: session is being saved")
        if self.state not in allowed:
            raise InvalidSessionTransition(f"Cannot {action} while session is {self.state.value}")

    def start(self) -> None:
        self._require("start", SessionState.NOT_STARTED)
        self.started_at = self._clock()
        self.exercises = [
            SessionExerciseState(
                exercise_id=p.exercise_id,
                sets=[
                    SetState(reps=p.reps, weight=p.weight, rest_seconds=p.rest_seconds)
                    for _ in range(p.sets)
                ],
            )
            for p in self.definition.exercises
        ]
        self.cursor = SessionCursor()
        self.state = SessionState.ACTIVE
        logger.info("Session started for workout %s (user %s)", self.definition.workout_id, self.user_id)

    def pause(self) -> None:
        self._require("pause", SessionState.ACTIVE)
        self._paused_at = self._clock()
        self.state = SessionState.PAUSED

    def resume(self) -> None:
        self._require("resume", SessionState.PAUSED)
        self._close_pause()
        self.state = SessionState.ACTIVE

    def _close_pause(self) -> None:
        if self._paused_at is not None:
            self.paused_seconds += max(0.0, (self._clock() - self._paused_at).total_seconds())
            self._paused_at = None

    def set_exercise_notes(self, exercise_index: int, notes: str) -> None:
        self._require("edit notes", SessionState.ACTIVE, SessionState.PAUSED)
        if not 0 <= exercise_index < len(self.exercises):
            raise IndexError(f"No exercise at index {exercise_index}")
        self.exercises[exercise_index].notes = notes

    async def complete_current_set(self, reps: int | None = None, weight: float | None = None) -> SetState:
        """Complete the set at the cursor, schedule rest, advance, then check for a record."""
        self._require("complete a set", SessionState.ACTIVE)
        if reps is not None and reps < 1:
            raise ValueError("reps must be >= 1")
        if weight is not None and weight < 0:
            raise ValueError("weight must be >= 0")
        set_ = self.current_set
        if set_ is None or set_.completed:
            raise InvalidSessionTransition("Cannot complete a set: every set is already completed")

        ex_idx, set_idx = self.cursor.exercise_index, self.cursor.set_index
        exercise_id = self.exercises[ex_idx].exercise_id
        prescription = self.current_prescription
        if reps is not None:
            set_.reps = reps
        if weight is not None:
            set_.weight = weight
        set_.completed = True

        if set_idx < prescription.sets - 1:
            self._start_rest(prescription.rest_seconds)
            self.cursor.set_index += 1
        elif ex_idx < len(self.definition.exercises) - 1:
            self.cursor.exercise_index += 1
            self.cursor.set_index = 0
        logger.debug("Completed set %d of exercise %d", set_idx + 1, ex_idx + 1)

        if set_.weight and set_.reps:
            # One check at a time, so equal values never both count as new
            async with self._record_lock:
                await self._check_record(exercise_id, float(set_.weight))
        return set_

    async def finish(self, notes: str | None = None) -> FinalizedSession:
        """Persist the session through the sink; state only becomes completed if that succeeds."""
        if self.state is SessionState.NOT_STARTED:
            raise InvalidSessionTransition("Cannot finish a session that was never started")
        self._require("finish", SessionState.ACTIVE, SessionState.PAUSED)

        ended_at = self._clock()
        paused = self.paused_seconds
        if self._paused_at is not None:
            paused += max(0.0, (ended_at - self._paused_at).total_seconds())
        finalized = FinalizedSession(
            user_id=self.user_id,
            workout_id=self.definition.workout_id,
            name=self.definition.name,
            exercises=tuple(
                ExerciseResult(
                    exercise_id=ex.exercise_id,
                    sets=tuple(SetResult(s.reps, s.weight, s.rest_seconds, s.completed) for s in ex.sets),
                    notes=ex.notes,
                )
                for ex in self.exercises
            ),
            started_at=self.started_at,
            ended_at=ended_at,
            duration_minutes=round_minutes((ended_at - self.started_at).total_seconds()),
            paused_seconds=int(round(paused)),
            notes=notes,
        )

        self._finishing = True
        try:
            session_id = await self._sink.save(finalized)
        except Exception as exc:
            logger.exception("Saving session for workout %s failed", self.definition.workout_id)
            raise SessionPersistenceError("Could not save the workout session") from exc
        finally:
            self._finishing = False

        self._cancel_rest()
        self._paused_at = None
        self.paused_seconds = paused
        self.finalized = finalized
        self.session_id = session_id
        self.state = SessionState.COMPLETED
        logger.info("Session %s completed in %d min", session_id, finalized.duration_minutes)
        return finalized

    def close(self) -> None:
        """Abandon (or release) the runner; nothing is persisted.

        Rejected while a finish is saving, since that save cannot be taken back.
        """
        if self._finishing:
            raise InvalidSessionTransition("Cannot abandon: session is being saved")
        self._cancel_rest()
        if self.state is not SessionState.COMPLETED:
            logger.info("Session for workout %s abandoned", self.definition.workout_id)

    # ── Rest countdown ──

    def _start_rest(self, seconds: int) -> None:
        self._cancel_rest()
        if seconds <= 0:
            return
        self.rest = RestCountdown(total_seconds=seconds, seconds_remaining=seconds)
        if self._rest_timer is not None:
            self._rest_timer.start()

    def _cancel_rest(self) -> None:
        if self._rest_timer is not None:
            self._rest_timer.cancel()
        self.rest = None

    def tick(self) -> bool:
        """One second of rest elapsed. Returns True while a countdown is still running."""
        if self.rest is None:
            return False
        self.rest.seconds_remaining -= 1
        if self.rest.seconds_remaining <= 0:
            self.rest = None
            return False
        return True

    # ── Records ──

    async def _check_record(self, exercise_id: uuid.UUID, weight: float) -> None:
        """Failures here are logged and never fail the set completion."""
        try:
            is_new = await self._records.check(
                self.user_id, exercise_id, RecordType.MAX_WEIGHT, weight, self._weight_unit
            )
        except Exception:
            logger.exception("Personal record check failed for exercise %s", exercise_id)
            return
        if not is_new:
            return

        name = await self._exercise_name(exercise_id)
        note = RecordAchieved(
            exercise_id=exercise_id,
            exercise_name=name,
            record_type=RecordType.MAX_WEIGHT,
            value=weight,
            unit=self._weight_unit,
        )
        self.record_notifications.append(note)
        logger.info("New personal record in %s: %s%s", name, weight, self._weight_unit)
        if self._on_record is not None:
            try:
                self._on_record(note)
            except Exception:
                logger.exception("Record notification callback failed")

    async def _exercise_name(self, exercise_id: uuid.UUID) -> str:
        if self._catalog is None:
            return str(exercise_id)
        try:
            name = await self._catalog.get_name(exercise_id)
        except Exception:
            logger.exception("Exercise lookup failed for %s", exercise_id)
            name = None
        return name or str(exercise_id)
