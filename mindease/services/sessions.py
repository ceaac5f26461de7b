"""Session lifecycle: start, finish, and the live view of the active session.

A session is active while `ended_at` is null. Finishing it is terminal: the
status, end time and actual duration are written once and never again. The
"one active session per user" rule is checked up front for a clean error and
enforced by a partial unique index for the concurrent case.
"""
import logging
import math
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindease.core.errors import ConflictError, NotFoundError, ValidationError
from mindease.core.time import as_utc, utcnow
from mindease.models.enums import SessionStatus, SessionType
from mindease.models.pomodoro_session import PomodoroSession
from mindease.models.pomodoro_settings import PomodoroSettings
from mindease.models.task import Task

logger = logging.getLogger(__name__)

ACTIVE_SESSION_EXISTS = "You already have an active session. Finish it before starting another."


def planned_duration_seconds(settings: PomodoroSettings, session_type: str) -> int:
    minutes = {
        SessionType.FOCUS.value: settings.focus_minutes,
        SessionType.SHORT_BREAK.value: settings.short_break_minutes,
        SessionType.LONG_BREAK.value: settings.long_break_minutes,
    }.get(session_type)
    if minutes is None:
        raise ValidationError("Invalid session type")
    return minutes * 60


def elapsed_seconds(started_at: datetime, now: datetime) -> int:
    return math.floor((as_utc(now) - as_utc(started_at)).total_seconds())


class SessionsService:
    def __init__(self, db: Session):
        self.db = db

    def _active_query(self, user_id: str):
        return self.db.query(PomodoroSession).filter(
            PomodoroSession.user_id == user_id,
            PomodoroSession.ended_at.is_(None),
        )

    def start_session(self, user_id: str, session_type: str, task_id: str | None = None) -> PomodoroSession:
        if self._active_query(user_id).first() is not None:
            raise ConflictError(ACTIVE_SESSION_EXISTS)

        settings = self.db.query(PomodoroSettings).filter(PomodoroSettings.user_id == user_id).first()
        if settings is None:
            raise NotFoundError("Settings not found")

        if task_id is not None:
            task = self.db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()
            if task is None:
                raise NotFoundError("Task not found")

        session = PomodoroSession(
            user_id=user_id,
            task_id=task_id,
            type=session_type,
            status=None,
            started_at=utcnow(),
            planned_duration_seconds=planned_duration_seconds(settings, session_type),
        )
        self.db.add(session)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(ACTIVE_SESSION_EXISTS)
        self.db.refresh(session)
        logger.info("user %s started %s session %s", user_id, session_type, session.id)
        return session

    def finish_session(
        self,
        user_id: str,
        session_id: str,
        status: str,
        ended_at: datetime | None = None,
    ) -> PomodoroSession:
        session = (
            self.db.query(PomodoroSession)
            .filter(PomodoroSession.id == session_id, PomodoroSession.user_id == user_id)
            .first()
        )
        if session is None:
            raise NotFoundError("Session not found")
        if session.ended_at is not None:
            raise ConflictError("Session already finished")
        if status not in {s.value for s in SessionStatus}:
            raise ValidationError("Invalid session status")

        ended_at = as_utc(ended_at) if ended_at is not None else utcnow()
        if ended_at < as_utc(session.started_at):
            raise ValidationError("endedAt cannot be earlier than startedAt")

        session.status = status
        session.ended_at = ended_at
        session.actual_duration_seconds = elapsed_seconds(session.started_at, ended_at)
        self.db.commit()
        self.db.refresh(session)
        logger.info(
            "user %s finished session %s as %s after %ss",
            user_id,
            session.id,
            status,
            session.actual_duration_seconds,
        )
        return session

    def get_active_session(self, user_id: str, now: datetime | None = None) -> dict | None:
        """Active session plus elapsed/remaining seconds, or None."""
        session = self._active_query(user_id).order_by(PomodoroSession.started_at.desc()).first()
        if session is None:
            return None

        elapsed = elapsed_seconds(session.started_at, now or utcnow())
        return {
            "session": session,
            "elapsed_seconds": elapsed,
            "remaining_seconds": max(0, session.planned_duration_seconds - elapsed),
        }
