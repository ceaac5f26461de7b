"""Date-ranged history and summary over a user's sessions."""
from datetime import date, datetime

from sqlalchemy.orm import Session

from mindease.core.time import utcnow
from mindease.models.pomodoro_session import PomodoroSession
from mindease.schemas.pomodoro import SummaryOutSchema
from mindease.services.stats import summarize


class HistoryService:
    def __init__(self, db: Session):
        self.db = db

    def _query(self, user_id: str, date_from: datetime | None, date_to: datetime | None):
        query = self.db.query(PomodoroSession).filter(PomodoroSession.user_id == user_id)
        if date_from is not None:
            query = query.filter(PomodoroSession.started_at >= date_from)
        if date_to is not None:
            query = query.filter(PomodoroSession.started_at <= date_to)
        return query

    def get_history(
        self, user_id: str, date_from: datetime | None = None, date_to: datetime | None = None
    ) -> list[PomodoroSession]:
        return self._query(user_id, date_from, date_to).order_by(PomodoroSession.started_at.desc()).all()

    def get_summary(
        self,
        user_id: str,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        today: date | None = None,
    ) -> SummaryOutSchema:
        sessions = self._query(user_id, date_from, date_to).all()
        return summarize(sessions, today or utcnow().date())
