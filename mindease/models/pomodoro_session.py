"""Pomodoro session. Active while ended_at is null; status only means something once ended."""
from sqlalchemy import Column, Index, Integer, String, ForeignKey, text
from sqlalchemy.orm import relationship

from mindease.core.time import utcnow
from mindease.db.session import Base
from mindease.db.types import UTCDateTime, new_id

STATE_ACTIVE = "ACTIVE"
STATE_ENDED = "ENDED"


class PomodoroSession(Base):
    __tablename__ = "pomodoro_sessions"
    __table_args__ = (
        # at most one active session per user
        Index(
            "uq_pomodoro_sessions_active_user",
            "user_id",
            unique=True,
            sqlite_where=text("ended_at IS NULL"),
            postgresql_where=text("ended_at IS NULL"),
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    task_id = Column(String(36), ForeignKey("tasks.id", ondelete="SET NULL"), nullable=True, index=True)
    type = Column(String(16), nullable=False)  # FOCUS | SHORT_BREAK | LONG_BREAK
    status = Column(String(16), nullable=True)  # COMPLETED | CANCELED | EXPIRED, null while active
    started_at = Column(UTCDateTime(), nullable=False, default=utcnow, index=True)
    ended_at = Column(UTCDateTime(), nullable=True)
    planned_duration_seconds = Column(Integer, nullable=False)
    actual_duration_seconds = Column(Integer, nullable=True)

    user = relationship("User", back_populates="sessions")
    task = relationship("Task", back_populates="sessions")

    @property
    def is_active(self) -> bool:
        return self.ended_at is None

    @property
    def state(self) -> str:
        return STATE_ACTIVE if self.ended_at is None else STATE_ENDED
