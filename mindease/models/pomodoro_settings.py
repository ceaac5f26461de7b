"""Per-user timer durations (1:1 with User)."""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from mindease.core.time import utcnow
from mindease.db.session import Base
from mindease.db.types import UTCDateTime, new_id

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_EVERY = 4


class PomodoroSettings(Base):
    __tablename__ = "pomodoro_settings"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    focus_minutes = Column(Integer, nullable=False, default=DEFAULT_FOCUS_MINUTES)
    short_break_minutes = Column(Integer, nullable=False, default=DEFAULT_SHORT_BREAK_MINUTES)
    long_break_minutes = Column(Integer, nullable=False, default=DEFAULT_LONG_BREAK_MINUTES)
    long_break_every = Column(Integer, nullable=False, default=DEFAULT_LONG_BREAK_EVERY)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
    updated_at = Column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="settings")

    @classmethod
    def with_defaults(cls, user_id: str, **overrides) -> "PomodoroSettings":
        values = {
            "focus_minutes": DEFAULT_FOCUS_MINUTES,
            "short_break_minutes": DEFAULT_SHORT_BREAK_MINUTES,
            "long_break_minutes": DEFAULT_LONG_BREAK_MINUTES,
            "long_break_every": DEFAULT_LONG_BREAK_EVERY,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(user_id=user_id, **values)
