"""Task inside a column."""
from sqlalchemy import Column, Float, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from mindease.core.time import utcnow
from mindease.db.session import Base
from mindease.db.types import UTCDateTime, new_id
from mindease.models.enums import TaskStatus


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    column_id = Column(String(36), ForeignKey("board_columns.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=TaskStatus.TODO.value)
    due_date = Column(UTCDateTime(), nullable=True)
    hours = Column(Float, nullable=False, default=0)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow, index=True)
    updated_at = Column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    column = relationship("BoardColumn", back_populates="tasks")
    sessions = relationship("PomodoroSession", back_populates="task", passive_deletes=True)
