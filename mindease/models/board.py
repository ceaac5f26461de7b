"""Board: top of the board -> column -> task hierarchy."""
from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from mindease.core.time import utcnow
from mindease.db.session import Base
from mindease.db.types import UTCDateTime, new_id


class Board(Base):
    __tablename__ = "boards"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(7), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow, index=True)
    updated_at = Column(UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="boards")
    columns = relationship("BoardColumn", back_populates="board", cascade="all, delete-orphan")

    @property
    def tasks_count(self) -> int:
        return sum(len(column.tasks) for column in self.columns)

    @property
    def total_hours(self) -> float:
        return sum(task.hours for column in self.columns for task in column.tasks)
