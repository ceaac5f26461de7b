"""Refresh token: only the sha256 of the opaque token is kept."""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from mindease.core.time import utcnow
from mindease.db.session import Base
from mindease.db.types import UTCDateTime, new_id


class RefreshToken(Base):
    __tablename__ = "refresh_tokens"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token_hash = Column(String(64), unique=True, nullable=False, index=True)
    expires_at = Column(UTCDateTime(), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)

    user = relationship("User", back_populates="refresh_tokens")
