"""Identity and credential store: users, passwords, refresh tokens."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindease.core.config import get_expiration_date, get_settings
from mindease.core.errors import ConflictError, NotFoundError, UnauthorizedError
from mindease.core.security import (
    generate_refresh_token,
    hash_password,
    hash_refresh_token,
    verify_password,
)
from mindease.core.time import utcnow
from mindease.models.pomodoro_settings import PomodoroSettings
from mindease.models.refresh_token import RefreshToken
from mindease.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def register(self, name: str, email: str, password: str) -> User:
        """Create a user together with default timer settings."""
        email_norm = normalize_email(email)
        if self.db.query(User).filter(User.email == email_norm).first():
            raise ConflictError("User already exists")

        user = User(name=name, email=email_norm, hashed_password=hash_password(password))
        self.db.add(user)
        self.db.flush()
        self.db.add(PomodoroSettings.with_defaults(user.id))
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race against a concurrent registration
            self.db.rollback()
            raise ConflictError("User already exists")
        self.db.refresh(user)
        logger.info("registered user %s", user.id)
        return user

    def login(self, email: str, password: str) -> User:
        user = self.db.query(User).filter(User.email == normalize_email(email)).first()
        if not user or not verify_password(password, user.hashed_password):
            logger.info("failed login for %s", normalize_email(email))
            raise UnauthorizedError("Invalid credentials")
        return user

    def create_refresh_token(self, user_id: str) -> str:
        """Issue a new opaque refresh token; only its hash is stored."""
        token = generate_refresh_token()
        self.db.add(
            RefreshToken(
                user_id=user_id,
                token_hash=hash_refresh_token(token),
                expires_at=get_expiration_date(get_settings().refresh_token_expires_in),
            )
        )
        self.db.commit()
        return token

    def validate_refresh_token(self, token: str) -> User:
        record = (
            self.db.query(RefreshToken)
            .filter(RefreshToken.token_hash == hash_refresh_token(token))
            .first()
        )
        if record is None:
            raise UnauthorizedError("Invalid refresh token")

        if record.expires_at < utcnow():
            self.db.delete(record)
            self.db.commit()
            raise UnauthorizedError("Refresh token expired")

        return record.user

    def revoke_refresh_token(self, token: str) -> None:
        self.db.query(RefreshToken).filter(
            RefreshToken.token_hash == hash_refresh_token(token)
        ).delete(synchronize_session=False)
        self.db.commit()

    def revoke_all_user_tokens(self, user_id: str) -> int:
        count = (
            self.db.query(RefreshToken)
            .filter(RefreshToken.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info("revoked %d refresh tokens for user %s", count, user_id)
        return count

    def get_me(self, user_id: str) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        return user
