"""Request dependencies: the bearer-token guard and per-request services."""
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from mindease.core.errors import UnauthorizedError
from mindease.core.security import decode_access_token
from mindease.db.session import get_db
from mindease.services import (
    AuthService,
    BoardsService,
    ColumnsService,
    HistoryService,
    PomodoroSettingsService,
    SessionsService,
    TasksService,
)


@dataclass(frozen=True)
class CurrentUser:
    user_id: str
    email: str


def _extract_token(authorization: str | None) -> str | None:
    """Return token from an `Authorization: Bearer ...` header."""
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return None


def get_current_user(authorization: Annotated[str | None, Header()] = None) -> CurrentUser:
    token = _extract_token(authorization)
    if not token:
        raise UnauthorizedError("Unauthorized")
    payload = decode_access_token(token)
    return CurrentUser(user_id=payload["userId"], email=payload.get("email", ""))


DbSession = Annotated[Session, Depends(get_db)]
AuthUser = Annotated[CurrentUser, Depends(get_current_user)]


def get_auth_service(db: DbSession) -> AuthService:
    return AuthService(db)


def get_settings_service(db: DbSession) -> PomodoroSettingsService:
    return PomodoroSettingsService(db)


def get_sessions_service(db: DbSession) -> SessionsService:
    return SessionsService(db)


def get_history_service(db: DbSession) -> HistoryService:
    return HistoryService(db)


def get_boards_service(db: DbSession) -> BoardsService:
    return BoardsService(db)


def get_columns_service(db: DbSession) -> ColumnsService:
    return ColumnsService(db)


def get_tasks_service(db: DbSession) -> TasksService:
    return TasksService(db)
