"""Pomodoro routes: settings, session lifecycle, history and summary."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from mindease.core.deps import (
    AuthUser,
    get_history_service,
    get_sessions_service,
    get_settings_service,
)
from mindease.core.errors import ValidationError
from mindease.core.time import parse_date_bound
from mindease.schemas.pomodoro import (
    ActiveSessionOutSchema,
    SessionFinishSchema,
    SessionOutSchema,
    SessionStartSchema,
    SettingsOutSchema,
    SettingsUpdateSchema,
    SummaryOutSchema,
)
from mindease.services.history import HistoryService
from mindease.services.pomodoro_settings import PomodoroSettingsService
from mindease.services.sessions import SessionsService

router = APIRouter(prefix="/pomodoro", tags=["pomodoro"])

SettingsService = Annotated[PomodoroSettingsService, Depends(get_settings_service)]
Sessions = Annotated[SessionsService, Depends(get_sessions_service)]
History = Annotated[HistoryService, Depends(get_history_service)]


def _date_range(date_from: str | None, date_to: str | None):
    try:
        return parse_date_bound(date_from), parse_date_bound(date_to)
    except ValueError as e:
        raise ValidationError(str(e))


# ---------- settings ----------

@router.get("/settings", response_model=SettingsOutSchema)
def get_settings(current_user: AuthUser, service: SettingsService):
    """Get the caller's settings, creating defaults if missing."""
    return service.get_settings(current_user.user_id)


@router.put("/settings", response_model=SettingsOutSchema)
def update_settings(body: SettingsUpdateSchema, current_user: AuthUser, service: SettingsService):
    return service.update_settings(current_user.user_id, body.changes())


# ---------- sessions ----------

@router.post("/sessions/start", response_model=SessionOutSchema, status_code=status.HTTP_201_CREATED)
def start_session(body: SessionStartSchema, current_user: AuthUser, service: Sessions):
    return service.start_session(current_user.user_id, body.type, body.task_id)


@router.post("/sessions/{session_id}/finish", response_model=SessionOutSchema)
def finish_session(session_id: str, body: SessionFinishSchema, current_user: AuthUser, service: Sessions):
    return service.finish_session(current_user.user_id, session_id, body.status, body.ended_at)


@router.get("/sessions/active", response_model=ActiveSessionOutSchema)
def get_active_session(current_user: AuthUser, service: Sessions):
    """Active session with elapsed/remaining seconds; 404 when there is none."""
    active = service.get_active_session(current_user.user_id)
    if active is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "No active session"})
    base = SessionOutSchema.model_validate(active["session"])
    return ActiveSessionOutSchema(
        **base.model_dump(),
        elapsed_seconds=active["elapsed_seconds"],
        remaining_seconds=active["remaining_seconds"],
    )


# ---------- history ----------

@router.get("/history", response_model=list[SessionOutSchema])
def get_history(
    current_user: AuthUser,
    service: History,
    date_from: Annotated[str | None, Query(alias="from")] = None,
    date_to: Annotated[str | None, Query(alias="to")] = None,
):
    start, end = _date_range(date_from, date_to)
    return service.get_history(current_user.user_id, start, end)


@router.get("/summary", response_model=SummaryOutSchema)
def get_summary(
    current_user: AuthUser,
    service: History,
    date_from: Annotated[str | None, Query(alias="from")] = None,
    date_to: Annotated[str | None, Query(alias="to")] = None,
):
    """Totals, averages and the focus streak over the same range as /history."""
    start, end = _date_range(date_from, date_to)
    return service.get_summary(current_user.user_id, start, end)
