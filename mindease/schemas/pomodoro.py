"""Pydantic schemas for timer settings, sessions and history."""
from datetime import datetime

from pydantic import Field

from mindease.models.enums import SessionStatus, SessionType
from mindease.schemas.base import CamelSchema, PartialUpdateSchema


class SettingsOutSchema(CamelSchema):
    id: str
    user_id: str
    focus_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    long_break_every: int
    created_at: datetime
    updated_at: datetime


class SettingsUpdateSchema(PartialUpdateSchema):
    focus_minutes: int = Field(None, ge=1, le=120)
    short_break_minutes: int = Field(None, ge=1, le=60)
    long_break_minutes: int = Field(None, ge=1, le=120)
    long_break_every: int = Field(None, ge=1, le=20)


class SessionStartSchema(CamelSchema):
    type: SessionType
    task_id: str | None = None


class SessionFinishSchema(CamelSchema):
    status: SessionStatus
    ended_at: datetime | None = None


class SessionOutSchema(CamelSchema):
    id: str
    user_id: str
    task_id: str | None = None
    type: SessionType
    state: str  # ACTIVE | ENDED
    status: SessionStatus | None = None
    started_at: datetime
    ended_at: datetime | None = None
    planned_duration_seconds: int
    actual_duration_seconds: int | None = None


class ActiveSessionOutSchema(SessionOutSchema):
    elapsed_seconds: int
    remaining_seconds: int


class SummaryOutSchema(CamelSchema):
    total_sessions: int
    completed_sessions: int
    canceled_sessions: int
    total_focus_sessions: int
    completed_focus_sessions: int
    total_focus_minutes: int
    total_break_minutes: int
    average_focus_minutes: float
    streak: int
