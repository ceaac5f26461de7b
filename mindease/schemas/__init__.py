from mindease.schemas.auth import (
    LoginSchema,
    RefreshTokenSchema,
    RegisterSchema,
    UserOutSchema,
)
from mindease.schemas.board import (
    BoardCreateSchema,
    BoardOutSchema,
    BoardUpdateSchema,
    ColumnCreateSchema,
    ColumnOutSchema,
    ColumnUpdateSchema,
    TaskCreateSchema,
    TaskOutSchema,
    TaskUpdateSchema,
)
from mindease.schemas.pomodoro import (
    ActiveSessionOutSchema,
    SessionFinishSchema,
    SessionOutSchema,
    SessionStartSchema,
    SettingsOutSchema,
    SettingsUpdateSchema,
    SummaryOutSchema,
)

__all__ = [
    "LoginSchema",
    "RefreshTokenSchema",
    "RegisterSchema",
    "UserOutSchema",
    "BoardCreateSchema",
    "BoardOutSchema",
    "BoardUpdateSchema",
    "ColumnCreateSchema",
    "ColumnOutSchema",
    "ColumnUpdateSchema",
    "TaskCreateSchema",
    "TaskOutSchema",
    "TaskUpdateSchema",
    "ActiveSessionOutSchema",
    "SessionFinishSchema",
    "SessionOutSchema",
    "SessionStartSchema",
    "SettingsOutSchema",
    "SettingsUpdateSchema",
    "SummaryOutSchema",
]
