from mindease.models.user import User
from mindease.models.refresh_token import RefreshToken
from mindease.models.pomodoro_settings import PomodoroSettings
from mindease.models.pomodoro_session import PomodoroSession
from mindease.models.board import Board
from mindease.models.column import BoardColumn
from mindease.models.task import Task

__all__ = [
    "User",
    "RefreshToken",
    "PomodoroSettings",
    "PomodoroSession",
    "Board",
    "BoardColumn",
    "Task",
]
