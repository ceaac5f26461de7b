from mindease.services.auth import AuthService
from mindease.services.boards import BoardsService
from mindease.services.columns import ColumnsService
from mindease.services.history import HistoryService
from mindease.services.pomodoro_settings import PomodoroSettingsService
from mindease.services.sessions import SessionsService
from mindease.services.tasks import TasksService

__all__ = [
    "AuthService",
    "BoardsService",
    "ColumnsService",
    "HistoryService",
    "PomodoroSettingsService",
    "SessionsService",
    "TasksService",
]
