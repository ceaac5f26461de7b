"""SQLAlchemy declarative base and model imports for Alembic."""
from mindease.db.session import Base

# Import all models so Alembic can see them
from mindease.models.board import Board  # noqa: F401
from mindease.models.column import BoardColumn  # noqa: F401
from mindease.models.pomodoro_session import PomodoroSession  # noqa: F401
from mindease.models.pomodoro_settings import PomodoroSettings  # noqa: F401
from mindease.models.refresh_token import RefreshToken  # noqa: F401
from mindease.models.task import Task  # noqa: F401
from mindease.models.user import User  # noqa: F401

__all__ = [
    "Base",
    "User",
    "RefreshToken",
    "PomodoroSettings",
    "PomodoroSession",
    "Board",
    "BoardColumn",
    "Task",
]
