"""Timer settings store: lazily created with defaults, updated by partial upsert."""
from sqlalchemy.orm import Session

from mindease.models.pomodoro_settings import PomodoroSettings


class PomodoroSettingsService:
    def __init__(self, db: Session):
        self.db = db

    def _find(self, user_id: str) -> PomodoroSettings | None:
        return self.db.query(PomodoroSettings).filter(PomodoroSettings.user_id == user_id).first()

    def get_settings(self, user_id: str) -> PomodoroSettings:
        settings = self._find(user_id)
        if settings is None:
            settings = PomodoroSettings.with_defaults(user_id)
            self.db.add(settings)
            self.db.commit()
            self.db.refresh(settings)
        return settings

    def update_settings(self, user_id: str, changes: dict) -> PomodoroSettings:
        settings = self._find(user_id)
        if settings is None:
            settings = PomodoroSettings.with_defaults(user_id, **changes)
            self.db.add(settings)
        else:
            for field, value in changes.items():
                setattr(settings, field, value)
        self.db.commit()
        self.db.refresh(settings)
        return settings
