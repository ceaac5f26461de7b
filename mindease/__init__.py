"""Mind Ease: Pomodoro timer and kanban board backend."""

__version__ = "1.0.0"
