"""Session aggregates: totals, averages and the daily focus streak."""
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from mindease.core.time import as_utc
from mindease.models.enums import SessionStatus, SessionType
from mindease.schemas.pomodoro import SummaryOutSchema

BREAK_TYPES = {SessionType.SHORT_BREAK.value, SessionType.LONG_BREAK.value}


def round_half_up(value: float, places: int = 0) -> float:
    """Round like JavaScript Math.round does (halves go up, not to even)."""
    quant = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP))


def _minutes(sessions: Iterable) -> float:
    return sum((s.actual_duration_seconds or 0) / 60 for s in sessions)


def completed_focus_days(sessions: Iterable) -> set[date]:
    """UTC calendar days that have at least one completed focus session."""
    return {
        as_utc(s.started_at).date()
        for s in sessions
        if s.type == SessionType.FOCUS.value and s.status == SessionStatus.COMPLETED.value
    }


def compute_streak(days: set[date], today: date) -> int:
    """Consecutive days ending today present in `days`. No grace day for today."""
    streak = 0
    current = today
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


def summarize(sessions: list, today: date) -> SummaryOutSchema:
    """Aggregate an already-filtered list of sessions."""
    completed = [s for s in sessions if s.status == SessionStatus.COMPLETED.value]
    canceled = [s for s in sessions if s.status == SessionStatus.CANCELED.value]
    focus = [s for s in sessions if s.type == SessionType.FOCUS.value]
    completed_focus = [s for s in focus if s.status == SessionStatus.COMPLETED.value]
    breaks = [s for s in sessions if s.type in BREAK_TYPES]

    total_focus_minutes = _minutes(focus)
    average = total_focus_minutes / len(completed_focus) if completed_focus else 0

    return SummaryOutSchema(
        total_sessions=len(sessions),
        completed_sessions=len(completed),
        canceled_sessions=len(canceled),
        total_focus_sessions=len(focus),
        completed_focus_sessions=len(completed_focus),
        total_focus_minutes=int(round_half_up(total_focus_minutes)),
        total_break_minutes=int(round_half_up(_minutes(breaks))),
        average_focus_minutes=round_half_up(average, 1),
        streak=compute_streak(completed_focus_days(sessions), today),
    )
