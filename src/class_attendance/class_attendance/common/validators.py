from __future__ import annotations

from datetime import date, timedelta

from ..core.constants import EARLIEST_DATE, MAX_DAYS_AHEAD
from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Please enter a {field_name}")
    return value.strip()


def require_date_in_range(value: date, *, today: date) -> date:
    latest = today + timedelta(days=MAX_DAYS_AHEAD)
    if value < EARLIEST_DATE or value > latest:
        raise ValidationError(
            f"Date must be between {EARLIEST_DATE.isoformat()} and {latest.isoformat()}"
        )
    return value
