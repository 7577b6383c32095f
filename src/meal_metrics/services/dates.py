"""Calendar helpers shared by the metric engines."""

from datetime import date, datetime, timedelta

_WEEKEND = {5, 6}
_ISO_DATE_LENGTH = 10


def parse_iso_date(value: object) -> date | None:
    """Parse a ``YYYY-MM-DD`` value, returning None when it is not a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if len(text) > _ISO_DATE_LENGTH and text[_ISO_DATE_LENGTH] in {"T", " "}:
        text = text[:_ISO_DATE_LENGTH]
    if len(text) != _ISO_DATE_LENGTH:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def resolve_today(now: datetime | None = None) -> date:
    """Return the calendar day of ``now``, or of the local wall clock."""
    if now is None:
        now = datetime.now().astimezone()
    return now.date()


def days_between(later: date, earlier: date) -> int:
    """Whole days from ``earlier`` to ``later`` (negative when reversed)."""
    return (later - earlier).days


def days_before(day: date, days: int) -> date:
    return day - timedelta(days=days)


def is_weekend(day: date) -> bool:
    return day.weekday() in _WEEKEND
