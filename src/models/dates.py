"""Date normalization for meeting dates.

Meeting dates arrive as ISO strings from the dashboard form, as free text
from the agent facade ("yesterday", "last Friday") or not at all.
"""

from datetime import date, datetime

import dateparser


def normalize_meeting_date(
    raw_date: str | date | datetime | None,
    reference: datetime | None = None,
) -> date | None:
    """Convert a raw meeting date to a calendar date.

    Args:
        raw_date: ISO date, datetime, or natural language string
        reference: Reference point for relative expressions (default: now)

    Returns:
        Parsed date, or None if raw_date is missing or unparseable

    Examples:
        >>> normalize_meeting_date("2026-01-18")
        datetime.date(2026, 1, 18)
        >>> normalize_meeting_date("yesterday", datetime(2026, 1, 18))
        datetime.date(2026, 1, 17)
    """
    if raw_date is None:
        return None

    if isinstance(raw_date, datetime):
        return raw_date.date()
    if isinstance(raw_date, date):
        return raw_date

    if not isinstance(raw_date, str) or not raw_date.strip():
        return None

    text = raw_date.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass

    settings: dict = {
        "PREFER_DATES_FROM": "past",
        "RETURN_AS_TIMEZONE_AWARE": False,
    }
    if reference is not None:
        settings["RELATIVE_BASE"] = reference.replace(tzinfo=None)

    try:
        parsed = dateparser.parse(text, settings=settings)
    except Exception:
        # dateparser can raise various exceptions on malformed input
        return None
    if parsed is None:
        return None
    return parsed.date()
