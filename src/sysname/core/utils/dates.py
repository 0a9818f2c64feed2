"""Date formatting helpers; every name date is rendered as YYYY-MM-DD"""

from datetime import date, datetime, timedelta, timezone


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def iso_date(value: date) -> str:
    """Render a date as YYYY-MM-DD with a four-digit year."""
    return value.isoformat()


def from_epoch_millis(millis: str) -> str:
    """Format an epoch-millisecond timestamp string as a UTC calendar date."""
    return iso_date((EPOCH + timedelta(milliseconds=int(millis.strip()))).date())


def from_month_day_year(text: str) -> str:
    """Reformat 'MM-DD-YYYY' as 'YYYY-MM-DD'; raise ValueError unless there are three numeric parts.

    Out-of-range months and days roll over into the following months and
    years, so '02-30-2003' becomes '2003-03-02'.
    """
    parts = text.strip().split("-")
    if len(parts) != 3 or not all(p.strip().isdigit() for p in parts):
        raise ValueError(f"Expected MM-DD-YYYY, got {text!r}")
    month, day, year = (int(p) for p in parts)
    year += (month - 1) // 12
    first = date(year, (month - 1) % 12 + 1, 1)
    return iso_date(first + timedelta(days=day - 1))
