"""HTTP-date formatting for the ``Expires`` attribute."""

from datetime import UTC, datetime
from email.utils import format_datetime


def http_date(value: datetime) -> str:
    """Format *value* as ``Mon, 31 Jan 2022 05:00:00 GMT``.

    Aware datetimes are converted to UTC. Naive datetimes are taken as
    local time, matching ``datetime.astimezone()``.
    """
    return format_datetime(value.astimezone(UTC), usegmt=True)
