import re
from typing import TYPE_CHECKING

from django.utils import timezone  # type: ignore

if TYPE_CHECKING:
    from datetime import datetime

ARCHIVE_PERIOD_RE = re.compile(r"^(?P<year>\d{4})/(?P<month>\d{1,2})$")


def now_datetime() -> "datetime":
    return timezone.now()


def parse_archive_period(period: str) -> tuple[int, int] | None:
    """Method that parses an archive period of the form YYYY/MM into a
    (year, month) tuple.

    Args:
        period: str, e.g. "2017/08" or "2017/8"

    Returns:
        tuple[int, int] | None: (year, month) or None if the period is malformed
    """
    match = ARCHIVE_PERIOD_RE.match(period)
    if not match:
        return None
    year, month = int(match.group("year")), int(match.group("month"))
    if not 1 <= month <= 12:
        return None
    return year, month


def format_archive_period(year: int, month: int) -> str:
    return f"{year:04d}/{month:02d}"
