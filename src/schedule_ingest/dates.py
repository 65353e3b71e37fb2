"""Resolve a schedule document's display name into its weekday column dates.

Documents are named after the week they cover, e.g. "April 6th - 10th" or
"April 27th - May 1st". The year is never printed, so it comes from the
academic year in the conventions.
"""

import re
from datetime import date, timedelta

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.logging import get_logger

log = get_logger(__name__)

MONTHS: dict[str, int] = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

_MONTH_RE = re.compile(r"\b(" + "|".join(MONTHS) + r")\b", re.IGNORECASE)
_DAY_RE = re.compile(r"(\d{1,2})(?:st|nd|rd|th)?", re.IGNORECASE)
_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)


def resolve_column_dates(
    name: str, conventions: ScheduleConventions = DEFAULT_CONVENTIONS
) -> list[date]:
    """Return the weekday dates a document covers, one per grid column.

    Args:
        name: Document display name or file name ("April 6th - 10th.pdf").
        conventions: Supplies the academic year and the column limit.

    Returns:
        Ascending Monday-Friday dates from the start day through the end day,
        at most ``conventions.max_columns`` of them. Empty if the name
        cannot be parsed.
    """
    clean = _PDF_SUFFIX_RE.sub("", name)
    clean = re.sub(r"[-–]", "-", clean).replace(":", "").strip()

    months = _MONTH_RE.findall(clean)
    days = _DAY_RE.findall(clean)

    if not months or len(days) < 2:
        log.warning(
            "date_range_unparseable",
            document=name,
            months=len(months),
            days=len(days),
        )
        return []

    start_month = MONTHS[months[0].lower()]
    end_month = MONTHS[months[1].lower()] if len(months) > 1 else start_month

    try:
        current = date(
            conventions.year_for_month(start_month), start_month, int(days[0])
        )
        end = date(conventions.year_for_month(end_month), end_month, int(days[1]))
    except ValueError as e:
        log.warning("date_range_unparseable", document=name, error=str(e))
        return []

    dates: list[date] = []
    while current <= end and len(dates) < conventions.max_columns:
        # weekday(): Monday=0 ... Friday=4
        if current.weekday() < 5:
            dates.append(current)
        current += timedelta(days=1)

    log.debug(
        "date_range_resolved",
        document=name,
        dates=[d.isoformat() for d in dates],
    )
    return dates
