"""Turn resolved occurrences into dated schedule entries."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.logging import get_logger
from schedule_ingest.models import ResolvedOccurrence, ScheduleEntry, TimeOfDay

log = get_logger(__name__)


def to_datetime(
    day: date,
    time: TimeOfDay,
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> datetime:
    """Combine a column date with a printed time, applying the PM cutoff.

    The school day runs from about 7am to 4pm, so "1:00" is 13:00 and "7:30"
    stays 07:30.
    """
    return datetime(
        day.year,
        day.month,
        day.day,
        conventions.normalize_hour(time.hour),
        time.minute,
        tzinfo=conventions.zone(),
    )


def period_name(period: int) -> str:
    return f"Period {period}"


def assemble_entries(
    occurrences: Iterable[ResolvedOccurrence],
    dates: Sequence[date],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[ScheduleEntry]:
    """Build one ScheduleEntry per occurrence whose weekday column has a date.

    Columns are weekday numbers (Monday is 0), so an occurrence lands on the
    date whose ``weekday()`` equals its column. A week that starts on a
    Tuesday leaves Monday's column without a date.

    Entries come out in input order; callers sort them if they need to.
    """
    by_weekday = {day.weekday(): day for day in dates}

    entries: list[ScheduleEntry] = []
    for occurrence in occurrences:
        day = by_weekday.get(occurrence.column)
        if day is None:
            log.warning(
                "column_without_date",
                period=occurrence.period,
                column=occurrence.column,
                weekdays=sorted(by_weekday),
            )
            continue

        entries.append(
            ScheduleEntry(
                name=period_name(occurrence.period),
                start_time=to_datetime(day, occurrence.start, conventions),
                end_time=to_datetime(day, occurrence.end, conventions),
            )
        )
    return entries
