"""Stream-mode extraction: period occurrences from the document's linear text.

The PDF text comes out row by row across the five weekday columns, so for a
given period number its occurrences appear in column order (Mon -> Fri). The
header printed under each weekday name lists which periods meet that day,
e.g.

    Monday        Tuesday       Wednesday ...
    1-6           1,2,3         4,5,6

which tells us the columns each period number will be seen in, in order.
A period printed twice on one day (A/B lunch) wraps back to its first column;
choosing between the copies is left to the duplicate resolver.
"""

import bisect
import re
from collections.abc import Mapping

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.logging import get_logger
from schedule_ingest.models import RawOccurrence, StreamEvidence, TimeOfDay

log = get_logger(__name__)

PERIOD_RE = re.compile(
    r"Period\s+(\d+)\s*(\d{1,2}:\d{2})\s*[-–]\s*(\d{1,2}:\d{2})\s*\(\d+\)"
)


def parse_roster(roster: str) -> frozenset[int]:
    """Parse a header roster like "1-6", "1,2,3,5,6" or "1-3,5" into periods."""
    periods: set[int] = set()
    for item in roster.split(","):
        item = item.strip()
        if not item:
            continue
        if "-" in item:
            first, _, last = item.partition("-")
            if first.isdigit() and last.isdigit():
                periods.update(range(max(int(first), 1), int(last) + 1))
        elif item.isdigit() and int(item) > 0:
            periods.add(int(item))
    return frozenset(periods)


def parse_day_rosters(
    text: str, conventions: ScheduleConventions = DEFAULT_CONVENTIONS
) -> dict[int, frozenset[int]]:
    """Map weekday column (Monday is 0) -> periods meeting that day.

    Days whose name is not followed by a roster line are left out.
    """
    rosters: dict[int, frozenset[int]] = {}
    for column, day_name in enumerate(conventions.day_names):
        match = re.search(
            rf"{re.escape(day_name)}\s*\n([\d,\-]+)", text, re.IGNORECASE
        )
        if match is None:
            log.debug("roster_missing", day=day_name)
            continue
        periods = parse_roster(match.group(1))
        if periods:
            rosters[column] = periods

    log.info(
        "roster_parsed",
        rosters={
            conventions.day_names[column]: sorted(periods)
            for column, periods in rosters.items()
        },
    )
    return rosters


def expected_columns(rosters: Mapping[int, frozenset[int]]) -> dict[int, tuple[int, ...]]:
    """Map period number -> ascending columns it is expected to appear in."""
    columns: dict[int, list[int]] = {}
    for column in sorted(rosters):
        for period in rosters[column]:
            columns.setdefault(period, []).append(column)
    return {period: tuple(cols) for period, cols in columns.items()}


def advance_cursor(
    cursors: Mapping[int, int], period: int, columns: tuple[int, ...]
) -> tuple[int, dict[int, int]]:
    """Take the column at a period's cursor and return it with the moved cursors.

    The cursor wraps to the first expected column once it runs past the last.
    """
    position = cursors.get(period, 0)
    return columns[position], {**cursors, period: (position + 1) % len(columns)}


def find_lunch_markers(
    text: str, conventions: ScheduleConventions = DEFAULT_CONVENTIONS
) -> list[tuple[int, str]]:
    """All lunch markers in the text as (offset, canonical marker), ascending.

    Matching is case-sensitive so prose like "grab a lunch pass" is not taken
    for the "A Lunch" heading.
    """
    markers: list[tuple[int, str]] = []
    for marker in conventions.lunch_markers:
        pattern = re.compile(
            r"\b" + r"\s+".join(map(re.escape, marker.split())) + r"\b"
        )
        markers.extend((m.start(), marker) for m in pattern.finditer(text))
    return sorted(markers)


def nearest_lunch(markers: list[tuple[int, str]], offset: int) -> str | None:
    """The last lunch marker that starts before ``offset``."""
    index = bisect.bisect_left(markers, (offset, ""))
    return markers[index - 1][1] if index > 0 else None


def extract_stream_occurrences(
    text: str, conventions: ScheduleConventions = DEFAULT_CONVENTIONS
) -> list[RawOccurrence]:
    """Find every "Period <n> <h:mm> - <h:mm> (<minutes>)" and place it in a column.

    Args:
        text: Extracted PDF text in reading order, newlines preserved.
        conventions: Day names and lunch markers.

    Returns:
        Raw occurrences in document order. (period, column) pairs may repeat.
    """
    expected = expected_columns(parse_day_rosters(text, conventions))
    markers = find_lunch_markers(text, conventions)

    occurrences: list[RawOccurrence] = []
    cursors: dict[int, int] = {}
    for match in PERIOD_RE.finditer(text):
        period = int(match.group(1))
        columns = expected.get(period)
        if not columns:
            log.debug("period_not_in_roster", period=period, offset=match.start())
            continue

        try:
            start = TimeOfDay.parse(match.group(2))
            end = TimeOfDay.parse(match.group(3))
        except ValueError:
            log.debug("period_time_invalid", period=period, text=match.group(0))
            continue

        column, cursors = advance_cursor(cursors, period, columns)
        occurrences.append(
            RawOccurrence(
                period=period,
                start=start,
                end=end,
                column=column,
                evidence=StreamEvidence(
                    offset=match.start(),
                    lunch=nearest_lunch(markers, match.start()),
                ),
            )
        )

    log.info("occurrences_extracted", mode="stream", count=len(occurrences))
    return occurrences
