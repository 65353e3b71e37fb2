"""Layout-mode extraction: period occurrences from positioned text fragments.

Columns are recovered from the x positions of the weekday headers. Each
"Period <n>" label is placed in a column by its x, and its time range is read
from the fragments one row below it (PDF y grows upward, so "below" means a
smaller y) inside the same column. An occurrence's column is the weekday
named by that column's header, not its rank on the page, so a week printed
without a Monday still puts Tuesday's periods on column 1.
"""

import bisect
import re
from collections.abc import Sequence
from typing import NamedTuple

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.logging import get_logger
from schedule_ingest.models import LayoutEvidence, RawOccurrence, TextFragment, TimeOfDay

log = get_logger(__name__)

LABEL_RE = re.compile(r"^\s*Period\s*(\d+)\s*$")
TIME_RANGE_RE = re.compile(r"(\d{1,2}:\d{2})\s*[-–]\s*(\d{1,2}:\d{2})")


class DayHeader(NamedTuple):
    """A weekday column header: the day's index in ``day_names`` and its position."""

    weekday: int
    x: float
    y: float


def find_day_headers(
    fragments: Sequence[TextFragment],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[DayHeader]:
    """One header per weekday name (the topmost), sorted left to right.

    A fragment holding several day names ("Monday   Tuesday") registers each
    of them, placed along the fragment's width by character offset.
    """
    patterns = [
        (weekday, re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE))
        for weekday, name in enumerate(conventions.day_names)
    ]

    headers: dict[int, DayHeader] = {}
    for fragment in fragments:
        length = max(len(fragment.text), 1)
        for weekday, pattern in patterns:
            match = pattern.search(fragment.text)
            if match is None:
                continue
            current = headers.get(weekday)
            if current is None or fragment.y > current.y:
                x = fragment.x + fragment.width * match.start() / length
                headers[weekday] = DayHeader(weekday, x, fragment.y)
    return sorted(headers.values(), key=lambda h: h.x)


def column_boundaries(headers: Sequence[DayHeader]) -> list[float]:
    """Left boundary of each column, left to right.

    A column starts halfway between its header and the previous one; the
    first column is unbounded on the left.
    """
    xs = sorted(h.x for h in headers)
    return [
        float("-inf") if i == 0 else (xs[i - 1] + x) / 2 for i, x in enumerate(xs)
    ]


def column_for_x(boundaries: Sequence[float], x: float) -> int | None:
    """Left-to-right slot of the column containing x, or None when there are none."""
    if not boundaries:
        return None
    return max(bisect.bisect_right(boundaries, x) - 1, 0)


def _column_range(boundaries: Sequence[float], slot: int) -> tuple[float, float]:
    right = boundaries[slot + 1] if slot + 1 < len(boundaries) else float("inf")
    return boundaries[slot], right


def find_time_range(
    label: TextFragment,
    slot: int,
    fragments: Sequence[TextFragment],
    boundaries: Sequence[float],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> tuple[TimeOfDay, TimeOfDay] | None:
    """Read the "<h:mm> - <h:mm>" printed on the row under a period label."""
    target_y = label.y - conventions.layout_row_height
    left, right = _column_range(boundaries, slot)

    row = sorted(
        (
            f
            for f in fragments
            if abs(f.y - target_y) <= conventions.layout_row_tolerance
            and left <= f.x < right
        ),
        key=lambda f: f.x,
    )
    match = TIME_RANGE_RE.search(" ".join(f.text for f in row))
    if match is None:
        return None

    try:
        return TimeOfDay.parse(match.group(1)), TimeOfDay.parse(match.group(2))
    except ValueError:
        return None


def extract_layout_occurrences(
    fragments: Sequence[TextFragment],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[RawOccurrence]:
    """Find every "Period <n>" label and read its column and time range.

    Args:
        fragments: Text fragments of the schedule page in PDF coordinates.
        conventions: Day names and row geometry.

    Returns:
        Raw occurrences in fragment order, columns numbered by weekday
        (Monday is 0). Labels without a time range below them are included
        with start and end left as None.
    """
    headers = find_day_headers(fragments, conventions)
    boundaries = column_boundaries(headers)
    if not boundaries:
        log.warning("day_headers_missing", fragments=len(fragments))
        return []

    log.debug(
        "columns_located",
        days=[conventions.day_names[h.weekday] for h in headers],
        boundaries=boundaries[1:],
    )

    occurrences: list[RawOccurrence] = []
    for fragment in fragments:
        match = LABEL_RE.match(fragment.text)
        if match is None or int(match.group(1)) < 1:
            continue

        slot = column_for_x(boundaries, fragment.x)
        column = headers[slot].weekday
        times = find_time_range(fragment, slot, fragments, boundaries, conventions)
        if times is None:
            log.debug(
                "period_time_missing",
                period=int(match.group(1)),
                column=column,
                y=fragment.y,
            )
        start, end = times if times is not None else (None, None)

        occurrences.append(
            RawOccurrence(
                period=int(match.group(1)),
                start=start,
                end=end,
                column=column,
                evidence=LayoutEvidence(x=fragment.x, y=fragment.y),
            )
        )

    log.info("occurrences_extracted", mode="layout", count=len(occurrences))
    return occurrences
