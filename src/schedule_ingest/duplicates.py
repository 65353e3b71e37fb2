"""Collapse repeated (period, column) occurrences caused by A/B lunch splits.

On split-lunch days periods 3 and 4 are each printed twice in the same
column, once per lunch block. Which copy is the canonical one depends on
what evidence the extractor kept:

- stream evidence: a later copy replaces the kept one only when it follows
  the lunch marker preferred for its period (period 3 after "B Lunch",
  period 4 after "A Lunch");
- layout evidence: copies are ordered top of page first; period 3 takes the
  topmost, period 4 the second-topmost, everything else the topmost.

A chosen copy without a start or end time is dropped.
"""

from collections.abc import Iterable, Sequence

from schedule_ingest.conventions import DEFAULT_CONVENTIONS, ScheduleConventions
from schedule_ingest.logging import get_logger
from schedule_ingest.models import (
    LayoutEvidence,
    RawOccurrence,
    ResolvedOccurrence,
    StreamEvidence,
)

log = get_logger(__name__)


def group_occurrences(
    occurrences: Iterable[RawOccurrence],
) -> dict[tuple[int, int], list[RawOccurrence]]:
    """Group by (column, period), keeping the input order inside each group."""
    groups: dict[tuple[int, int], list[RawOccurrence]] = {}
    for occurrence in occurrences:
        groups.setdefault((occurrence.column, occurrence.period), []).append(
            occurrence
        )
    return groups


def select_by_lunch(
    group: Sequence[RawOccurrence],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> RawOccurrence:
    """Pick a stream-mode copy by the lunch marker printed before it."""
    selected = group[0]
    for candidate in group[1:]:
        preferred = conventions.lunch_preferences.get(candidate.period)
        evidence = candidate.evidence
        if (
            preferred is not None
            and isinstance(evidence, StreamEvidence)
            and evidence.lunch == preferred
        ):
            selected = candidate
    return selected


def select_by_position(
    group: Sequence[RawOccurrence],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> RawOccurrence:
    """Pick a layout-mode copy by its vertical order on the page."""
    ordered = sorted(group, key=lambda o: o.evidence.y, reverse=True)
    period = ordered[0].period
    if period == conventions.top_lunch_period:
        return ordered[0]
    if period == conventions.second_lunch_period and len(ordered) > 1:
        return ordered[1]
    return ordered[0]


def resolve_duplicates(
    occurrences: Iterable[RawOccurrence],
    conventions: ScheduleConventions = DEFAULT_CONVENTIONS,
) -> list[ResolvedOccurrence]:
    """Reduce raw occurrences to one per (column, period).

    Args:
        occurrences: Raw occurrences from either extraction strategy.
        conventions: Lunch periods and preferred lunch markers.

    Returns:
        Resolved occurrences ordered by column, then period.
    """
    resolved: list[ResolvedOccurrence] = []
    duplicates = 0
    dropped = 0

    for key, group in sorted(group_occurrences(occurrences).items()):
        if len(group) > 1:
            duplicates += len(group) - 1

        if all(isinstance(o.evidence, LayoutEvidence) for o in group):
            selected = select_by_position(group, conventions)
        else:
            selected = select_by_lunch(group, conventions)

        if not selected.has_time:
            dropped += 1
            log.debug("occurrence_without_time", column=key[0], period=key[1])
            continue
        resolved.append(ResolvedOccurrence.from_raw(selected))

    log.info(
        "duplicates_resolved",
        resolved=len(resolved),
        duplicates=duplicates,
        dropped=dropped,
    )
    return resolved
