"""Utility functions for projecting schedule items into display rows."""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Iterable, Optional

from loguru import logger

from .models import (
    BreakRow,
    ItemType,
    Row,
    RowKind,
    RowList,
    ScheduleItem,
    SessionRow,
    TimeHeaderRow,
)
from .settings import settings

SameStartTime = Callable[[ScheduleItem, ScheduleItem], bool]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MINUTE_MS = 60_000


def _local_start(start_time: int, tz: tzinfo) -> Optional[datetime]:
    """Epoch milliseconds as a datetime in tz, or None if datetime cannot represent it."""
    try:
        return (_EPOCH + timedelta(milliseconds=start_time)).astimezone(tz)
    except (OverflowError, ValueError):
        return None


def same_start_time(a: ScheduleItem, b: ScheduleItem, tz: Optional[tzinfo] = None) -> bool:
    """
    Check whether two items belong to the same start-time bucket.

    Items match when their starts fall on the same calendar day and at the
    same wall-clock hour and minute in the given timezone.

    Args:
        a: First schedule item
        b: Second schedule item
        tz: Timezone used to resolve calendar days (defaults to configured timezone)

    Returns:
        True if both items start in the same bucket
    """
    tz = tz or settings.tzinfo
    start_a = _local_start(a.start_time, tz)
    start_b = _local_start(b.start_time, tz)
    if start_a is None or start_b is None:
        # Outside the datetime range: compare raw minute buckets
        return a.start_time // _MINUTE_MS == b.start_time // _MINUTE_MS
    return (
        start_a.date() == start_b.date()
        and start_a.hour == start_b.hour
        and start_a.minute == start_b.minute
    )


def row_for_item(item: ScheduleItem) -> Row:
    if item.type == ItemType.BREAK:
        return BreakRow(item=item)
    return SessionRow(item=item)


def project_rows(
    items: Optional[Iterable[ScheduleItem]],
    insert_separators: bool,
    same_start: Optional[SameStartTime] = None,
) -> RowList:
    """
    Project schedule items into a flat list of display rows.

    Items are expected to be sorted by start time already; they are never
    reordered. When separators are enabled a time header is emitted before
    the first item and before every item whose start bucket differs from
    the previous item's.

    Args:
        items: Schedule items for the day, or None
        insert_separators: Whether to emit time header rows
        same_start: Predicate deciding if two consecutive items share a bucket

    Returns:
        Newly built rows
    """
    if not items:
        return ()

    same_start = same_start or same_start_time
    rows: list[Row] = []
    prev: Optional[ScheduleItem] = None
    for item in items:
        if insert_separators and (prev is None or not same_start(prev, item)):
            rows.append(TimeHeaderRow(start_time=item.start_time))
        rows.append(row_for_item(item))
        prev = item

    logger.debug(
        "Projected schedule rows",
        count=len(rows),
        insert_separators=insert_separators,
    )
    return tuple(rows)


def kind_of(row: object) -> RowKind:
    """Classify a row by its variant; anything else is UNKNOWN."""
    if isinstance(row, SessionRow):
        return RowKind.SESSION
    if isinstance(row, BreakRow):
        return RowKind.BREAK
    if isinstance(row, TimeHeaderRow):
        return RowKind.TIME_HEADER
    return RowKind.UNKNOWN


def find_header_before_time(rows: RowList, time: int) -> Optional[int]:
    """
    Find the latest time header that starts before a given instant.

    Scans backwards, so with several earlier headers the one closest to
    the end of the list wins.

    Args:
        rows: Rows produced by project_rows
        time: Instant in epoch milliseconds

    Returns:
        Index of the header, or None if no header starts before time
    """
    for index in range(len(rows) - 1, -1, -1):
        row = rows[index]
        if isinstance(row, TimeHeaderRow) and row.start_time < time:
            return index
    return None
