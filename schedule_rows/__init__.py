"""Display rows for one day of a personal schedule."""

from .models import (
    ItemType,
    RowKind,
    ScheduleItem,
    SessionRow,
    BreakRow,
    TimeHeaderRow,
    Row,
    RowList
)
from .identity import identity_of, string_hash, sequence_hash
from .row_utils import (
    same_start_time,
    project_rows,
    kind_of,
    find_header_before_time
)
from .day_list import ScheduleDayList, RowRenderer
from .settings import Settings, settings

__all__ = [
    'ItemType',
    'RowKind',
    'ScheduleItem',
    'SessionRow',
    'BreakRow',
    'TimeHeaderRow',
    'Row',
    'RowList',
    'identity_of',
    'string_hash',
    'sequence_hash',
    'same_start_time',
    'project_rows',
    'kind_of',
    'find_header_before_time',
    'ScheduleDayList',
    'RowRenderer',
    'Settings',
    'settings'
]
