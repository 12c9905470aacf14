"""Row holder for one day of the schedule screen."""

from typing import Any, Callable, Iterable, Optional, Protocol

from loguru import logger

from .identity import identity_of
from .models import BreakRow, Row, RowKind, RowList, ScheduleItem, SessionRow, TimeHeaderRow
from .row_utils import SameStartTime, find_header_before_time, kind_of, project_rows
from .settings import settings


class RowRenderer(Protocol):
    def render_session(self, item: ScheduleItem, tag_metadata: Any) -> Any: ...

    def render_break(self, item: ScheduleItem) -> Any: ...

    def render_time_header(self, start_time: int) -> Any: ...


class ScheduleDayList:
    """
    Holds the rows of one schedule day and answers per-position queries.

    Every update rebuilds the rows from scratch and notifies the listener
    once. The ``rows`` tuple is a snapshot: it is replaced, never edited.
    """

    def __init__(
        self,
        show_time_separators: Optional[bool] = None,
        tag_metadata: Any = None,
        same_start_time: Optional[SameStartTime] = None,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        if show_time_separators is None:
            show_time_separators = settings.show_time_separators
        self._show_time_separators = show_time_separators
        self._tag_metadata = tag_metadata
        self._same_start_time = same_start_time
        self._on_changed = on_changed
        self._rows: RowList = ()

    @property
    def show_time_separators(self) -> bool:
        return self._show_time_separators

    @property
    def tag_metadata(self) -> Any:
        return self._tag_metadata

    @property
    def rows(self) -> RowList:
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def item_count(self) -> int:
        return len(self._rows)

    def update_items(self, items: Optional[Iterable[ScheduleItem]]) -> None:
        self._rows = project_rows(items, self._show_time_separators, self._same_start_time)
        self._notify_changed()

    def set_tag_metadata(self, tag_metadata: Any) -> None:
        if self._tag_metadata is not tag_metadata:
            self._tag_metadata = tag_metadata
            logger.info("Tag metadata changed, rebinding rows", count=len(self._rows))
            self._notify_changed()

    def row_at(self, position: int) -> Row:
        return self._rows[position]

    def item_kind(self, position: int) -> RowKind:
        return kind_of(self._rows[position])

    def item_id(self, position: int) -> int:
        """Stable identity of the row at position; falls back to the position for unknown rows."""
        row = self._rows[position]
        if kind_of(row) is RowKind.UNKNOWN:
            return position
        return identity_of(row)

    def identities(self) -> list[int]:
        return [self.item_id(position) for position in range(len(self._rows))]

    def find_time_header_position_for_time(self, time: int) -> Optional[int]:
        return find_header_before_time(self._rows, time)

    def render(self, position: int, renderer: RowRenderer) -> Any:
        """
        Dispatch the row at position to the matching renderer method.

        Session rows also receive the current tag metadata. Unknown rows
        are logged and skipped.
        """
        row = self._rows[position]
        if isinstance(row, SessionRow):
            return renderer.render_session(row.item, self._tag_metadata)
        if isinstance(row, BreakRow):
            return renderer.render_break(row.item)
        if isinstance(row, TimeHeaderRow):
            return renderer.render_time_header(row.start_time)
        logger.warning("Skipping unknown schedule row", position=position)
        return None

    def _notify_changed(self) -> None:
        if self._on_changed is not None:
            self._on_changed()
