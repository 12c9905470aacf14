"""Schedule item and display row models."""

from enum import Enum, IntEnum
from typing import Annotated, Literal, Optional, Union

import pydantic


class ItemType(IntEnum):
    FREE = 0
    SESSION = 1
    BREAK = 2


class RowKind(str, Enum):
    SESSION = 'session'
    BREAK = 'break'
    TIME_HEADER = 'time_header'
    UNKNOWN = 'unknown'


class ScheduleItem(pydantic.BaseModel):
    """One occurrence in a day's schedule. Times are epoch milliseconds."""

    model_config = pydantic.ConfigDict(frozen=True)

    session_id: Optional[str] = None
    title: Optional[str] = None
    start_time: int
    end_time: int
    type: ItemType = ItemType.SESSION

    @pydantic.model_validator(mode='after')
    def validate_time_order(self) -> 'ScheduleItem':
        if self.end_time < self.start_time:
            raise ValueError('end_time must not be before start_time')
        return self


class SessionRow(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    kind: Literal[RowKind.SESSION] = RowKind.SESSION
    item: ScheduleItem


class BreakRow(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    kind: Literal[RowKind.BREAK] = RowKind.BREAK
    item: ScheduleItem


class TimeHeaderRow(pydantic.BaseModel):
    """Synthetic row marking the start of a new start-time bucket."""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: Literal[RowKind.TIME_HEADER] = RowKind.TIME_HEADER
    start_time: int


Row = Annotated[
    Union[SessionRow, BreakRow, TimeHeaderRow],
    pydantic.Field(discriminator='kind'),
]

RowList = tuple[Row, ...]
