"""
Stable row identities.

Rows carry no guaranteed unique id, so identity is derived from content:
session and break rows combine session id, title, start and end time; time
headers use their start time alone. The hashing follows the classic JVM
string and ordered-array hash so values are reproducible across processes
(Python's built-in ``hash`` is salted per process for strings).
"""

from typing import Optional

from .models import BreakRow, Row, SessionRow, TimeHeaderRow

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - (1 << 32) if value & 0x80000000 else value


def string_hash(value: str) -> int:
    """Hash a string as ``h = 31*h + c`` over its UTF-16 code units, wrapping at 32 bits."""
    data = value.encode('utf-16-be', 'surrogatepass')
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & _MASK_32
    return _to_int32(h)


def fold_long(value: int) -> int:
    """Fold a 64-bit two's-complement value to 32 bits: ``v ^ (v >>> 32)``."""
    unsigned = value & _MASK_64
    return _to_int32(unsigned ^ (unsigned >> 32))


def sequence_hash(slots: tuple[int, ...]) -> int:
    """Order-sensitive hash of 64-bit slots, starting at 1 and folding ``31*result + slot``."""
    result = 1
    for slot in slots:
        result = _to_int32(31 * result + fold_long(slot))
    return result


def _optional_string_hash(value: Optional[str]) -> int:
    return string_hash(value) if value else 0


def identity_of(row: Row) -> int:
    """
    Compute the stable identity of a row.

    Two rows with identical constituent values always share an identity,
    wherever they sit in whichever list. Collisions between different rows
    are possible and accepted.

    Args:
        row: A session, break or time header row

    Returns:
        Signed integer identity
    """
    if isinstance(row, (SessionRow, BreakRow)):
        item = row.item
        slots = (
            _optional_string_hash(item.session_id),
            _optional_string_hash(item.title),
            item.start_time,
            item.end_time,
        )
        return sequence_hash(slots)
    if isinstance(row, TimeHeaderRow):
        return fold_long(row.start_time)
    raise TypeError(f'unsupported row type: {type(row).__name__}')
