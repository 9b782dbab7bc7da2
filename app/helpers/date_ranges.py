"""
Storage and display helpers for medication date ranges.

A list of ranges is kept in a single text column as
``<start>_<end>;<start>_<end>`` with ISO-8601 dates and an empty side for
an absent date.
"""
import logging
from datetime import date, datetime
from typing import Iterable, Optional, Tuple

from app.helpers.exception_handler import MalformedStoredDate
from app.schemas.sche_medication import DateRange

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = ';'
BOUND_SEPARATOR = '_'
STORED_DATE_FORMAT = '%Y-%m-%d'


def parse_stored_date(value: Optional[str], strict: bool = False) -> Optional[date]:
    """
    Parse an ISO date read from storage.

    Blank input is an absent date. Malformed input raises
    MalformedStoredDate when ``strict`` is set; otherwise it is logged and
    read as absent so the surrounding record stays readable.
    """
    if value is None or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), STORED_DATE_FORMAT).date()
    except ValueError:
        if strict:
            raise MalformedStoredDate(value)
        logger.warning(f"Ignoring malformed stored date '{value}'")
        return None


def format_stored_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def encode_date_ranges(date_ranges: Optional[Iterable[DateRange]]) -> Optional[str]:
    if not date_ranges:
        return None
    encoded = [
        f"{format_stored_date(r.start_date) or ''}{BOUND_SEPARATOR}{format_stored_date(r.end_date) or ''}"
        for r in date_ranges
    ]
    return RANGE_SEPARATOR.join(encoded) if encoded else None


def decode_date_ranges(value: Optional[str]) -> Tuple[DateRange, ...]:
    if value is None or not value.strip():
        return ()
    ranges = []
    for token in value.split(RANGE_SEPARATOR):
        bounds = token.split(BOUND_SEPARATOR)
        start = bounds[0] if len(bounds) > 0 else ''
        end = bounds[1] if len(bounds) > 1 else ''
        ranges.append(DateRange(start_date=parse_stored_date(start), end_date=parse_stored_date(end)))
    return tuple(ranges)


def format_date_range(date_range: DateRange) -> str:
    return str(date_range)


def format_date_ranges(date_ranges: Optional[Iterable[DateRange]]) -> str:
    if not date_ranges:
        return ''
    return '\n'.join(format_date_range(r) for r in date_ranges)
