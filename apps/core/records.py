# apps/core/records.py
"""
Helpers for the record format the mobile app kept in its local key-value
store: a JSON array per key, UUIDs as upper-case strings, binary data as
base64 and timestamps as seconds since 2001-01-01 UTC.
"""
import base64
import binascii
import json
import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional, TypeVar
from uuid import UUID

import pytz
from dateutil import parser as date_parser
from django.conf import settings

logger = logging.getLogger(__name__)

T = TypeVar('T')

REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=pytz.UTC)

# Exceptions that mean "this record is malformed"
RECORD_ERRORS = (KeyError, TypeError, ValueError, AttributeError, OverflowError, binascii.Error)


def local_timezone():
    return pytz.timezone(settings.TIME_ZONE)


def parse_record_date(value) -> Optional[datetime]:
    """Reference-date seconds or an ISO-8601 string -> aware datetime."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return REFERENCE_DATE + timedelta(seconds=value)
    if isinstance(value, str):
        parsed = date_parser.isoparse(value)
        if parsed.tzinfo is None:
            parsed = pytz.UTC.localize(parsed)
        return parsed
    raise ValueError(f"Not a timestamp: {value!r}")


def format_record_date(value: Optional[datetime]) -> Optional[float]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = local_timezone().localize(value)
    return (value - REFERENCE_DATE).total_seconds()


def parse_uuid(value) -> UUID:
    return UUID(str(value))


def format_uuid(value: UUID) -> str:
    return str(value).upper()


def decode_data(value) -> bytes:
    if not value:
        return b""
    return base64.b64decode(value, validate=True)


def encode_data(value: bytes) -> str:
    return base64.b64encode(value or b"").decode('ascii')


def load_collection(blob, parse_record: Callable[[dict], T], name: str = "records") -> List[T]:
    """
    Decodes a stored JSON array. A blob that is not a JSON array yields an
    empty list; records that fail to parse are skipped.
    """
    if not blob:
        return []
    try:
        raw = json.loads(blob)
    except (TypeError, ValueError) as e:
        logger.warning("Discarding unreadable %s blob: %s", name, e)
        return []
    if not isinstance(raw, list):
        logger.warning("Discarding %s blob: expected a JSON array, got %s", name, type(raw).__name__)
        return []

    items = []
    for index, record in enumerate(raw):
        try:
            items.append(parse_record(record))
        except RECORD_ERRORS as e:
            logger.warning("Skipping malformed %s record #%d: %s", name, index, e)
    return items


def dump_collection(items, format_record: Callable[[T], dict]) -> str:
    return json.dumps([format_record(item) for item in items], ensure_ascii=False)
