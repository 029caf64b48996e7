"""Value coercion for projected fields.

Every value leaving a projection is a string, a boolean or None. The rules are
applied in order and the first match wins:

    timestamp  -> ISO-8601 in UTC ("2024-01-15T10:00:00.000Z")
    bool       -> unchanged
    None       -> None
    Enum       -> its value, as a string
    list/dict  -> compact JSON text
    other      -> str(value)
"""

import enum
import json
import logging
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, Literal

logger = logging.getLogger(__name__)

ProjectedValue = str | bool | None
TimestampPrecision = Literal["milliseconds", "seconds"]

# Types whose str() is their canonical wire form. Anything else is logged.
_PLAIN_TYPES = (str, int, float, Decimal, time)


def format_timestamp(value: date, precision: TimestampPrecision = "milliseconds") -> str:
    """Format a date or datetime as an ISO-8601 UTC string with a ``Z`` suffix.

    Args:
        value: Timestamp to format. Naive datetimes are taken as UTC and a
            bare date is taken as midnight UTC.
        precision: "milliseconds" or "seconds".

    Returns:
        ISO-8601 string, e.g. "2024-01-15T10:00:00.000Z".

    Raises:
        ValueError: If precision is not recognised.
    """
    if precision not in ("milliseconds", "seconds"):
        raise ValueError(f"Unsupported timestamp precision: {precision!r}")

    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)

    timespec = "milliseconds" if precision == "milliseconds" else "seconds"
    return value.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def coerce_value(value: Any, precision: TimestampPrecision = "milliseconds") -> ProjectedValue:
    """Normalize a raw field value into a JSON-safe scalar."""
    # datetime is a subclass of date, so one check covers both
    if isinstance(value, date):
        return format_timestamp(value, precision)
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, dict)):
        logger.debug("Coercing %s to JSON text", type(value).__name__)
        return json.dumps(value, default=str, separators=(",", ":"))
    if not isinstance(value, _PLAIN_TYPES):
        logger.debug("Coercing %s with str()", type(value).__name__)
    return str(value)
