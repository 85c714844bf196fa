"""
Canonical timestamp rendering.

The store hands back stored instants in one of three shapes:

- ``{"_seconds": ..., "_nanoseconds": ...}``, already canonical
- a seconds/nanoseconds pair under other names, either a mapping or an object
  (``seconds``/``nanoseconds``, or protobuf style ``seconds``/``nanos``)
- a ``datetime``; Firestore returns ``DatetimeWithNanoseconds`` whose
  ``nanosecond`` attribute keeps sub-microsecond precision

``normalize_timestamp`` folds all of them into ``{"_seconds", "_nanoseconds"}``
so every endpoint renders the same instant identically.
"""

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional

SECONDS_FIELD = "_seconds"
NANOS_FIELD = "_nanoseconds"

NANOS_PER_SECOND = 1_000_000_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_PAIR_NAMES = (
    (SECONDS_FIELD, NANOS_FIELD),
    ("seconds", "nanoseconds"),
    ("seconds", "nanos"),
)


def _canonical(seconds, nanos) -> dict[str, int]:
    # a fractional seconds value moves its fraction into nanos
    whole = math.floor(seconds)
    nanos = round(nanos + (seconds - whole) * NANOS_PER_SECOND)
    seconds = whole
    # carry nanosecond overflow/underflow into seconds
    extra, nanos = divmod(int(nanos), NANOS_PER_SECOND)
    return {SECONDS_FIELD: int(seconds) + extra, NANOS_FIELD: nanos}


def _from_datetime(value: datetime) -> dict[str, int]:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - EPOCH
    seconds = delta.days * 86400 + delta.seconds
    nanos = getattr(value, "nanosecond", None)
    if nanos is None:
        nanos = delta.microseconds * 1000
    return _canonical(seconds, nanos)


def _from_mapping(value: Mapping) -> Optional[dict[str, int]]:
    for seconds_key, nanos_key in _PAIR_NAMES:
        if seconds_key in value and nanos_key in value:
            return _canonical(value[seconds_key], value[nanos_key])
    return None


def _from_object(value: Any) -> Optional[dict[str, int]]:
    for seconds_key, nanos_key in _PAIR_NAMES:
        if hasattr(value, seconds_key) and hasattr(value, nanos_key):
            return _canonical(getattr(value, seconds_key), getattr(value, nanos_key))
    return None


def normalize_timestamp(value: Any) -> Optional[dict[str, int]]:
    """Return ``value`` as ``{"_seconds": int, "_nanoseconds": int}``, or None when absent."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return _from_datetime(value)
    if isinstance(value, Mapping):
        result = _from_mapping(value)
    else:
        result = _from_object(value)
    if result is None:
        raise TypeError(f"Unsupported timestamp value: {value!r}")
    return result
