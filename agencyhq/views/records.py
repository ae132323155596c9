"""
Record access helpers shared by the view builders.

Views accept ORM rows, pydantic models or plain dicts interchangeably, and
every date they read comes from a free-form string that may be malformed.
"""
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, Optional

# Filter value that disables a predicate
ALL = "all"


def field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a dict-like or attribute-style record."""
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def number(record: Any, name: str) -> float:
    """Numeric field with missing, null or non-numeric values counted as zero."""
    value = field(record, name, 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse an ISO date or datetime into a naive local datetime.

    Returns None for anything that does not parse; callers treat that as
    "matches nothing".
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time())
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def local_now(now: Optional[datetime] = None) -> datetime:
    """Normalise a reference time the same way parse_date normalises stored dates."""
    if now is None:
        return datetime.now()
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def matches(value: Any, wanted: Any) -> bool:
    """Equality predicate where None or "all" means no constraint."""
    if wanted is None or wanted == ALL:
        return True
    return value == wanted or str(value) == str(wanted)
