"""
Screen filters. Every filter keeps the source order and returns an empty
list when nothing matches.
"""
from datetime import datetime
from typing import Any, Iterable, List, Optional

from .billing import derive_status
from .records import field, matches, parse_date


def filter_posts(posts: Iterable[Any], client_id: Any = None, status: Optional[str] = None) -> List[Any]:
    return [
        post for post in posts
        if matches(field(post, "client_id"), client_id) and matches(field(post, "status"), status)
    ]


def filter_clients(clients: Iterable[Any], search: Optional[str] = None, status: Optional[str] = None) -> List[Any]:
    """Case-insensitive search on company name or login email, plus status."""
    needle = (search or "").strip().lower()
    result = []
    for client in clients:
        if not matches(field(client, "status"), status):
            continue
        if needle:
            name = str(field(client, "company_name", "")).lower()
            email = str(field(client, "user_email", "")).lower()
            if needle not in name and needle not in email:
                continue
        result.append(client)
    return result


def filter_reports(
    reports: Iterable[Any],
    client_id: Any = None,
    start: Any = None,
    end: Any = None,
) -> List[Any]:
    """
    Reports for a client whose whole period lies inside [start, end].

    A missing or unparseable bound disables that side of the range. A report
    whose own period does not parse never matches an active bound.
    """
    range_start = parse_date(start)
    range_end = parse_date(end)
    result = []
    for report in reports:
        if not matches(field(report, "client_id"), client_id):
            continue
        if range_start is not None:
            period_start = parse_date(field(report, "period_start"))
            if period_start is None or period_start < range_start:
                continue
        if range_end is not None:
            period_end = parse_date(field(report, "period_end"))
            if period_end is None or period_end > range_end:
                continue
        result.append(report)
    return result


def filter_billings(
    billings: Iterable[Any],
    client_id: Any = None,
    status: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[Any]:
    """Status is matched against the derived (display) status."""
    return [
        billing for billing in billings
        if matches(field(billing, "client_id"), client_id)
        and matches(derive_status(billing, now), status)
    ]
