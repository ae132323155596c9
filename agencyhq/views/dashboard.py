"""
Agency home screen summary.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional, Tuple

from .calendar import posts_on, scheduled_day
from .records import field, local_now


@dataclass(frozen=True)
class DashboardSummary:
    active_clients: int
    posts_today: Tuple[Any, ...]
    scheduled_posts: int
    posted_this_month: int
    recent_clients: Tuple[Any, ...]

    @classmethod
    def build(
        cls,
        clients: Iterable[Any],
        posts: Iterable[Any],
        now: Optional[datetime] = None,
        recent_limit: int = 5,
    ) -> "DashboardSummary":
        clients = list(clients)
        posts = list(posts)
        today = local_now(now).date()

        posted_this_month = 0
        for post in posts:
            if field(post, "status") != "posted":
                continue
            day = scheduled_day(post)
            if day is not None and day.year == today.year and day.month == today.month:
                posted_this_month += 1

        return cls(
            active_clients=sum(1 for c in clients if field(c, "status") == "active"),
            posts_today=tuple(posts_on(posts, today)),
            scheduled_posts=sum(1 for p in posts if field(p, "status") == "scheduled"),
            posted_this_month=posted_this_month,
            recent_clients=tuple(clients[:recent_limit]),
        )
