"""
Month calendar: posts bucketed by their scheduled day.
"""
import calendar
from dataclasses import dataclass, field as dc_field
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Tuple

from ..logging_config import timed, views_logger
from .records import field, local_now, parse_date

POST_STATUSES = ("idea", "production", "approved", "scheduled", "posted")
PLATFORMS = ("instagram", "facebook", "tiktok", "linkedin", "twitter")
MEDIA_TYPES = ("image", "video", "carousel")


def scheduled_day(post: Any) -> Optional[date]:
    parsed = parse_date(field(post, "scheduled_date"))
    return parsed.date() if parsed is not None else None


def posts_on(posts: Iterable[Any], day: date) -> List[Any]:
    """Posts scheduled on ``day``. Posts with unparseable dates never match."""
    return [post for post in posts if scheduled_day(post) == day]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


@dataclass(frozen=True)
class DayBucket:
    day: date
    posts: Tuple[Any, ...] = dc_field(default_factory=tuple)
    is_today: bool = False

    def preview(self, limit: int = 3) -> Tuple[Any, ...]:
        return self.posts[:limit]

    def overflow(self, limit: int = 3) -> int:
        return max(len(self.posts) - limit, 0)


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    days: Tuple[DayBucket, ...]
    # empty cells before day 1 in a Sunday-first grid
    leading_blanks: int

    @property
    def total(self) -> int:
        return sum(len(bucket.posts) for bucket in self.days)

    def bucket(self, day: date) -> Optional[DayBucket]:
        if day.year != self.year or day.month != self.month:
            return None
        return self.days[day.day - 1]

    @property
    def previous(self) -> Tuple[int, int]:
        return shift_month(self.year, self.month, -1)

    @property
    def next(self) -> Tuple[int, int]:
        return shift_month(self.year, self.month, 1)

    @classmethod
    @timed(views_logger)
    def build(
        cls,
        posts: Iterable[Any],
        year: int,
        month: int,
        now: Optional[datetime] = None,
    ) -> "CalendarMonth":
        """
        Partition posts into one bucket per day of the month.

        Posts outside the month, or whose scheduled date does not parse,
        appear in no bucket.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be in 1..12, got {month}")

        today = local_now(now).date()
        first_weekday, length = calendar.monthrange(year, month)

        by_day = {}
        for post in posts:
            day = scheduled_day(post)
            if day is not None and day.year == year and day.month == month:
                by_day.setdefault(day.day, []).append(post)

        days = []
        for number in range(1, length + 1):
            day = date(year, month, number)
            days.append(DayBucket(
                day=day,
                posts=tuple(by_day.get(number, ())),
                is_today=day == today,
            ))

        return cls(
            year=year,
            month=month,
            days=tuple(days),
            # monthrange counts Monday as 0
            leading_blanks=(first_weekday + 1) % 7,
        )
