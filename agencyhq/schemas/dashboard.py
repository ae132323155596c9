from pydantic import BaseModel
from typing import List, Optional


class CalendarPostItem(BaseModel):
    id: int
    title: str
    status: str
    platform: Optional[str] = None
    client_id: int
    client_name: str = ""
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    media_url: Optional[str] = None


class CalendarDay(BaseModel):
    date: str
    is_today: bool
    count: int
    posts: List[CalendarPostItem]
    more: int = 0


class MonthRef(BaseModel):
    year: int
    month: int


class CalendarMonthResponse(BaseModel):
    year: int
    month: int
    leading_blanks: int
    total: int
    previous: MonthRef
    next: MonthRef
    days: List[CalendarDay]
    degraded: bool = False


class RecentClient(BaseModel):
    id: int
    company_name: str
    status: str
    logo_url: Optional[str] = None


class DashboardStats(BaseModel):
    active_clients: int
    posts_today_count: int
    scheduled_posts: int
    posted_this_month: int
    posts_today: List[CalendarPostItem]
    recent_clients: List[RecentClient]
    degraded: bool = False
