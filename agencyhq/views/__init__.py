"""
View aggregator: derived views computed from entity collections.

Nothing here touches the database. Each builder takes the collections a
screen loaded plus the user's filter criteria and returns a fresh value.
"""
from .billing import BillingSummary, derive_status
from .calendar import CalendarMonth, DayBucket, posts_on
from .dashboard import DashboardSummary
from .filters import filter_billings, filter_clients, filter_posts, filter_reports
from .lookup import ClientIndex, count_posts_by_client
from .metrics import ChartPoint, MetricTotals, metrics_series, sum_metrics
from .records import ALL, parse_date

__all__ = [
    "ALL",
    "BillingSummary",
    "CalendarMonth",
    "ChartPoint",
    "ClientIndex",
    "DashboardSummary",
    "DayBucket",
    "MetricTotals",
    "count_posts_by_client",
    "derive_status",
    "filter_billings",
    "filter_clients",
    "filter_posts",
    "filter_reports",
    "metrics_series",
    "parse_date",
    "posts_on",
    "sum_metrics",
]
