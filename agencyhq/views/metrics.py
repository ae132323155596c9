"""
Report metric totals and chart series.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List

from .records import field, number, parse_date

# totals key -> report field
METRIC_FIELDS = {
    "followers": "followers_gained",
    "impressions": "total_impressions",
    "reach": "total_reach",
    "messages": "total_messages",
    "clicks": "bio_link_clicks",
}


@dataclass(frozen=True)
class MetricTotals:
    followers: float = 0
    impressions: float = 0
    reach: float = 0
    messages: float = 0
    clicks: float = 0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ChartPoint:
    date: str
    followers: float
    reach: float
    impressions: float


def sum_metrics(reports: Iterable[Any]) -> MetricTotals:
    """Add up every counter; anything missing counts as zero."""
    totals = dict.fromkeys(METRIC_FIELDS, 0)
    for report in reports:
        for key, name in METRIC_FIELDS.items():
            totals[key] += number(report, name)
    return MetricTotals(**totals)


def metrics_series(reports: Iterable[Any]) -> List[ChartPoint]:
    """Chart points ordered by period start. Reports without a valid start are left out."""
    dated = []
    for report in reports:
        start = parse_date(field(report, "period_start"))
        if start is not None:
            dated.append((start, report))
    dated.sort(key=lambda pair: pair[0])

    return [
        ChartPoint(
            date=start.strftime("%d/%m"),
            followers=number(report, "followers_gained"),
            reach=number(report, "total_reach"),
            impressions=number(report, "total_impressions"),
        )
        for start, report in dated
    ]
