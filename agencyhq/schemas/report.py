from pydantic import BaseModel
from typing import List, Optional


class ReportBase(BaseModel):
    period_start: str
    period_end: str
    followers_gained: int = 0
    total_impressions: int = 0
    total_reach: int = 0
    total_messages: int = 0
    bio_link_clicks: int = 0
    engagement_rate: float = 0
    notes: Optional[str] = None


class ReportCreate(ReportBase):
    client_id: int


class ReportUpdate(BaseModel):
    client_id: Optional[int] = None
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    followers_gained: Optional[int] = None
    total_impressions: Optional[int] = None
    total_reach: Optional[int] = None
    total_messages: Optional[int] = None
    bio_link_clicks: Optional[int] = None
    engagement_rate: Optional[float] = None
    notes: Optional[str] = None


class ReportResponse(BaseModel):
    id: int
    client_id: int
    client_name: str = ""
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    followers_gained: Optional[int] = None
    total_impressions: Optional[int] = None
    total_reach: Optional[int] = None
    total_messages: Optional[int] = None
    bio_link_clicks: Optional[int] = None
    engagement_rate: Optional[float] = None
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class MetricTotalsResponse(BaseModel):
    followers: float
    impressions: float
    reach: float
    messages: float
    clicks: float


class ChartPointResponse(BaseModel):
    date: str
    followers: float
    reach: float
    impressions: float


class ReportSummary(BaseModel):
    start: str
    end: str
    reports: List[ReportResponse]
    totals: MetricTotalsResponse
    chart: List[ChartPointResponse]
    degraded: bool = False
