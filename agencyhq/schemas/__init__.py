from .client import ClientCreate, ClientUpdate, ClientResponse, ClientListItem, ClientProfile
from .post import PostCreate, PostUpdate, PostResponse, StatusUpdate, CommentCreate
from .report import ReportCreate, ReportUpdate, ReportResponse, ReportSummary
from .billing import BillingCreate, BillingUpdate, BillingResponse, BillingSummaryResponse
from .dashboard import DashboardStats, CalendarMonthResponse

__all__ = [
    "ClientCreate", "ClientUpdate", "ClientResponse", "ClientListItem", "ClientProfile",
    "PostCreate", "PostUpdate", "PostResponse", "StatusUpdate", "CommentCreate",
    "ReportCreate", "ReportUpdate", "ReportResponse", "ReportSummary",
    "BillingCreate", "BillingUpdate", "BillingResponse", "BillingSummaryResponse",
    "DashboardStats", "CalendarMonthResponse",
]
