from .auth import router as auth_router
from .billing import router as billing_router
from .calendar import router as calendar_router
from .clients import router as clients_router
from .dashboard import router as dashboard_router
from .health import router as health_router
from .portal import router as portal_router
from .posts import router as posts_router
from .reports import router as reports_router
from .uploads import router as uploads_router

__all__ = [
    "auth_router",
    "billing_router",
    "calendar_router",
    "clients_router",
    "dashboard_router",
    "health_router",
    "portal_router",
    "posts_router",
    "reports_router",
    "uploads_router",
]
