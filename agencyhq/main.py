"""
AgencyHQ API - FastAPI application entry point.
"""
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .database import engine, Base
from .limiter import limiter
from .logging_config import api_logger
from .middleware import SecurityHeadersMiddleware, RequestLoggingMiddleware
from .responses import api_exception_handler
from .routes import (
    auth_router,
    billing_router,
    calendar_router,
    clients_router,
    dashboard_router,
    health_router,
    portal_router,
    posts_router,
    reports_router,
    uploads_router,
)

settings = get_settings()

# Create tables (in production, use Alembic migrations instead)
Base.metadata.create_all(bind=engine)

upload_dir = Path(settings.upload_dir)
upload_dir.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    api_logger.info(
        f"{settings.app_name} starting",
        environment=settings.environment,
        database=engine.dialect.name,
    )
    yield
    api_logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    description="Backend API for the AgencyHQ social media agency dashboard",
    version="1.0.0",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, api_exception_handler)
app.add_exception_handler(Exception, api_exception_handler)

app.add_middleware(SecurityHeadersMiddleware)

# Request logging middleware (only in debug mode)
if settings.debug:
    app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=[
        "Authorization",
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=3600,
)

# Routes
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(clients_router)
app.include_router(posts_router)
app.include_router(calendar_router)
app.include_router(reports_router)
app.include_router(billing_router)
app.include_router(portal_router)
app.include_router(uploads_router)
app.include_router(health_router)

app.mount(settings.upload_url_prefix, StaticFiles(directory=str(upload_dir)), name="uploads")


@app.get("/")
def root():
    return {
        "message": "AgencyHQ API",
        "docs": "/api/docs" if settings.debug else "Disabled in production",
    }


def run():
    uvicorn.run("agencyhq.main:app", host="0.0.0.0", port=8000, log_level="info", reload=settings.debug)


if __name__ == "__main__":
    run()
