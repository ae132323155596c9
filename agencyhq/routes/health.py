"""
AgencyHQ Health Check Routes
"""
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import psutil
from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..config import get_settings
from ..database import engine

settings = get_settings()

router = APIRouter(prefix="/api/health", tags=["health"])

START_TIME = datetime.now(timezone.utc)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_uptime() -> str:
    """Get uptime as human-readable string"""
    delta = datetime.now(timezone.utc) - START_TIME
    hours, remainder = divmod(delta.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if delta.days > 0:
        return f"{delta.days}d {hours}h {minutes}m"
    elif hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    else:
        return f"{minutes}m {seconds}s"


def check_database() -> Dict[str, Any]:
    """Check the record store answers a trivial query"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "healthy", "dialect": engine.dialect.name}
    except SQLAlchemyError as e:
        return {"status": "unhealthy", "error": str(e)}


def check_storage() -> Dict[str, Any]:
    """Check free space where uploads are written"""
    upload_path = Path(settings.upload_dir)
    probe = upload_path if upload_path.exists() else Path(".")
    try:
        usage = psutil.disk_usage(str(probe.resolve()))
    except OSError as e:
        return {"status": "unhealthy", "error": str(e)}

    free_percent = usage.free / usage.total * 100
    status = "healthy" if free_percent > 10 else "warning" if free_percent > 5 else "critical"
    return {
        "status": status,
        "path": str(upload_path),
        "exists": upload_path.exists(),
        "free_gb": round(usage.free / (1024**3), 2),
        "free_percent": round(free_percent, 1),
    }


def check_system() -> Dict[str, Any]:
    """Check system resources"""
    memory = psutil.virtual_memory()
    return {
        "status": "healthy" if memory.percent < 90 else "warning",
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": memory.percent,
        "python_version": sys.version.split()[0],
    }


@router.get("")
@router.get("/live")
def health_live():
    """Liveness probe - is the service running?"""
    return {
        "ok": True,
        "status": "alive",
        "environment": settings.environment,
        "uptime": get_uptime(),
        "timestamp": _timestamp(),
    }


@router.get("/ready")
def health_ready():
    """Readiness probe - can the service reach its store and storage?"""
    db = check_database()
    storage = check_storage()

    all_healthy = db["status"] == "healthy" and storage["status"] in ["healthy", "warning"]

    return {
        "ok": all_healthy,
        "status": "ready" if all_healthy else "not_ready",
        "checks": {
            "database": db["status"],
            "storage": storage["status"],
        },
        "timestamp": _timestamp(),
    }


@router.get("/full")
def health_full():
    """Detailed status of all components."""
    db = check_database()
    storage = check_storage()
    system = check_system()

    statuses = [db["status"], storage["status"], system["status"]]
    if "unhealthy" in statuses:
        overall = "unhealthy"
    elif "warning" in statuses or "critical" in statuses:
        overall = "degraded"
    else:
        overall = "healthy"

    return {
        "ok": overall == "healthy",
        "status": overall,
        "uptime": get_uptime(),
        "started_at": START_TIME.isoformat().replace("+00:00", "Z"),
        "checks": {
            "database": db,
            "storage": storage,
            "system": system,
        },
        "timestamp": _timestamp(),
    }
