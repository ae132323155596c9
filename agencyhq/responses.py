"""
AgencyHQ API Response Utilities
Error envelope shared by every route, plus the raise-helpers routes use.
"""
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import traceback

from .logging_config import api_logger


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def deleted(message: str = "Deleted") -> Dict:
    """Body for a successful DELETE"""
    return {"ok": True, "message": message, "timestamp": _timestamp()}


# ============================================================
# ERRORS
# ============================================================

class ApiException(HTTPException):
    """HTTP error with a machine-readable code and optional details"""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict] = None,
    ):
        self.error_code = error_code or f"HTTP_{status_code}"
        self.details = details
        super().__init__(status_code=status_code, detail=message)


def forbidden(message: str = "Access denied"):
    raise ApiException(403, message, "FORBIDDEN")


def not_found(resource: str = "Resource", id: Any = None):
    message = f"{resource} not found" if id is None else f"{resource} '{id}' not found"
    raise ApiException(404, message, "NOT_FOUND")


def conflict(message: str):
    raise ApiException(409, message, "CONFLICT")


def too_large(message: str):
    raise ApiException(413, message, "FILE_TOO_LARGE")


def validation_error(message: str, details: Optional[Dict] = None):
    raise ApiException(422, message, "VALIDATION_ERROR", details)


def error_body(message: Any, error_code: str, details: Optional[Dict] = None) -> Dict:
    # "detail" mirrors FastAPI's own key so clients can read either
    body = {
        "ok": False,
        "error": message,
        "detail": message,
        "error_code": error_code,
        "timestamp": _timestamp(),
    }
    if details:
        body["details"] = details
    return body


# ============================================================
# EXCEPTION HANDLER
# ============================================================

async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any error as the JSON envelope; unexpected ones become 500"""

    if isinstance(exc, StarletteHTTPException):
        error_code = getattr(exc, "error_code", f"HTTP_{exc.status_code}")
        api_logger.warning(
            f"{request.method} {request.url.path} failed: {exc.detail}",
            status_code=exc.status_code,
            error_code=error_code,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail, error_code, getattr(exc, "details", None)),
            headers=getattr(exc, "headers", None),
        )

    api_logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        error=exc,
        traceback=traceback.format_exc(),
    )
    return JSONResponse(
        status_code=500,
        content=error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )
