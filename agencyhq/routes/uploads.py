"""
Upload routes: store a file and hand back its public URL.
"""
import secrets
from pathlib import Path
from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth import get_required_user
from ..config import get_settings
from ..database import get_db
from ..logging_config import get_logger
from ..models.upload import Upload
from ..models.user import User
from ..responses import too_large, validation_error
from ..store import EntityStore

settings = get_settings()
upload_logger = get_logger("uploads")

router = APIRouter(prefix="/api/uploads", tags=["uploads"])


def upload_root() -> Path:
    root = Path(settings.upload_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


@router.post("")
def upload_file(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_required_user),
):
    """Store an uploaded file (logo or post media) and return its public URL."""
    contents = file.file.read(settings.max_upload_bytes + 1)
    if not contents:
        validation_error("Uploaded file is empty", {"field": "file"})
    if len(contents) > settings.max_upload_bytes:
        too_large(f"Uploaded file exceeds {settings.max_upload_bytes} bytes")

    suffix = Path(file.filename or "").suffix.lower()
    stored_name = f"{secrets.token_hex(16)}{suffix}"
    path = upload_root() / stored_name
    path.write_bytes(contents)

    try:
        record = EntityStore(db, Upload).create({
            "user_id": current_user.id,
            "filename": file.filename or stored_name,
            "stored_name": stored_name,
            "file_url": f"{settings.upload_url_prefix.rstrip('/')}/{stored_name}",
            "content_type": file.content_type,
            "size": len(contents),
        })
    except SQLAlchemyError:
        # no row, no file
        path.unlink(missing_ok=True)
        raise
    upload_logger.info("File uploaded", upload_id=record.id, size=record.size, user_id=current_user.id)

    return {
        "id": record.id,
        "file_url": record.file_url,
        "filename": record.filename,
        "content_type": record.content_type,
        "size": record.size,
    }
