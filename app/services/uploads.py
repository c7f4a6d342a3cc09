"""Validation and disk storage of uploaded evidence documents."""
import logging
import secrets
import time
from pathlib import Path
from typing import Optional

from app.core.config import settings
from app.core.errors import BadRequestException, PayloadTooLargeException

logger = logging.getLogger(__name__)

MIME_TYPES = {
    "pdf": {"application/pdf"},
    "doc": {"application/msword"},
    "docx": {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"},
    "txt": {"text/plain"},
}


def file_extension(filename: str) -> str:
    return Path(filename).suffix.lower().lstrip(".")


def validate_upload(filename: Optional[str], content_type: Optional[str], size: int) -> str:
    """Check an upload before anything is written.

    Returns the normalised extension. Raises ``BadRequestException`` for a
    missing name, an extension outside the allowed set or a MIME type that
    does not match the extension, and ``PayloadTooLargeException`` when the
    file exceeds ``MAX_UPLOAD_SIZE``.
    """
    if not filename:
        raise BadRequestException(detail="No file uploaded")

    extension = file_extension(filename)
    allowed = settings.allowed_upload_extensions
    if extension not in allowed:
        raise BadRequestException(
            detail=f"Only {', '.join(ext.upper() for ext in allowed)} files are allowed"
        )

    mime_type = (content_type or "").split(";")[0].strip().lower()
    if mime_type not in MIME_TYPES.get(extension, set()):
        raise BadRequestException(
            detail=f"File type '{mime_type or 'unknown'}' does not match .{extension}"
        )

    if size > settings.MAX_UPLOAD_SIZE:
        raise PayloadTooLargeException(
            detail=f"File exceeds the {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB limit"
        )
    if size == 0:
        raise BadRequestException(detail="Uploaded file is empty")

    return extension


def store_upload(content: bytes, filename: str) -> Path:
    """Write the file under ``UPLOAD_DIR`` with a unique name and return its path."""
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    unique_name = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}.{file_extension(filename)}"
    path = upload_dir / unique_name
    path.write_bytes(content)

    logger.info(f"Stored upload {filename} as {path} ({len(content)} bytes)")
    return path
