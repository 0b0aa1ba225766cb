"""
Local-disk storage for uploaded media.

Uploaded files are checked against ``ALLOWED_TYPES`` before anything
touches the disk, renamed to ``<epoch ms>-<random><ext>`` and written
into the configured upload directory.  The directory is served
read-only under ``/uploads`` by the application.
"""

import logging
import os
import random
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from .errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

ALLOWED_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "video/mp4",
    "video/quicktime",
    "video/mov",
}

PUBLIC_PREFIX = "/uploads"


@dataclass
class StoredFile:
    """A file written to the upload directory."""

    filename: str
    filetype: str
    filepath: str


def ensure_allowed(upload: UploadFile) -> None:
    """Reject files whose MIME type is not in ``ALLOWED_TYPES``."""
    if upload.content_type not in ALLOWED_TYPES:
        logger.warning("Refused upload %r of type %s", upload.filename, upload.content_type)
        raise BadRequestError("Unsupported file format")


def generate_filename(original_name: Optional[str]) -> str:
    """Build a unique-enough name from the clock and a random suffix."""
    extension = os.path.splitext(original_name or "")[1]
    suffix = random.randint(0, 10**9)
    return f"{int(time.time() * 1000)}-{suffix}{extension}"


def save_upload(upload: UploadFile, upload_dir: str) -> StoredFile:
    """Validate and write ``upload`` to ``upload_dir``.

    Raises ``BadRequestError`` for a disallowed type; in that case
    nothing is written.
    """
    ensure_allowed(upload)
    filename = generate_filename(upload.filename)
    destination = Path(upload_dir) / filename
    upload.file.seek(0)
    with destination.open("wb") as fh:
        shutil.copyfileobj(upload.file, fh)
    logger.info("Stored upload %s (%s)", filename, upload.content_type)
    return StoredFile(
        filename=filename,
        filetype=upload.content_type,
        filepath=f"{PUBLIC_PREFIX}/{filename}",
    )


def locate(upload_dir: str, filename: str) -> Path:
    """Return the on-disk path of a stored file.

    Names that would escape the upload directory, and files that do not
    exist, raise ``NotFoundError``.
    """
    if not filename or filename in {".", ".."} or "/" in filename or "\\" in filename:
        raise NotFoundError("File not found")
    path = Path(upload_dir) / filename
    if not path.is_file():
        raise NotFoundError("File not found")
    return path


def filename_from_path(filepath: Optional[str]) -> Optional[str]:
    """Extract the stored filename from a ``/uploads/<name>`` path."""
    if not filepath:
        return None
    return filepath.rsplit("/", 1)[-1]
