"""
Storage of uploaded files on the local filesystem.

Files are written to ``settings.upload_dir`` under a generated name
``<field>-<epoch millis>-<random><ext>`` so that concurrent uploads of
files with the same original name never collide.  Records only keep
the public path (``/uploads/<name>``); the directory itself is served
statically by the application.
"""

import logging
import os
import secrets
import shutil
import time
from pathlib import Path
from typing import BinaryIO, Optional

from .config import settings


logger = logging.getLogger(__name__)


def get_upload_dir() -> Path:
    return Path(settings.upload_dir)


def ensure_upload_dir() -> Path:
    """Create the upload directory if it does not exist yet."""
    upload_dir = get_upload_dir()
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def generate_filename(original_name: str, field_name: str = "image") -> str:
    """Build a collision-resistant name keeping the original extension."""
    suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    ext = os.path.splitext(os.path.basename(original_name or ""))[1]
    return f"{field_name}-{suffix}{ext}"


def save_upload(fileobj: BinaryIO, original_name: str, field_name: str = "image") -> str:
    """Write ``fileobj`` into the upload directory.

    Returns the public URL path of the stored file, e.g.
    ``/uploads/image-1717171717171-42.png``.
    """
    upload_dir = ensure_upload_dir()
    filename = generate_filename(original_name, field_name)
    target = upload_dir / filename
    with open(target, "wb") as out:
        shutil.copyfileobj(fileobj, out)
    logger.info("Stored upload %s as %s", original_name, filename)
    return f"{settings.upload_url_prefix}/{filename}"


def delete_upload(url_path: Optional[str]) -> None:
    """Remove a file previously stored by ``save_upload``.

    Missing files are ignored.
    """
    if not url_path:
        return
    target = get_upload_dir() / os.path.basename(url_path)
    try:
        target.unlink()
    except FileNotFoundError:
        return
    logger.info("Removed upload %s", target.name)
