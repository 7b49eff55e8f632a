"""Writing edit results to disk for download."""

import logging
import mimetypes
import shutil
import tempfile
import time
from pathlib import Path

from .remote_client import EditResult

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".png"

# mimetypes maps some image types to unusual extensions
_PREFERRED_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}


def extension_for(mime_type: str) -> str:
    """Pick a file extension for a mime type, defaulting to .png."""
    if mime_type in _PREFERRED_EXTENSIONS:
        return _PREFERRED_EXTENSIONS[mime_type]
    return mimetypes.guess_extension(mime_type) or DEFAULT_EXTENSION


def download_filename(prefix: str, mime_type: str, timestamp_ms: int | None = None) -> str:
    """Build a timestamped download filename.

    Args:
        prefix: Filename prefix (e.g. "nano-banana-edit")
        mime_type: Mime type of the image being saved
        timestamp_ms: Epoch milliseconds (defaults to now)

    Returns:
        Filename such as ``nano-banana-edit-1729331400000.png``
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{prefix}-{timestamp_ms}{extension_for(mime_type)}"


DOWNLOAD_DIR_PREFIX = "download-"


def save_result(
    result: EditResult,
    outputs_dir: Path,
    prefix: str,
    timestamp_ms: int | None = None,
) -> Path:
    """Write an edit result for download and return the file path.

    Each call gets its own directory under outputs_dir, so two downloads
    with the same timestamped filename never share a path.
    """
    outputs_dir.mkdir(parents=True, exist_ok=True)
    download_dir = Path(tempfile.mkdtemp(prefix=DOWNLOAD_DIR_PREFIX, dir=outputs_dir))
    save_path = download_dir / download_filename(prefix, result.mime_type, timestamp_ms)
    save_path.write_bytes(result.to_bytes())
    logger.info(f"Saved edit result to {save_path}")
    return save_path


def prune_downloads(outputs_dir: Path, max_age_seconds: int, now: float | None = None) -> int:
    """Delete download directories older than max_age_seconds.

    Args:
        outputs_dir: Directory holding per-download directories
        max_age_seconds: Age after which a download is removed
        now: Current epoch seconds (defaults to time.time())

    Returns:
        Number of download directories removed
    """
    if not outputs_dir.is_dir():
        return 0

    if now is None:
        now = time.time()

    removed = 0
    for entry in outputs_dir.glob(f"{DOWNLOAD_DIR_PREFIX}*"):
        if not entry.is_dir():
            continue
        if now - entry.stat().st_mtime < max_age_seconds:
            continue
        shutil.rmtree(entry, ignore_errors=True)
        removed += 1

    if removed:
        logger.info(f"Removed {removed} expired downloads from {outputs_dir}")
    return removed
