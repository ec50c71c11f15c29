"""Write rendered files into the output tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import NotWritableError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> bool:
    """Make sure a directory exists and is writable.

    Returns whether the directory already existed.
    """
    path = Path(path)
    if path.exists():
        if not path.is_dir():
            raise NotWritableError(f"expected {path} to be a directory")
        if not os.access(path, os.W_OK | os.X_OK):
            raise NotWritableError(f"directory {path} is not writable")
        return True

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise NotWritableError(f"unable to create directory {path}: {exc}") from exc
    return False


def write_file(destination: Path, content: bytes) -> None:
    """Write content to destination, replacing any existing file."""
    destination = Path(destination)
    ensure_dir(destination.parent)
    try:
        destination.write_bytes(content)
    except OSError as exc:
        raise NotWritableError(f"unable to write {destination}: {exc}") from exc
    logger.debug("Wrote %s (%d bytes)", destination, len(content))
