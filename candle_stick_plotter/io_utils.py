"""I/O utilities for output directories and rendered charts."""
from __future__ import annotations

import logging
import os

from PIL import Image

from .errors import DirectoryCreationError

logger = logging.getLogger(__name__)


def ensure_directory(path: str) -> str:
    """Create ``path`` (and parents) if needed; existing directories are fine."""

    if os.path.isdir(path):
        logger.info("Directory already exists: %s", path)
        return path
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(path, exc.strerror or str(exc)) from exc
    logger.info("Created directory: %s", path)
    return path


def save_image(image: Image.Image, path: str) -> None:
    """Persist the PIL image to disk as PNG."""

    ensure_directory(os.path.dirname(path) or ".")
    image.save(path, format="PNG")
