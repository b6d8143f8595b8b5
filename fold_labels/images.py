"""Decode uploaded label artwork into render-ready image assets."""

from __future__ import annotations

import logging
import mimetypes
from io import BytesIO
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader

from .label_types import ImageAsset

logger = logging.getLogger(__name__)


class InvalidImageError(ValueError):
    """Raised when artwork cannot be decoded as an image."""


def load_image(data: bytes) -> ImageAsset:
    """Fully decode ``data`` and wrap it for drawing."""

    if not data:
        raise InvalidImageError("Please upload an image file.")
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (OSError, Image.DecompressionBombError) as exc:
        raise InvalidImageError(f"Could not decode image: {exc}") from exc

    width, height = image.size
    logger.debug("Decoded %s image %dx%d px", image.format, width, height)
    return ImageAsset(reader=ImageReader(image), width_px=width, height_px=height)


def load_image_file(path: str | Path) -> ImageAsset:
    """Load artwork from ``path``; files not typed as ``image/*`` are rejected."""

    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidImageError(
            f"Invalid file type for '{path.name}'. Please upload an image file."
        )
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InvalidImageError(f"Could not read image '{path}': {exc}") from exc
    return load_image(data)
