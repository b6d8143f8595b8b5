"""Page export helpers for label designs."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

import fitz

from .common import DPI, JPEG_QUALITY
from .fonts import FontRegistry
from .label_data import download_filename
from .label_types import ImageAsset, LabelSpec
from .renderer import render
from .surface import ReportLabSurface, new_page_canvas

logger = logging.getLogger(__name__)

RASTER_FORMATS = {"png": "png", "jpg": "jpeg", "jpeg": "jpeg"}
EXPORT_FORMATS = {"pdf", *RASTER_FORMATS}


def render_pdf(
    spec: LabelSpec,
    image: ImageAsset | None = None,
    fonts: FontRegistry | None = None,
) -> bytes:
    """Return a single-page A4 landscape PDF of the design."""

    buffer = BytesIO()
    canvas_obj = new_page_canvas(buffer)
    ReportLabSurface(canvas_obj, fonts).execute(render(spec, image))
    canvas_obj.showPage()
    canvas_obj.save()
    return buffer.getvalue()


def render_raster(
    spec: LabelSpec,
    image: ImageAsset | None = None,
    fmt: str = "png",
    quality: int = JPEG_QUALITY,
    fonts: FontRegistry | None = None,
) -> bytes:
    """Return the page as PNG or JPEG bytes at 96 DPI (1123 x 794 px)."""

    output = RASTER_FORMATS.get(fmt.lower())
    if output is None:
        raise ValueError(f"Unsupported raster format '{fmt}'.")

    pdf_bytes = render_pdf(spec, image, fonts)
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        page = doc.load_page(0)
        pix = page.get_pixmap(dpi=DPI)
        logger.debug("Rasterized page to %dx%d px", pix.width, pix.height)
        if output == "jpeg":
            return pix.tobytes("jpeg", jpg_quality=quality)
        return pix.tobytes("png")


def export_design(
    output_path: str | None,
    spec: LabelSpec,
    image: ImageAsset | None = None,
    fmt: str | None = None,
) -> str:
    """Write the design to ``output_path`` and return a status message.

    The format comes from ``fmt`` or the file suffix; without a path the file
    is named after the title as a JPEG.
    """

    if not output_path:
        output_path = download_filename(spec.title, (fmt or "jpg").lower())
    path = Path(output_path)
    key = (fmt or path.suffix.lstrip(".") or "jpg").lower()
    if key not in EXPORT_FORMATS:
        available = ", ".join(sorted(EXPORT_FORMATS))
        raise ValueError(
            f"Unknown export format '{key}'. Available formats: {available}"
        )

    if key == "pdf":
        payload = render_pdf(spec, image)
    else:
        payload = render_raster(spec, image, key)

    with open(path, "wb") as handle:
        handle.write(payload)

    return f"Wrote {path}"
