"""ReportLab implementation of the drawing surface."""

from __future__ import annotations

from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas

from .base import DrawingSurface
from .common import PAGE_HEIGHT_PX, PAGE_SIZE, PT_PER_PX
from .draw_ops import DrawImage, FillRect, Line, StrokeRect, Text, TextAlign
from .fonts import FontRegistry, default_registry


def new_page_canvas(target) -> canvas.Canvas:
    """Return an A4 landscape canvas whose user unit is one page pixel."""

    canvas_obj = canvas.Canvas(target, pagesize=PAGE_SIZE)
    canvas_obj.scale(PT_PER_PX, PT_PER_PX)
    return canvas_obj


class ReportLabSurface(DrawingSurface):
    """Paint draw operations onto a ReportLab canvas.

    Draw operations use a top-left origin; ReportLab's origin is bottom-left,
    so every y coordinate is flipped against the page height.
    """

    def __init__(
        self,
        canvas_obj: canvas.Canvas,
        fonts: FontRegistry | None = None,
        page_height: float = PAGE_HEIGHT_PX,
    ) -> None:
        self._canvas = canvas_obj
        self._fonts = fonts or default_registry()
        self._page_height = page_height

    def _flip(self, y: float) -> float:
        return self._page_height - y

    def fill_rect(self, op: FillRect) -> None:
        self._canvas.saveState()
        self._canvas.setFillColor(HexColor(op.color))
        self._canvas.rect(
            op.x,
            self._flip(op.y + op.height),
            op.width,
            op.height,
            stroke=0,
            fill=1,
        )
        self._canvas.restoreState()

    def stroke_rect(self, op: StrokeRect) -> None:
        self._canvas.saveState()
        self._canvas.setStrokeColor(HexColor(op.color))
        self._canvas.setLineWidth(op.line_width)
        self._canvas.rect(
            op.x,
            self._flip(op.y + op.height),
            op.width,
            op.height,
            stroke=1,
            fill=0,
        )
        self._canvas.restoreState()

    def line(self, op: Line) -> None:
        self._canvas.saveState()
        self._canvas.setStrokeColor(HexColor(op.color))
        self._canvas.setLineWidth(op.line_width)
        self._canvas.line(op.x1, self._flip(op.y1), op.x2, self._flip(op.y2))
        self._canvas.restoreState()

    def text(self, op: Text) -> None:
        self._canvas.saveState()
        self._canvas.setFillColor(HexColor(op.color))
        self._canvas.setFont(self._fonts.font_name(op.style), op.style.size_px)
        self._canvas.translate(op.x, self._flip(op.y))
        if op.rotation_deg:
            self._canvas.rotate(op.rotation_deg)
        if op.align is TextAlign.CENTER:
            self._canvas.drawCentredString(0, 0, op.content)
        elif op.align is TextAlign.RIGHT:
            self._canvas.drawRightString(0, 0, op.content)
        else:
            self._canvas.drawString(0, 0, op.content)
        self._canvas.restoreState()

    def image(self, op: DrawImage) -> None:
        self._canvas.drawImage(
            op.image.reader,
            op.x,
            self._flip(op.y + op.height),
            width=op.width,
            height=op.height,
            mask="auto",
        )
