"""Draw operations emitted by the renderer.

Coordinates are page pixels with the origin at the top-left corner and y
growing downward. Text ``y`` is the alphabetic baseline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Union

from .label_types import ImageAsset


class TextAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FontFamily(StrEnum):
    SANS = "sans"
    MONO = "mono"


@dataclass(frozen=True)
class TextStyle:
    family: FontFamily
    size_px: float
    bold: bool = False


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class StrokeRect:
    x: float
    y: float
    width: float
    height: float
    color: str
    line_width: float


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    line_width: float


@dataclass(frozen=True)
class Text:
    content: str
    x: float
    y: float
    style: TextStyle
    align: TextAlign
    color: str
    # Counter-clockwise, around the anchor point.
    rotation_deg: float = 0.0


@dataclass(frozen=True)
class DrawImage:
    image: ImageAsset
    x: float
    y: float
    width: float
    height: float


DrawOp = Union[FillRect, StrokeRect, Line, Text, DrawImage]

_OP_NAMES: dict[type, str] = {
    FillRect: "fill_rect",
    StrokeRect: "stroke_rect",
    Line: "line",
    Text: "text",
    DrawImage: "image",
}


def draw_op_to_dict(op: DrawOp) -> dict[str, Any]:
    """Return a JSON-ready mapping for ``op``."""

    if isinstance(op, DrawImage):
        return {
            "op": _OP_NAMES[DrawImage],
            "x": op.x,
            "y": op.y,
            "width": op.width,
            "height": op.height,
            "image": {
                "width_px": op.image.width_px,
                "height_px": op.image.height_px,
            },
        }
    if isinstance(op, Text):
        return {
            "op": _OP_NAMES[Text],
            "content": op.content,
            "x": op.x,
            "y": op.y,
            "font": {
                "family": op.style.family.value,
                "size_px": op.style.size_px,
                "bold": op.style.bold,
            },
            "align": op.align.value,
            "color": op.color,
            "rotation_deg": op.rotation_deg,
        }

    payload: dict[str, Any] = {"op": _OP_NAMES[type(op)]}
    payload.update(vars(op))
    return payload
