"""Layout and rendering engine for folded label mockups."""

from __future__ import annotations

from .draw_ops import (
    DrawImage,
    DrawOp,
    FillRect,
    Line,
    StrokeRect,
    Text,
    draw_op_to_dict,
)
from .label_types import (
    FinalDimensions,
    FoldGuide,
    FoldType,
    ImageAsset,
    LabelLayout,
    LabelSpec,
)
from .layout import calculate_final_dimensions, calculate_layout
from .renderer import render

__all__ = [
    "DrawImage",
    "DrawOp",
    "FillRect",
    "FinalDimensions",
    "FoldGuide",
    "FoldType",
    "ImageAsset",
    "LabelLayout",
    "LabelSpec",
    "Line",
    "StrokeRect",
    "Text",
    "calculate_final_dimensions",
    "calculate_layout",
    "draw_op_to_dict",
    "render",
]
