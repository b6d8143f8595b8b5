"""Compose the draw operations for a folded label page."""

from __future__ import annotations

from .common import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    HEIGHT_LABEL_GAP_PX,
    IMAGE_INSET_PX,
    MARKING_FONT_SIZE,
    MARKING_GAP_PX,
    MARKING_LABEL_GAP_PX,
    MARKING_TICK_PX,
    MARKING_WIDTH_PX,
    META_BASELINES_PX,
    META_FONT_SIZE,
    OUTLINE_COLOR,
    OUTLINE_WIDTH_PX,
    PAGE_HEIGHT_PX,
    PAGE_MARGIN_PX,
    PAGE_WIDTH_PX,
    PLACEHOLDER_FILL,
    PLACEHOLDER_FONT_SIZE,
    PLACEHOLDER_TEXT,
    PLACEHOLDER_TEXT_COLOR,
    TITLE_BASELINE_PX,
    TITLE_FONT_SIZE,
)
from .draw_ops import (
    DrawImage,
    DrawOp,
    FillRect,
    FontFamily,
    Line,
    StrokeRect,
    Text,
    TextAlign,
    TextStyle,
)
from .label_types import GuideAxis, ImageAsset, LabelLayout, LabelSpec, Rect
from .layout import layout_for_spec
from .utils import centered_rect, format_inches, inches_to_pixels

TITLE_STYLE = TextStyle(FontFamily.SANS, TITLE_FONT_SIZE, bold=True)
META_STYLE = TextStyle(FontFamily.MONO, META_FONT_SIZE, bold=True)
PLACEHOLDER_STYLE = TextStyle(FontFamily.SANS, PLACEHOLDER_FONT_SIZE)
MARKING_STYLE = TextStyle(FontFamily.MONO, MARKING_FONT_SIZE, bold=True)


def render(spec: LabelSpec, image: ImageAsset | None = None) -> list[DrawOp]:
    """Return the ordered draw operations for ``spec`` on the A4 page.

    The layout is derived from ``spec`` on every call. ``image`` is only
    referenced by the returned ops, never copied or retained.
    """

    layout = layout_for_spec(spec)
    label = label_rect(layout)
    image_area = image_rect(layout, label)

    ops: list[DrawOp] = [
        FillRect(0, 0, PAGE_WIDTH_PX, PAGE_HEIGHT_PX, BACKGROUND_COLOR),
        _stroke(label),
        _stroke(image_area),
    ]
    ops.extend(_image_ops(image_area, image))
    ops.extend(_fold_guide_ops(layout, label))
    ops.extend(_heading_ops(spec, layout))
    ops.extend(_width_marking_ops(layout, label))
    ops.extend(_height_marking_ops(layout, label))
    return ops


def label_rect(layout: LabelLayout) -> Rect:
    """Return the final label rectangle centered on the page."""

    return centered_rect(
        inches_to_pixels(layout.final.width_in),
        inches_to_pixels(layout.final.height_in),
        PAGE_WIDTH_PX,
        PAGE_HEIGHT_PX,
    )


def image_rect(layout: LabelLayout, label: Rect) -> Rect:
    return Rect(
        label.x + inches_to_pixels(layout.image_offset_x_in),
        label.y + inches_to_pixels(layout.image_offset_y_in),
        inches_to_pixels(layout.image_width_in),
        inches_to_pixels(layout.image_height_in),
    )


def _stroke(rect: Rect) -> StrokeRect:
    return StrokeRect(
        rect.x,
        rect.y,
        rect.width,
        rect.height,
        OUTLINE_COLOR,
        OUTLINE_WIDTH_PX,
    )


def _image_ops(area: Rect, image: ImageAsset | None) -> list[DrawOp]:
    inner = area.inset(IMAGE_INSET_PX)
    if image is not None:
        return [DrawImage(image, inner.x, inner.y, inner.width, inner.height)]

    center_x, center_y = area.center
    return [
        FillRect(inner.x, inner.y, inner.width, inner.height, PLACEHOLDER_FILL),
        Text(
            PLACEHOLDER_TEXT,
            center_x,
            center_y,
            PLACEHOLDER_STYLE,
            TextAlign.CENTER,
            PLACEHOLDER_TEXT_COLOR,
        ),
    ]


def _fold_guide_ops(layout: LabelLayout, label: Rect) -> list[DrawOp]:
    ops: list[DrawOp] = []
    for guide in layout.guides:
        offset = inches_to_pixels(guide.offset_in)
        if guide.axis is GuideAxis.HORIZONTAL:
            y = label.y + offset
            ops.append(
                Line(label.x, y, label.right, y, OUTLINE_COLOR, OUTLINE_WIDTH_PX)
            )
        else:
            x = label.x + offset
            ops.append(
                Line(x, label.y, x, label.bottom, OUTLINE_COLOR, OUTLINE_WIDTH_PX)
            )
    return ops


def _heading_ops(spec: LabelSpec, layout: LabelLayout) -> list[DrawOp]:
    right_margin = PAGE_WIDTH_PX - PAGE_MARGIN_PX
    meta_lines = (
        f'Final Width: {format_inches(layout.final.width_in)}"',
        f'Final Height: {format_inches(layout.final.height_in)}"',
        f"Fold Type: {layout.fold_type.value}",
    )

    ops: list[DrawOp] = [
        Text(
            spec.title,
            PAGE_MARGIN_PX,
            TITLE_BASELINE_PX,
            TITLE_STYLE,
            TextAlign.LEFT,
            OUTLINE_COLOR,
        )
    ]
    for line, baseline in zip(meta_lines, META_BASELINES_PX):
        ops.append(
            Text(line, right_margin, baseline, META_STYLE, TextAlign.RIGHT, OUTLINE_COLOR)
        )
    return ops


def _marking_line(x1: float, y1: float, x2: float, y2: float) -> Line:
    return Line(x1, y1, x2, y2, ACCENT_COLOR, MARKING_WIDTH_PX)


def _width_marking_ops(layout: LabelLayout, label: Rect) -> list[DrawOp]:
    y = label.bottom + MARKING_GAP_PX
    tick = MARKING_TICK_PX
    center_x, _ = label.center
    return [
        _marking_line(label.x, y, label.right, y),
        _marking_line(label.x, y - tick, label.x, y + tick),
        _marking_line(label.right, y - tick, label.right, y + tick),
        Text(
            f'{format_inches(layout.final.width_in)}"',
            center_x,
            y + MARKING_LABEL_GAP_PX,
            MARKING_STYLE,
            TextAlign.CENTER,
            ACCENT_COLOR,
        ),
    ]


def _height_marking_ops(layout: LabelLayout, label: Rect) -> list[DrawOp]:
    x = label.x - MARKING_GAP_PX
    tick = MARKING_TICK_PX
    _, center_y = label.center
    return [
        _marking_line(x, label.y, x, label.bottom),
        _marking_line(x - tick, label.y, x + tick, label.y),
        _marking_line(x - tick, label.bottom, x + tick, label.bottom),
        Text(
            f'{format_inches(layout.final.height_in)}"',
            x - HEIGHT_LABEL_GAP_PX,
            center_y,
            MARKING_STYLE,
            TextAlign.CENTER,
            ACCENT_COLOR,
            rotation_deg=90.0,
        ),
    ]
