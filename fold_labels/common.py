"""Shared constants for the folded label page layout."""

from __future__ import annotations

# A4 landscape at 96 DPI (11.69" x 8.27").
DPI = 96
PAGE_WIDTH_PX = 1123
PAGE_HEIGHT_PX = 794

# ReportLab works in points; one CSS pixel is 0.75 pt.
PT_PER_PX = 72 / DPI
PAGE_SIZE = (PAGE_WIDTH_PX * PT_PER_PX, PAGE_HEIGHT_PX * PT_PER_PX)

FLAP_IN = 0.25
IMAGE_PADDING_IN = 0.10
IMAGE_OFFSET_IN = FLAP_IN + IMAGE_PADDING_IN
IMAGE_INSET_PX = 2

BACKGROUND_COLOR = "#f8fafc"
OUTLINE_COLOR = "#000000"
PLACEHOLDER_FILL = "#e2e8f0"
PLACEHOLDER_TEXT_COLOR = "#64748b"
ACCENT_COLOR = "#ef4444"

OUTLINE_WIDTH_PX = 1.33  # 1pt
MARKING_WIDTH_PX = 1.0

TITLE_FONT_SIZE = 36
META_FONT_SIZE = 16
PLACEHOLDER_FONT_SIZE = 16
MARKING_FONT_SIZE = 12

PAGE_MARGIN_PX = 40
TITLE_BASELINE_PX = 55
META_BASELINES_PX = (30, 50, 70)

MARKING_GAP_PX = 20
MARKING_TICK_PX = 5
MARKING_LABEL_GAP_PX = 20
HEIGHT_LABEL_GAP_PX = 15

PLACEHOLDER_TEXT = "Upload Image"

JPEG_QUALITY = 90
