"""Fold-dependent label geometry, in inches from the label's top-left corner."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from .common import FLAP_IN, IMAGE_OFFSET_IN
from .label_types import (
    FinalDimensions,
    FoldGuide,
    FoldType,
    GuideAxis,
    LabelLayout,
    LabelSpec,
)

logger = logging.getLogger(__name__)


def calculate_final_dimensions(
    nominal_width_in: float,
    nominal_height_in: float,
    fold_type: FoldType | str,
) -> FinalDimensions:
    """Return the label size including fold flaps."""

    fold = FoldType.parse(fold_type)
    if fold is FoldType.LEFT_RIGHT:
        return FinalDimensions(nominal_width_in + 2 * FLAP_IN, nominal_height_in)
    if fold is FoldType.UP_DOWN:
        return FinalDimensions(nominal_width_in, nominal_height_in + 2 * FLAP_IN)
    return FinalDimensions(nominal_width_in, nominal_height_in)


def calculate_layout(
    nominal_width_in: float,
    nominal_height_in: float,
    fold_type: FoldType | str,
) -> LabelLayout:
    """Derive final dimensions, image offset and fold guides.

    No range checks happen here; out-of-range sizes simply produce
    correspondingly large or small geometry.
    """

    fold = FoldType.parse(fold_type)
    final = calculate_final_dimensions(nominal_width_in, nominal_height_in, fold)

    offset_x = 0.0
    offset_y = 0.0
    if fold is FoldType.LEFT_RIGHT:
        offset_x = IMAGE_OFFSET_IN
        guides = (
            FoldGuide(GuideAxis.VERTICAL, FLAP_IN),
            FoldGuide(GuideAxis.VERTICAL, final.width_in - FLAP_IN),
        )
    elif fold is FoldType.UP_DOWN:
        offset_y = IMAGE_OFFSET_IN
        guides = (
            FoldGuide(GuideAxis.HORIZONTAL, FLAP_IN),
            FoldGuide(GuideAxis.HORIZONTAL, final.height_in - FLAP_IN),
        )
    else:
        guides = (FoldGuide(GuideAxis.HORIZONTAL, final.height_in / 2),)

    logger.debug(
        "Layout %s: nominal %sx%s in -> final %sx%s in",
        fold.value,
        nominal_width_in,
        nominal_height_in,
        final.width_in,
        final.height_in,
    )
    return LabelLayout(
        fold_type=fold,
        nominal_width_in=nominal_width_in,
        nominal_height_in=nominal_height_in,
        final=final,
        image_offset_x_in=offset_x,
        image_offset_y_in=offset_y,
        guides=guides,
    )


def layout_for_spec(spec: LabelSpec) -> LabelLayout:
    return calculate_layout(
        spec.nominal_width_in,
        spec.nominal_height_in,
        spec.fold_type,
    )


def layout_to_dict(layout: LabelLayout) -> dict[str, Any]:
    """Return a JSON-ready mapping of ``layout``."""

    payload = asdict(layout)
    payload["fold_type"] = layout.fold_type.value
    payload["guides"] = [
        {"axis": guide.axis.value, "offset_in": guide.offset_in}
        for guide in layout.guides
    ]
    payload["image_width_in"] = layout.image_width_in
    payload["image_height_in"] = layout.image_height_in
    return payload
