"""LabelSpec builders for raw form and command line values."""

from __future__ import annotations

import math
import re

from .label_types import FoldType, LabelSpec

__all__ = [
    "DEFAULT_TITLE",
    "DEFAULT_WIDTH_IN",
    "DEFAULT_HEIGHT_IN",
    "DEFAULT_FOLD_TYPE",
    "MIN_DIMENSION_IN",
    "MAX_DIMENSION_IN",
    "DIMENSION_STEP_IN",
    "build_label_spec",
    "default_label_spec",
    "download_filename",
    "fold_type_choices",
    "parse_dimension",
]

DEFAULT_TITLE = "Label Design"
DEFAULT_WIDTH_IN = 4.0
DEFAULT_HEIGHT_IN = 2.0
DEFAULT_FOLD_TYPE = FoldType.CENTRAL

MIN_DIMENSION_IN = 0.5
MAX_DIMENSION_IN = 10.0
DIMENSION_STEP_IN = 0.25

_FOLD_TYPE_NAMES = {
    FoldType.CENTRAL: "Central Fold",
    FoldType.LEFT_RIGHT: "Left & Right Fold",
    FoldType.UP_DOWN: "Up & Down Fold",
}


def default_label_spec() -> LabelSpec:
    return LabelSpec(
        title=DEFAULT_TITLE,
        nominal_width_in=DEFAULT_WIDTH_IN,
        nominal_height_in=DEFAULT_HEIGHT_IN,
        fold_type=DEFAULT_FOLD_TYPE,
    )


def fold_type_choices() -> list[tuple[str, str]]:
    """Return ``(value, display name)`` pairs for fold type pickers."""

    return [(fold.value, _FOLD_TYPE_NAMES[fold]) for fold in FoldType]


def parse_dimension(name: str, value: str | float | int | None) -> float:
    """Coerce ``value`` to inches and enforce the supported label size range."""

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{name} is required.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number.")
    if not MIN_DIMENSION_IN <= number <= MAX_DIMENSION_IN:
        raise ValueError(
            f"{name} must be between {MIN_DIMENSION_IN:g} and "
            f"{MAX_DIMENSION_IN:g} inches, got {number:g}."
        )
    return number


def build_label_spec(
    title: str | None,
    width: str | float | int | None,
    height: str | float | int | None,
    fold_type: str | FoldType | None,
) -> LabelSpec:
    """Validate raw values into a ``LabelSpec``.

    Raises ``ValueError`` for missing or out-of-range dimensions. Unknown fold
    types fall back to central.
    """

    return LabelSpec(
        title=title if title is not None else DEFAULT_TITLE,
        nominal_width_in=parse_dimension("Width", width),
        nominal_height_in=parse_dimension("Height", height),
        fold_type=FoldType.parse(fold_type),
    )


def download_filename(title: str, ext: str = "jpg") -> str:
    """Return the export file name for a design titled ``title``."""

    stem = re.sub(r"[\s/\\]+", "_", title)
    return f"{stem}_label_design.{ext}"
