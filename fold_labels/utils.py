"""Shared helpers for label layout and rendering."""

from __future__ import annotations

import re

from .common import DPI
from .label_types import Rect

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


def inches_to_pixels(inches: float) -> float:
    return inches * DPI


def format_inches(value: float) -> str:
    """Return ``value`` in its shortest form (``4``, ``4.5``, ``2.25``).

    Exponents are written without padding (``1e-7``). Python already uses
    exponent notation below 1e-4 where JavaScript waits until 1e-6, which only
    shows outside the accepted 0.5 to 10 in range.
    """

    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return _EXPONENT_RE.sub(r"e\1\2", repr(number))


def centered_rect(
    width: float,
    height: float,
    area_width: float,
    area_height: float,
) -> Rect:
    """Return a ``width`` x ``height`` rectangle centered inside the area.

    The result may extend past the area (negative origin) when it does not fit.
    """

    return Rect(
        x=(area_width - width) / 2,
        y=(area_height - height) / 2,
        width=width,
        height=height,
    )
