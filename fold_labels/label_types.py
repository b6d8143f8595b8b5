from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)


class FoldType(StrEnum):
    CENTRAL = "central"
    LEFT_RIGHT = "left-right"
    UP_DOWN = "up-down"

    @classmethod
    def parse(cls, value: object) -> FoldType:
        """Return the fold type for ``value``, falling back to ``CENTRAL``."""

        if isinstance(value, FoldType):
            return value
        key = str(value).strip().lower() if value is not None else ""
        if key in cls._value2member_map_:
            return cls(key)
        logger.warning("Unknown fold type %r, using %s", value, cls.CENTRAL.value)
        return cls.CENTRAL


class GuideAxis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class LabelSpec:
    """User-facing parameters of a single label design."""

    title: str
    nominal_width_in: float
    nominal_height_in: float
    fold_type: FoldType = FoldType.CENTRAL


@dataclass(frozen=True)
class FinalDimensions:
    width_in: float
    height_in: float


@dataclass(frozen=True)
class FoldGuide:
    """A fold line, ``offset_in`` from the label's top (horizontal) or left
    (vertical) edge."""

    axis: GuideAxis
    offset_in: float


@dataclass(frozen=True)
class LabelLayout:
    fold_type: FoldType
    nominal_width_in: float
    nominal_height_in: float
    final: FinalDimensions
    image_offset_x_in: float
    image_offset_y_in: float
    guides: tuple[FoldGuide, ...]

    @property
    def image_width_in(self) -> float:
        return self.nominal_width_in

    @property
    def image_height_in(self) -> float:
        return self.nominal_height_in


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def inset(self, amount: float) -> Rect:
        return Rect(
            self.x + amount,
            self.y + amount,
            self.width - 2 * amount,
            self.height - 2 * amount,
        )


@dataclass(frozen=True)
class ImageAsset:
    """A decoded raster borrowed for one render call.

    ``reader`` is whatever the drawing surface can paint; for the ReportLab
    surface that is an ``ImageReader``.
    """

    reader: Any
    width_px: int
    height_px: int
