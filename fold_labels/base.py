"""Abstract base class for drawing surfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from .draw_ops import DrawImage, DrawOp, FillRect, Line, StrokeRect, Text


class DrawingSurface(ABC):
    """A 2D page surface that executes draw operations in order."""

    def execute(self, ops: Iterable[DrawOp]) -> None:
        """Paint ``ops`` in emission order."""

        for op in ops:
            if isinstance(op, FillRect):
                self.fill_rect(op)
            elif isinstance(op, StrokeRect):
                self.stroke_rect(op)
            elif isinstance(op, Line):
                self.line(op)
            elif isinstance(op, Text):
                self.text(op)
            elif isinstance(op, DrawImage):
                self.image(op)
            else:
                raise TypeError(f"Unsupported draw operation: {op!r}")

    @abstractmethod
    def fill_rect(self, op: FillRect) -> None:
        """Fill a rectangle."""

    @abstractmethod
    def stroke_rect(self, op: StrokeRect) -> None:
        """Outline a rectangle."""

    @abstractmethod
    def line(self, op: Line) -> None:
        """Stroke a straight line."""

    @abstractmethod
    def text(self, op: Text) -> None:
        """Draw a single line of text anchored at its baseline."""

    @abstractmethod
    def image(self, op: DrawImage) -> None:
        """Stretch an image into a rectangle."""
