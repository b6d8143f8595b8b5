# pyright: reportUnknownVariableType=false, reportUnknownMemberType=false
# pyright: reportUnknownArgumentType=false, reportAttributeAccessIssue=false
# pyright: reportMissingImports=false
# pyright: reportMissingTypeStubs=false

"""Font resolution for the label page surface.

The renderer only knows logical families (sans, mono) and a bold flag. Those
map to ReportLab's built-in Helvetica/Courier unless a matching font file is
present in ``FOLD_LABELS_FONTS_DIR``, in which case the file is registered
with ReportLab (variable fonts are instanced at the requested weight first).
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Union

from fontTools.ttLib import TTFont as VariableTTFont
from fontTools.varLib import instancer
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont as ReportLabTTFont

from .draw_ops import FontFamily, TextStyle

logger = logging.getLogger(__name__)

DEFAULT_FONTS_DIR = Path(__file__).resolve().parent / "fonts"

REGULAR_WEIGHT = 400
BOLD_WEIGHT = 700


@dataclass(frozen=True)
class LocalVariableFont:
    family_name: str
    filename: str


@dataclass(frozen=True)
class LocalStaticFont:
    family_name: str
    files: dict[int, str]


FontSource = Union[LocalVariableFont, LocalStaticFont]

FONT_SOURCES: dict[FontFamily, FontSource] = {
    FontFamily.SANS: LocalVariableFont(
        family_name="Inter",
        filename="InterVariable.ttf",
    ),
    FontFamily.MONO: LocalStaticFont(
        family_name="Courier Prime",
        files={
            REGULAR_WEIGHT: "CourierPrime-Regular.ttf",
            BOLD_WEIGHT: "CourierPrime-Bold.ttf",
        },
    ),
}

# Stand-ins for Arial and Courier New.
BASE_FONTS: dict[tuple[FontFamily, bool], str] = {
    (FontFamily.SANS, False): "Helvetica",
    (FontFamily.SANS, True): "Helvetica-Bold",
    (FontFamily.MONO, False): "Courier",
    (FontFamily.MONO, True): "Courier-Bold",
}


def fonts_dir_from_env() -> Path:
    configured = os.getenv("FOLD_LABELS_FONTS_DIR")
    return Path(configured) if configured else DEFAULT_FONTS_DIR


class VariableFontManager:
    """Instantiate static font variants from a variable font file."""

    def __init__(self, family: str, font_path: Path) -> None:
        self.family = family
        self.font_path = font_path
        self._font_bytes = font_path.read_bytes()
        self._weight_min, self._weight_max = self._discover_weight_axis()
        self._registered: dict[str, str] = {}

    def _discover_weight_axis(self) -> tuple[float, float]:
        font = VariableTTFont(BytesIO(self._font_bytes))
        try:
            axis = next(ax for ax in font["fvar"].axes if ax.axisTag == "wght")
        except (KeyError, StopIteration) as exc:
            raise RuntimeError(
                f"Variable font '{self.font_path}' does not expose a wght axis."
            ) from exc
        return float(axis.minValue), float(axis.maxValue)

    def font_name_for_weight(self, weight: float) -> str:
        weight = min(max(float(weight), self._weight_min), self._weight_max)
        key = f"{weight:.1f}"
        cached = self._registered.get(key)
        if cached:
            return cached

        font_name = f"{self._safe_ps_name(self.family)}-w{int(round(weight))}"
        buffer = self._instantiate(weight)
        pdfmetrics.registerFont(ReportLabTTFont(font_name, buffer))
        self._registered[key] = font_name
        return font_name

    def _instantiate(self, weight: float) -> BytesIO:
        font = VariableTTFont(BytesIO(self._font_bytes))
        instancer.instantiateVariableFont(font, {"wght": weight}, inplace=True)
        self._ensure_unique_ps_name(font, weight)
        buffer = BytesIO()
        font.save(buffer)
        buffer.seek(0)
        return buffer

    def _ensure_unique_ps_name(self, font: VariableTTFont, weight: float) -> None:
        """Force a distinct PostScript name if instancer did not change it."""
        nm = font["name"]
        current_ps = nm.getName(6, 3, 1, 0x409) or nm.getName(6, 1, 0, 0)
        target_ps = self._safe_ps_name(
            f"{self.family.replace(' ', '')}-W{int(round(weight))}")
        if not current_ps or current_ps.toUnicode() == target_ps:
            return

        weight_label = str(int(round(weight)))
        for plat, enc, lang in ((3, 1, 0x409), (1, 0, 0)):
            nm.setName(target_ps, 6, plat, enc, lang)
            nm.setName(f"{self.family} {weight_label}", 4, plat, enc, lang)
            nm.setName(self.family, 1, plat, enc, lang)
            nm.setName(weight_label, 2, plat, enc, lang)
            nm.setName(self.family, 16, plat, enc, lang)
            nm.setName(weight_label, 17, plat, enc, lang)

    @staticmethod
    def _safe_ps_name(s: str) -> str:
        return re.sub(r"[^A-Za-z0-9-]", "", s)[:63]


class FontRegistry:
    """Map text styles to registered ReportLab font names."""

    def __init__(self, fonts_dir: Path | None = None) -> None:
        self.fonts_dir = fonts_dir or fonts_dir_from_env()
        self._variable_managers: dict[str, VariableFontManager] = {}
        self._static_registry: dict[tuple[str, int], str] = {}
        self._missing: set[Path] = set()

    def font_name(self, style: TextStyle) -> str:
        weight = BOLD_WEIGHT if style.bold else REGULAR_WEIGHT
        info = FONT_SOURCES.get(style.family)
        resolved: str | None = None
        if isinstance(info, LocalVariableFont):
            resolved = self._get_variable_font_name(info, weight)
        elif isinstance(info, LocalStaticFont):
            resolved = self._get_static_font_name(info, weight)
        return resolved or BASE_FONTS[(style.family, style.bold)]

    def _font_path(self, filename: str) -> Path | None:
        destination = self.fonts_dir / filename
        if destination.exists():
            return destination
        if destination not in self._missing:
            self._missing.add(destination)
            log = logger.warning if "FOLD_LABELS_FONTS_DIR" in os.environ else logger.debug
            log("Font file '%s' not found, using built-in fonts", destination)
        return None

    def _get_variable_font_name(
        self, info: LocalVariableFont, weight: int
    ) -> str | None:
        manager = self._variable_managers.get(info.family_name)
        if manager is None:
            destination = self._font_path(info.filename)
            if destination is None:
                return None
            manager = VariableFontManager(info.family_name, destination)
            self._variable_managers[info.family_name] = manager
        return manager.font_name_for_weight(weight)

    def _get_static_font_name(
        self, info: LocalStaticFont, weight: int
    ) -> str | None:
        filename = info.files.get(weight)
        if filename is None:
            closest = min(info.files, key=lambda w: abs(w - weight))
            filename = info.files[closest]
            weight = closest

        key = (info.family_name, weight)
        cached = self._static_registry.get(key)
        if cached:
            return cached

        destination = self._font_path(filename)
        if destination is None:
            return None

        font_name = f"{info.family_name.replace(' ', '')}-w{weight}"
        pdfmetrics.registerFont(ReportLabTTFont(font_name, str(destination)))
        self._static_registry[key] = font_name
        return font_name


_REGISTRY: FontRegistry | None = None


def default_registry() -> FontRegistry:
    """Return the shared registry, created on first use so the environment
    (including .env) is read after start-up."""

    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = FontRegistry()
    return _REGISTRY


__all__ = [
    "BASE_FONTS",
    "FONT_SOURCES",
    "FontRegistry",
    "VariableFontManager",
    "default_registry",
]
