"""
Glyph-width providers for the layout engine.

The engine only ever asks one question of a font: how wide is this run
of presentation-form glyphs at this size? Providers are read-only after
construction and may be shared across threads.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol

from arabic_pdf_exporter.shaping.shaper import ShapedToken

logger = logging.getLogger(__name__)


class FontLoadError(Exception):
    """Raised when a font file cannot be read or parsed."""


class GlyphMetrics(Protocol):
    def width_of_glyph_run(self, glyphs: str, font_size: float) -> float:
        ...

    def space_width(self, font_size: float) -> float:
        ...


class FontMetrics:
    """Measures glyph runs against a TrueType font using PyMuPDF."""

    def __init__(self, font_path: str):
        try:
            import fitz  # PyMuPDF
        except ImportError:
            raise ImportError("PyMuPDF required: pip install PyMuPDF")

        path = Path(font_path)
        if not path.is_file():
            raise FontLoadError(f"Font file not found: {font_path}")

        try:
            self._font = fitz.Font(fontfile=str(path))
        except Exception as e:
            raise FontLoadError(f"Failed to load font {font_path}: {e}") from e

        self.font_path = str(path)
        logger.info("Loaded font metrics from %s (%s)", self.font_path, self._font.name)

    def width_of_glyph_run(self, glyphs: str, font_size: float) -> float:
        return self._font.text_length(glyphs, fontsize=font_size)

    def space_width(self, font_size: float) -> float:
        return self.width_of_glyph_run(" ", font_size)


class ApproximateMetrics:
    """
    Fixed-ratio estimate used when no font file is available.

    Every glyph is assumed to be 0.55 em wide and a space 0.4 em.
    """

    GLYPH_EM = 0.55
    SPACE_EM = 0.4

    font_path = None

    def width_of_glyph_run(self, glyphs: str, font_size: float) -> float:
        return len(glyphs) * font_size * self.GLYPH_EM

    def space_width(self, font_size: float) -> float:
        return font_size * self.SPACE_EM


def load_metrics(font_path: Optional[str], strict: bool = False) -> GlyphMetrics:
    """
    Build a metrics provider for a font file.

    Args:
        font_path: Path to a .ttf file, or None.
        strict: Raise FontLoadError instead of falling back to
                ApproximateMetrics when the font is missing or unreadable.
    """
    if not font_path:
        if strict:
            raise FontLoadError("No font path configured")
        logger.warning("No Arabic font configured, using approximate glyph widths")
        return ApproximateMetrics()

    try:
        return FontMetrics(font_path)
    except FontLoadError as e:
        if strict:
            raise
        logger.warning("Arabic font load failed, using approximate glyph widths: %s", e)
        return ApproximateMetrics()


def token_measurer(metrics: GlyphMetrics, font_size: float) -> Callable[[ShapedToken], float]:
    """Bind a metrics provider and size into the measure function layout() takes."""

    def measure(token: ShapedToken) -> float:
        return metrics.width_of_glyph_run(token.glyphs, font_size)

    return measure
