"""
Arabic shaping subsystem.

Cleans OCR noise from Arabic text and converts it to contextual
presentation forms, without a complex text-shaping library.
"""

from arabic_pdf_exporter.shaping.forms import GLYPH_FORMS, LAM_ALEF_LIGATURES, FormSet
from arabic_pdf_exporter.shaping.sanitizer import TextSanitizer, sanitize
from arabic_pdf_exporter.shaping.shaper import ShapedToken, shape, shape_tokens

__all__ = [
    "GLYPH_FORMS",
    "LAM_ALEF_LIGATURES",
    "FormSet",
    "ShapedToken",
    "TextSanitizer",
    "sanitize",
    "shape",
    "shape_tokens",
]
