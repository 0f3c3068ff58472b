"""
Arabic OCR Text Export
======================

Re-exports Arabic text recognized from scanned documents as plain text
or PDF. PDF output does not depend on a complex-script shaping library:
a built-in engine shapes, justifies and paginates the text itself.

Architecture:
    Raw OCR text → Sanitizer → Shaping Engine → Line Breaker & Justifier
        → Paginator → PDF drawing

Engine functions (pure, never raise):
    sanitize  - strip diacritics, tatweel and control characters
    shape     - contextual presentation forms + lam-alef ligatures
    layout    - greedy right-to-left line breaking with full justification
    paginate  - vertical placement and page breaks
"""

__version__ = "1.0.0"

from arabic_pdf_exporter.config import ExportConfig, ExportFormat
from arabic_pdf_exporter.layout.justifier import layout
from arabic_pdf_exporter.layout.paginator import paginate
from arabic_pdf_exporter.shaping.sanitizer import sanitize
from arabic_pdf_exporter.shaping.shaper import shape


def __getattr__(name: str):
    """Lazy import for modules that require PyMuPDF."""
    if name == "DocumentExporter":
        from arabic_pdf_exporter.exporter import DocumentExporter
        return DocumentExporter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DocumentExporter",
    "ExportConfig",
    "ExportFormat",
    "layout",
    "paginate",
    "sanitize",
    "shape",
]
