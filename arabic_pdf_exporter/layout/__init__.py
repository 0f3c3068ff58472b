"""
Justified right-to-left layout and pagination.
"""

from arabic_pdf_exporter.layout.justifier import Line, MeasuredToken, Placement, layout
from arabic_pdf_exporter.layout.metrics import (
    ApproximateMetrics,
    FontLoadError,
    FontMetrics,
    load_metrics,
)
from arabic_pdf_exporter.layout.paginator import Page, PlacedLine, paginate

__all__ = [
    "ApproximateMetrics",
    "FontLoadError",
    "FontMetrics",
    "Line",
    "MeasuredToken",
    "Page",
    "PlacedLine",
    "Placement",
    "layout",
    "load_metrics",
    "paginate",
]
