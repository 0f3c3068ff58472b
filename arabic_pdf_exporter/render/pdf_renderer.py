"""
PDF drawing for pre-laid-out Arabic pages.

The renderer makes no layout decisions: every token already carries its
x and y origin. It only converts between coordinate systems (layout
uses y-up from the bottom edge, PyMuPDF uses y-down from the top) and
turns each token into visual order so that a left-to-right glyph
painter draws it correctly.
"""

import logging
from typing import Iterable, Optional

import fitz  # PyMuPDF
from bidi.algorithm import get_display

from arabic_pdf_exporter.config import PageConfig
from arabic_pdf_exporter.layout.justifier import MeasuredToken
from arabic_pdf_exporter.layout.paginator import Page

logger = logging.getLogger(__name__)


def visual_order(glyphs: str) -> str:
    """Reorder a logical right-to-left token for left-to-right painting."""
    return get_display(glyphs, base_dir="R")


class PDFRenderer:
    """
    Paints laid-out pages into a PDF document.

    Usage:
        renderer = PDFRenderer(PageConfig(), font_size=16, font_path="Amiri-Regular.ttf")
        pdf_bytes = renderer.render(pages)
    """

    FONT_NAME = "arabic"
    FALLBACK_FONT_NAME = "helv"

    def __init__(
        self,
        page: PageConfig,
        font_size: float,
        font_path: Optional[str] = None,
        color: tuple[float, float, float] = (0, 0, 0),
    ):
        self.page = page
        self.font_size = font_size
        self.font_path = font_path
        self.color = color

        if not self.font_path:
            logger.warning("No font file for PDF rendering, Arabic glyphs may be missing")

    def render(self, pages: Iterable[Page]) -> bytes:
        """Draw every page and return the serialized PDF."""
        doc = fitz.open()
        try:
            for page in pages:
                self._render_page(doc, page)
            data = doc.tobytes(garbage=3, deflate=True)
            logger.info("Rendered PDF: %d page(s), %d bytes", doc.page_count, len(data))
            return data
        finally:
            doc.close()

    def _render_page(self, doc: "fitz.Document", page: Page) -> None:
        width = page.width or self.page.width
        height = page.height or self.page.height
        pdf_page = doc.new_page(width=width, height=height)

        fontname = self.FALLBACK_FONT_NAME
        if self.font_path:
            pdf_page.insert_font(fontname=self.FONT_NAME, fontfile=self.font_path)
            fontname = self.FONT_NAME

        for token, x, y in page.placements():
            self._draw_token(pdf_page, token, x, y, height, fontname)

    def _draw_token(
        self,
        pdf_page: "fitz.Page",
        token: MeasuredToken,
        x: float,
        y: float,
        page_height: float,
        fontname: str,
    ) -> None:
        origin = fitz.Point(self.page.margin_x + x, page_height - y)
        pdf_page.insert_text(
            origin,
            visual_order(token.glyphs),
            fontname=fontname,
            fontsize=self.font_size,
            color=self.color,
        )
