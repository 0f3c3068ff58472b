"""
Document export orchestrator.

Ties together:
1. Paragraph splitting and OCR-noise sanitization
2. Contextual shaping into presentation forms
3. Justified right-to-left line layout and pagination
4. PDF drawing (or plain-text packaging)

PDF export first tries an optional primary renderer supplied by the
host (for example a headless-browser HTML-to-PDF path) and falls back
to the built-in layout engine when it is missing or fails.
"""

import base64
import logging
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from arabic_pdf_exporter.config import ExportConfig, ExportFormat
from arabic_pdf_exporter.layout.justifier import Line, layout
from arabic_pdf_exporter.layout.metrics import GlyphMetrics, load_metrics, token_measurer
from arabic_pdf_exporter.layout.paginator import Page, paginate
from arabic_pdf_exporter.render.pdf_renderer import PDFRenderer
from arabic_pdf_exporter.shaping.sanitizer import sanitize
from arabic_pdf_exporter.shaping.shaper import shape_tokens
from arabic_pdf_exporter.utils import is_arabic, split_paragraphs

logger = logging.getLogger(__name__)

# (content, font_path) -> PDF bytes, or None when unavailable
PrimaryRenderer = Callable[[str, Optional[str]], Optional[bytes]]

MIME_TYPES = {
    ExportFormat.TXT: "text/plain; charset=utf-8",
    ExportFormat.PDF: "application/pdf",
}


class ExportError(Exception):
    """Base class for export failures."""


class UnsupportedFormatError(ExportError):
    pass


class EmptyContentError(ExportError):
    pass


@dataclass
class ExportResult:
    """A finished export, ready to be saved or sent to a client."""
    filename: str
    mime: str
    data: bytes
    page_count: int = 0
    renderer: str = ""
    processing_time_seconds: float = 0.0

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def save(self, path: Union[str, Path]) -> Path:
        """Write the export to disk, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.data)
        logger.info("Output saved to: %s", path)
        return path


class DocumentExporter:
    """
    Exports recognized Arabic text as TXT or PDF.

    Usage:
        exporter = DocumentExporter(ExportConfig())
        result = exporter.export(ocr_text, ExportFormat.PDF, basename="scan")
        result.save("out/" + result.filename)
    """

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        primary_renderer: Optional[PrimaryRenderer] = None,
        metrics: Optional[GlyphMetrics] = None,
    ):
        self.config = config or ExportConfig()
        self.primary_renderer = primary_renderer

        typography = self.config.typography
        self.metrics = metrics or load_metrics(
            typography.font_path, strict=typography.require_font
        )
        self.renderer = PDFRenderer(
            self.config.page,
            font_size=typography.font_size,
            font_path=getattr(self.metrics, "font_path", None),
        )

        logger.info(
            "DocumentExporter initialized (metrics: %s, primary renderer: %s)",
            type(self.metrics).__name__,
            "yes" if primary_renderer else "no",
        )

    def export(
        self,
        content: str,
        fmt: Union[ExportFormat, str, None] = None,
        basename: Optional[str] = None,
    ) -> ExportResult:
        """
        Export text in the requested format.

        Args:
            content: Recognized text; paragraphs separated by blank lines.
            fmt: ExportFormat or its string value. Defaults to config.
            basename: Filename stem. A random suffix is always appended.

        Raises:
            EmptyContentError: content is empty or whitespace.
            UnsupportedFormatError: fmt is not a known format.
        """
        if not content or not content.strip():
            raise EmptyContentError("Missing content")
        if not is_arabic(content):
            logger.warning("No Arabic text detected, exporting as-is")

        export_format = self._resolve_format(fmt)
        stem = basename or self.config.basename
        filename = f"{stem}-{uuid.uuid4()}.{export_format.value}"
        logger.info("Exporting %d chars as %s", len(content), export_format.value)

        start = time.time()
        if export_format is ExportFormat.TXT:
            result = self._export_txt(filename, content)
        else:
            result = self._export_pdf(filename, content)
        result.processing_time_seconds = time.time() - start

        logger.info(
            "Export complete: %s (%d bytes, %.2fs)",
            result.filename,
            len(result.data),
            result.processing_time_seconds,
        )
        return result

    def typeset(self, content: str) -> tuple[Page, ...]:
        """Run sanitize → shape → layout → paginate without drawing."""
        page = self.config.page
        typography = self.config.typography

        lines = self.layout_paragraphs(content)
        return paginate(
            lines,
            line_height=typography.line_height,
            page_height=page.height,
            margin_top=page.margin_y,
            margin_bottom=page.margin_y,
            paragraph_gap=typography.paragraph_gap,
            page_width=page.width,
        )

    def layout_paragraphs(self, content: str) -> list[Line]:
        """Lay out every paragraph of the content into justified lines."""
        font_size = self.config.typography.font_size
        measure = token_measurer(self.metrics, font_size)
        space_width = self.metrics.space_width(font_size)
        max_width = self.config.page.usable_width

        lines: list[Line] = []
        paragraphs = split_paragraphs(content)
        for paragraph in paragraphs:
            tokens = shape_tokens(sanitize(paragraph))
            lines.extend(layout(tokens, measure, max_width, space_width))

        logger.debug("Laid out %d paragraphs into %d lines", len(paragraphs), len(lines))
        return lines

    def _resolve_format(self, fmt: Union[ExportFormat, str, None]) -> ExportFormat:
        if fmt is None:
            return self.config.default_format
        if isinstance(fmt, ExportFormat):
            return fmt
        try:
            return ExportFormat(fmt.lower())
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported format: {fmt}")

    def _export_txt(self, filename: str, content: str) -> ExportResult:
        # Right-to-left override so plain text editors display it RTL
        rtl_content = "\u202E" + content + "\u202C"
        return ExportResult(
            filename=filename,
            mime=MIME_TYPES[ExportFormat.TXT],
            data=rtl_content.encode("utf-8"),
            renderer="text",
        )

    def _export_pdf(self, filename: str, content: str) -> ExportResult:
        if self.primary_renderer is not None:
            data = self._try_primary_renderer(content)
            if data:
                return ExportResult(
                    filename=filename,
                    mime=MIME_TYPES[ExportFormat.PDF],
                    data=data,
                    renderer="primary",
                )
            logger.warning("Primary PDF renderer unavailable, falling back to layout engine")

        pages = self.typeset(content)
        data = self.renderer.render(pages)
        return ExportResult(
            filename=filename,
            mime=MIME_TYPES[ExportFormat.PDF],
            data=data,
            page_count=len(pages),
            renderer="layout",
        )

    def _try_primary_renderer(self, content: str) -> Optional[bytes]:
        try:
            return self.primary_renderer(content, self.renderer.font_path)
        except Exception as e:
            logger.error("Primary PDF renderer failed: %s", e)
            return None
