"""Tests for the document export orchestrator."""

import base64
import re

import pytest
from arabic_pdf_exporter.config import ExportConfig, ExportFormat, PageConfig, TypographyConfig
from arabic_pdf_exporter.exporter import (
    DocumentExporter,
    EmptyContentError,
    ExportResult,
    UnsupportedFormatError,
)
from arabic_pdf_exporter.layout.metrics import ApproximateMetrics

ARTICLE = (
    "أعلنت الأمم المتحدة أن التغير المناخي يشكل تهديداً وجودياً للبشرية، "
    "وأن العالم بحاجة إلى اتخاذ إجراءات فورية للحد من انبعاثات الكربون.\n\n"
    "وقال الأمين العام إن الوقت ينفد أمام المجتمع الدولي لتجنب كارثة "
    "مناخية لا يمكن التراجع عنها."
)


class TestExportTxt:
    def setup_method(self):
        self.exporter = DocumentExporter(metrics=ApproximateMetrics())

    def test_filename_and_mime(self):
        result = self.exporter.export("مرحبا", ExportFormat.TXT, basename="scan")
        assert re.fullmatch(r"scan-[0-9a-f\-]{36}\.txt", result.filename)
        assert result.mime == "text/plain; charset=utf-8"

    def test_rtl_override_wraps_content(self):
        result = self.exporter.export("مرحبا", "txt")
        assert result.data.decode("utf-8") == "\u202Eمرحبا\u202C"

    def test_base64(self):
        result = self.exporter.export("مرحبا", "txt")
        assert base64.b64decode(result.base64) == result.data

    def test_unique_filenames(self):
        first = self.exporter.export("نص", "txt", basename="a")
        second = self.exporter.export("نص", "txt", basename="a")
        assert first.filename != second.filename

    def test_default_basename(self):
        result = self.exporter.export("نص", "txt")
        assert result.filename.startswith("ocr-output-")


class TestExportErrors:
    def setup_method(self):
        self.exporter = DocumentExporter(metrics=ApproximateMetrics())

    def test_empty_content(self):
        with pytest.raises(EmptyContentError):
            self.exporter.export("", "pdf")
        with pytest.raises(EmptyContentError):
            self.exporter.export("  \n ", "txt")

    def test_unsupported_format(self):
        with pytest.raises(UnsupportedFormatError):
            self.exporter.export("نص", "docx")


class TestExportPdf:
    def setup_method(self):
        self.exporter = DocumentExporter(metrics=ApproximateMetrics())

    def test_layout_engine_pdf(self):
        result = self.exporter.export(ARTICLE, ExportFormat.PDF, basename="article")
        assert result.data.startswith(b"%PDF")
        assert result.mime == "application/pdf"
        assert result.renderer == "layout"
        assert result.page_count == 1
        assert result.filename.endswith(".pdf")

    def test_format_string_case_insensitive(self):
        assert self.exporter.export(ARTICLE, "PDF").renderer == "layout"

    def test_default_format_from_config(self):
        result = self.exporter.export(ARTICLE)
        assert result.filename.endswith(".pdf")

    def test_long_document_spans_pages(self):
        result = self.exporter.export("\n\n".join([ARTICLE] * 30), "pdf")
        assert result.page_count > 1


class TestPrimaryRenderer:
    def test_primary_renderer_used(self):
        calls = []

        def primary(content, font_path):
            calls.append((content, font_path))
            return b"%PDF-primary"

        exporter = DocumentExporter(primary_renderer=primary, metrics=ApproximateMetrics())
        result = exporter.export(ARTICLE, "pdf")
        assert result.renderer == "primary"
        assert result.data == b"%PDF-primary"
        assert calls == [(ARTICLE, None)]

    def test_falls_back_when_primary_returns_none(self):
        exporter = DocumentExporter(
            primary_renderer=lambda content, font: None,
            metrics=ApproximateMetrics(),
        )
        assert exporter.export(ARTICLE, "pdf").renderer == "layout"

    def test_falls_back_when_primary_raises(self):
        def broken(content, font_path):
            raise RuntimeError("browser failed to launch")

        exporter = DocumentExporter(primary_renderer=broken, metrics=ApproximateMetrics())
        result = exporter.export(ARTICLE, "pdf")
        assert result.renderer == "layout"
        assert result.data.startswith(b"%PDF")

    def test_primary_not_used_for_txt(self):
        def primary(content, font_path):
            raise AssertionError("should not be called")

        exporter = DocumentExporter(primary_renderer=primary, metrics=ApproximateMetrics())
        assert exporter.export(ARTICLE, "txt").renderer == "text"


class TestTypeset:
    def setup_method(self):
        config = ExportConfig(
            page=PageConfig(width=300, height=200, margin_x=20, margin_y=20),
            typography=TypographyConfig(font_size=10, line_gap=4),
        )
        self.exporter = DocumentExporter(config, metrics=ApproximateMetrics())

    def test_paragraph_breaks_survive_sanitization(self):
        lines = self.exporter.layout_paragraphs("كلمة\n\nكلمة")
        assert len(lines) == 2
        assert all(line.is_final_of_paragraph for line in lines)

    def test_non_final_lines_fill_usable_width(self):
        lines = self.exporter.layout_paragraphs(ARTICLE)
        usable = self.exporter.config.page.usable_width
        for line in lines:
            if not line.is_final_of_paragraph and len(line.placements) > 1:
                assert line.extent == pytest.approx(usable)

    def test_tokens_are_shaped(self):
        lines = self.exporter.layout_paragraphs("بلا")
        assert lines[0].placements[0].token.glyphs == "\uFE91\uFEFC"

    def test_pages_use_config_geometry(self):
        pages = self.exporter.typeset(ARTICLE)
        assert len(pages) >= 1
        first = pages[0]
        assert first.height == 200
        assert first.width == 300
        # first baseline one line height below the top margin
        assert first.lines[0].y == pytest.approx(200 - 20 - 14)

    def test_whitespace_only_paragraphs_ignored(self):
        assert self.exporter.typeset("\n\n   \n\n")[0].is_empty


class TestExportResult:
    def test_save_creates_directories(self, tmp_path):
        result = ExportResult(filename="x.txt", mime="text/plain", data=b"abc")
        path = result.save(tmp_path / "nested" / "x.txt")
        assert path.read_bytes() == b"abc"
