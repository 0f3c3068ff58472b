"""
CLI entry point for Arabic OCR text export.

Usage:
    # Export recognized text as a justified right-to-left PDF
    arabic-pdf-exporter page.txt -o page.pdf --font fonts/Amiri/Amiri-Regular.ttf

    # Plain text with an RTL override mark
    arabic-pdf-exporter page.txt --format txt -o page.txt

    # Pick a font from a fonts directory, as a web client would
    arabic-pdf-exporter page.txt --fonts-dir ./fonts --font /fonts/Cairo/Cairo-Regular.ttf
"""

import argparse
import logging
import sys
from pathlib import Path

from arabic_pdf_exporter.config import (
    ExportConfig,
    ExportFormat,
    PageConfig,
    TypographyConfig,
)
from arabic_pdf_exporter.exporter import DocumentExporter, ExportError
from arabic_pdf_exporter.layout.metrics import FontLoadError
from arabic_pdf_exporter.utils import resolve_font_path, setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="arabic-pdf-exporter",
        description=(
            "Arabic OCR Text Export: re-export recognized Arabic text as "
            "plain text or a fully justified right-to-left PDF."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s page.txt -o page.pdf
  %(prog)s page.txt --format txt
  %(prog)s page.txt --font Amiri-Regular.ttf --font-size 14 --margin 40

Environment variables:
  ARABIC_TTF_PATH   - Default Arabic TrueType font
  ARABIC_FONTS_DIR  - Directory searched for --font references
        """,
    )

    parser.add_argument(
        "input_path",
        type=str,
        help="UTF-8 text file with recognized Arabic text",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file path. Default: <output-dir>/<basename>-<uuid>.<format>",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=[f.value for f in ExportFormat],
        default=None,
        help="Export format (default: from output extension, else pdf)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="./output",
        help="Directory for exports when -o is not given (default: ./output)",
    )

    # Font options
    parser.add_argument(
        "--font",
        type=str,
        default=None,
        help="TrueType font file, or a /fonts/... reference when --fonts-dir is set",
    )
    parser.add_argument(
        "--fonts-dir",
        type=str,
        default=None,
        help="Directory that --font references are resolved against",
    )
    parser.add_argument(
        "--require-font",
        action="store_true",
        help="Fail instead of using approximate glyph widths when the font is missing",
    )

    # Layout options
    parser.add_argument(
        "--font-size",
        type=float,
        default=16.0,
        help="Font size in points (default: 16)",
    )
    parser.add_argument(
        "--line-gap",
        type=float,
        default=6.0,
        help="Extra space between lines and paragraphs in points (default: 6)",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=56.0,
        help="Page margin in points (default: 56)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ExportConfig:
    typography = TypographyConfig(
        font_size=args.font_size,
        line_gap=args.line_gap,
        fonts_dir=args.fonts_dir,
        require_font=args.require_font,
    )

    if args.font and typography.fonts_dir:
        # Only fonts inside the fonts directory are accepted
        typography.font_path = resolve_font_path(args.font, typography.fonts_dir)
    elif args.font:
        typography.font_path = args.font

    output_format = ExportFormat.PDF
    if args.format:
        output_format = ExportFormat(args.format)
    elif args.output and Path(args.output).suffix.lower() == ".txt":
        output_format = ExportFormat.TXT

    return ExportConfig(
        page=PageConfig(margin_x=args.margin, margin_y=args.margin),
        typography=typography,
        default_format=output_format,
        basename=Path(args.input_path).stem,
        output_dir=args.output_dir,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    input_path = Path(args.input_path)
    if not input_path.exists():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        return 1

    config = build_config(args)
    try:
        content = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print(f"Error: input file is not valid UTF-8: {input_path} ({e})", file=sys.stderr)
        return 1

    try:
        exporter = DocumentExporter(config)
        result = exporter.export(content)
    except (ExportError, FontLoadError) as e:
        print(f"Error during export: {e}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else Path(config.output_dir) / result.filename
    try:
        result.save(output_path)
    except OSError as e:
        print(f"Error: cannot write output file {output_path}: {e}", file=sys.stderr)
        return 1

    print("=" * 70)
    print("EXPORT SUMMARY")
    print("=" * 70)
    print(f"  Output:               {output_path}")
    print(f"  Format:               {config.default_format.value}")
    print(f"  Renderer:             {result.renderer}")
    if result.page_count:
        print(f"  Pages:                {result.page_count}")
    print(f"  Size:                 {len(result.data)} bytes")
    print(f"  Time:                 {result.processing_time_seconds:.2f}s")

    return 0


if __name__ == "__main__":
    sys.exit(main())
