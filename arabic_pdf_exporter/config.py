"""
Configuration management for the Arabic document export pipeline.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_FONT_PATH = "fonts/Amiri/Amiri-Regular.ttf"


class ExportFormat(Enum):
    TXT = "txt"
    PDF = "pdf"


@dataclass
class PageConfig:
    """Page geometry in PDF points (A4 by default)."""
    width: float = 595.28
    height: float = 841.89
    margin_x: float = 56.0
    margin_y: float = 56.0

    @property
    def usable_width(self) -> float:
        return self.width - self.margin_x * 2


@dataclass
class TypographyConfig:
    """Font and spacing settings for the PDF fallback renderer."""
    font_size: float = 16.0
    line_gap: float = 6.0
    # Font file: loaded from env vars if not set
    font_path: Optional[str] = None
    fonts_dir: Optional[str] = None
    # Fail instead of falling back to approximate glyph widths
    require_font: bool = False

    def __post_init__(self):
        """Load font locations from environment variables if not provided."""
        if not self.font_path:
            self.font_path = os.environ.get("ARABIC_TTF_PATH")
        if not self.font_path and os.path.isfile(DEFAULT_FONT_PATH):
            self.font_path = DEFAULT_FONT_PATH
        if not self.fonts_dir:
            self.fonts_dir = os.environ.get("ARABIC_FONTS_DIR")

    @property
    def line_height(self) -> float:
        return self.font_size + self.line_gap

    @property
    def paragraph_gap(self) -> float:
        return self.line_gap


@dataclass
class ExportConfig:
    """Export pipeline configuration."""
    page: PageConfig = field(default_factory=PageConfig)
    typography: TypographyConfig = field(default_factory=TypographyConfig)

    default_format: ExportFormat = ExportFormat.PDF
    basename: str = "ocr-output"
    output_dir: str = "./output"
