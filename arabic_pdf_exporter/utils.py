"""
Utility functions for the Arabic document export pipeline.
"""

import logging
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_ARABIC_PATTERN = re.compile(r'[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]')
_PARAGRAPH_BREAK = re.compile(r'\n{2,}')


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the pipeline."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def split_paragraphs(text: str) -> list[str]:
    """
    Split text into paragraphs on blank lines.

    Single newlines stay inside their paragraph; empty paragraphs are
    dropped.
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    paragraphs = (p.strip() for p in _PARAGRAPH_BREAK.split(text))
    return [p for p in paragraphs if p]


def is_arabic(text: str) -> bool:
    """Check if text contains Arabic characters."""
    arabic_chars = len(_ARABIC_PATTERN.findall(text))
    total_alpha = sum(1 for c in text if c.isalpha())
    if total_alpha == 0:
        return False
    return (arabic_chars / total_alpha) > 0.3


def resolve_font_path(font: Optional[str], fonts_dir: Optional[str]) -> Optional[str]:
    """
    Resolve a client-supplied font reference inside a fonts directory.

    Accepts references like "/fonts/Amiri/Amiri-Regular.ttf" or
    "Amiri/Amiri-Regular.ttf". Returns None unless the resolved file
    lies inside fonts_dir, exists, and is a .ttf file.
    """
    if not font or not fonts_dir:
        return None

    root = Path(fonts_dir).resolve()
    relative = re.sub(r'^/?fonts/', '', font).lstrip('/')
    candidate = (root / relative).resolve()

    if not candidate.is_relative_to(root):
        logger.warning("Rejected font outside fonts directory: %s", font)
        return None
    if not candidate.is_file() or candidate.suffix.lower() != ".ttf":
        logger.warning("Font not found or not a .ttf file: %s", font)
        return None

    return str(candidate)
