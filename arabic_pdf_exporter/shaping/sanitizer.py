"""
Arabic OCR text sanitization.

OCR engines and markdown pipelines leak characters that a renderer
without a shaping library cannot draw:
- Diacritics (tashkeel) and Qur'anic annotation marks
- Tatweel / kashida elongation
- Zero-width and bidirectional control characters
- ASCII punctuation inside Arabic text
- Runs of whitespace
"""

import logging
import re

logger = logging.getLogger(__name__)


class TextSanitizer:
    """
    Strips invisible and combining noise from OCR text.

    Pipeline:
    1. Remove diacritics, annotation marks and tatweel
    2. Remove zero-width and bidi control characters
    3. Normalize ASCII punctuation to Arabic
    4. Collapse whitespace and trim

    Every step only deletes or maps characters, so running the pipeline
    on its own output is a no-op.
    """

    # Latin punctuation → Arabic equivalent
    PUNCTUATION_MAP = {
        '?': '؟',  # Arabic question mark
        ';': '؛',  # Arabic semicolon
    }

    def __init__(self):
        self._diacritics = re.compile(r'[\u064B-\u065F\u0670\u06D6-\u06ED]')
        self._tatweel = re.compile('\u0640')
        self._controls = re.compile(r'[\u200B-\u200F\u202A-\u202E\u2066-\u2069\uFEFF]')
        self._whitespace_run = re.compile(r'\s{2,}')
        self._punctuation = str.maketrans(self.PUNCTUATION_MAP)

    def process(self, text: str) -> str:
        """
        Run the sanitization pipeline.

        Args:
            text: Raw OCR text (may be empty).

        Returns:
            Normalized text, possibly empty. Never raises.
        """
        if not text:
            return ""

        original_length = len(text)

        text = self._remove_marks(text)
        text = self._remove_controls(text)
        text = self._normalize_punctuation(text)
        text = self._collapse_whitespace(text)

        logger.debug("Sanitized %d → %d chars", original_length, len(text))
        return text

    def _remove_marks(self, text: str) -> str:
        text = self._diacritics.sub('', text)
        return self._tatweel.sub('', text)

    def _remove_controls(self, text: str) -> str:
        return self._controls.sub('', text)

    def _normalize_punctuation(self, text: str) -> str:
        return text.translate(self._punctuation)

    def _collapse_whitespace(self, text: str) -> str:
        return self._whitespace_run.sub(' ', text).strip()


_default_sanitizer = TextSanitizer()


def sanitize(raw: str) -> str:
    """Sanitize raw OCR text for shaping. Idempotent."""
    return _default_sanitizer.process(raw)
