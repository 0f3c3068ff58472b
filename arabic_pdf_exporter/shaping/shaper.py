"""
Contextual Arabic shaping to presentation forms.

Converts logical-order Arabic text into Presentation Forms-B codepoints
so that fonts can draw connected script without a shaping library.

The scan is a small state machine. Each codepoint falls into one of
three classes:

    DUAL   - table letter that joins on both sides (beh, seen, lam, ...)
    RIGHT  - table letter that only joins the previous letter (alef, dal, ...)
    OTHER  - anything else (Latin, digits, punctuation, space, hamza)

A letter joins its previous neighbour when that neighbour is DUAL and
the letter itself joins backwards; it joins its next neighbour when it
is DUAL and the neighbour joins backwards. Both ends of the string act
as OTHER neighbours.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from arabic_pdf_exporter.shaping.forms import (
    GLYPH_FORMS,
    LAM,
    LAM_ALEF_LIGATURES,
)

logger = logging.getLogger(__name__)


class JoinClass(Enum):
    DUAL = "dual"
    RIGHT = "right"
    OTHER = "other"


def join_class(char: Optional[str]) -> JoinClass:
    """Classify a codepoint; None (string boundary) is OTHER."""
    forms = GLYPH_FORMS.get(char) if char else None
    if forms is None or not forms.joins_prev:
        # Hamza joins neither side, so it behaves like OTHER for neighbours
        return JoinClass.OTHER
    if forms.joins_next:
        return JoinClass.DUAL
    return JoinClass.RIGHT


@dataclass(frozen=True)
class ShapedToken:
    """One whitespace-delimited word in presentation forms."""
    glyphs: str

    def __len__(self) -> int:
        return len(self.glyphs)

    def __str__(self) -> str:
        return self.glyphs


def shape(sanitized: str) -> str:
    """
    Shape sanitized Arabic text into presentation-form codepoints.

    Codepoints outside the glyph table pass through unchanged, so
    non-Arabic text shapes to itself. Runs in a single pass.
    """
    chars = list(sanitized)
    count = len(chars)
    out: list[str] = []

    i = 0
    while i < count:
        char = chars[i]
        prev = chars[i - 1] if i > 0 else None
        nxt = chars[i + 1] if i + 1 < count else None
        prev_class = join_class(prev)

        if char == LAM and nxt in LAM_ALEF_LIGATURES:
            ligature = LAM_ALEF_LIGATURES[nxt]
            out.append(ligature.final if prev_class is JoinClass.DUAL else ligature.isolated)
            i += 2
            continue

        forms = GLYPH_FORMS.get(char)
        if forms is None:
            out.append(char)
            i += 1
            continue

        joined_prev = prev_class is JoinClass.DUAL and forms.joins_prev
        joined_next = forms.joins_next and join_class(nxt) is not JoinClass.OTHER
        out.append(forms.select(joined_prev, joined_next))
        i += 1

    return "".join(out)


def shape_tokens(paragraph: str) -> tuple[ShapedToken, ...]:
    """Shape a sanitized paragraph and split it into word tokens."""
    shaped = shape(paragraph)
    tokens = tuple(ShapedToken(word) for word in shaped.split())
    logger.debug("Shaped paragraph into %d tokens", len(tokens))
    return tokens
