"""
Greedy line breaking and full justification for right-to-left text.

Coordinates are local to the line box: x runs from 0 (left margin) to
max_width (right margin). The first token of a line sits flush against
the right margin and each following token is placed further left.
Token order is never reversed; only the origin arithmetic grows
leftwards.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from arabic_pdf_exporter.shaping.shaper import ShapedToken

logger = logging.getLogger(__name__)

# Rounding slack when comparing a line extent against the line width
WIDTH_TOLERANCE = 1e-6


@dataclass(frozen=True)
class MeasuredToken:
    """A shaped token and its advance width in layout units."""
    token: ShapedToken
    width: float

    @property
    def glyphs(self) -> str:
        return self.token.glyphs


@dataclass(frozen=True)
class Placement:
    """Final x-origin of one token within its line box."""
    token: MeasuredToken
    x: float


@dataclass(frozen=True)
class Line:
    """One visual row of a paragraph, with finished token positions."""
    placements: tuple[Placement, ...]
    is_final_of_paragraph: bool
    inter_word_gap: float
    space_width: float
    max_width: float

    @property
    def tokens(self) -> tuple[MeasuredToken, ...]:
        return tuple(p.token for p in self.placements)

    @property
    def is_justified(self) -> bool:
        """True for a stretched line, even one that needed no extra space."""
        return not self.is_final_of_paragraph and len(self.placements) > 1

    @property
    def natural_width(self) -> float:
        """Width at plain inter-word spacing."""
        gaps = max(len(self.placements) - 1, 0)
        return sum(p.token.width for p in self.placements) + self.space_width * gaps

    @property
    def extent(self) -> float:
        """Width actually occupied once justification is applied."""
        gaps = max(len(self.placements) - 1, 0)
        return sum(p.token.width for p in self.placements) + self.inter_word_gap * gaps

    @property
    def overflows(self) -> bool:
        return self.extent - self.max_width > WIDTH_TOLERANCE


def _break_lines(
    tokens: Sequence[MeasuredToken],
    max_width: float,
    space_width: float,
) -> list[list[MeasuredToken]]:
    groups: list[list[MeasuredToken]] = []
    current: list[MeasuredToken] = []
    running = 0.0

    for token in tokens:
        additional = space_width if current else 0.0
        # An empty line always accepts a token, even one wider than the line
        if not current or running + additional + token.width <= max_width:
            current.append(token)
            running += additional + token.width
        else:
            groups.append(current)
            current = [token]
            running = token.width

    if current:
        groups.append(current)
    return groups


def _place_line(
    tokens: Sequence[MeasuredToken],
    is_final: bool,
    max_width: float,
    space_width: float,
) -> Line:
    count = len(tokens)
    extra = 0.0
    if not is_final and count > 1:
        total = sum(t.width for t in tokens)
        remaining = max(max_width - total - space_width * (count - 1), 0.0)
        extra = remaining / (count - 1)
    gap = space_width + extra

    placements = []
    right_edge = max_width
    for token in tokens:
        x = right_edge - token.width
        placements.append(Placement(token, x))
        right_edge = x - gap

    return Line(
        placements=tuple(placements),
        is_final_of_paragraph=is_final,
        inter_word_gap=gap,
        space_width=space_width,
        max_width=max_width,
    )


def layout(
    paragraph_tokens: Iterable[ShapedToken],
    measure: Callable[[ShapedToken], float],
    max_width: float,
    space_width: float,
) -> tuple[Line, ...]:
    """
    Break one paragraph into justified right-to-left lines.

    Args:
        paragraph_tokens: Shaped words in logical order.
        measure: Returns the advance width of a token.
        max_width: Width of the line box.
        space_width: Natural inter-word space.

    Returns:
        Lines in reading order. Every line except the last is stretched
        to exactly max_width; the last line keeps natural spacing. A
        single token wider than max_width becomes its own overflowing
        line. An empty paragraph yields no lines.
    """
    measured = [MeasuredToken(token, measure(token)) for token in paragraph_tokens]
    if not measured:
        return ()

    groups = _break_lines(measured, max_width, space_width)
    last = len(groups) - 1
    lines = tuple(
        _place_line(group, i == last, max_width, space_width)
        for i, group in enumerate(groups)
    )

    overflowing = sum(1 for line in lines if line.overflows)
    if overflowing:
        logger.debug("%d line(s) overflow the %.1f line width", overflowing, max_width)
    logger.debug("Laid out %d tokens into %d lines", len(measured), len(lines))
    return lines
