"""
Vertical placement of laid-out lines onto pages.

Uses PDF-style coordinates: y grows upwards from the bottom edge, and a
line's y is its baseline.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from arabic_pdf_exporter.layout.justifier import Line, MeasuredToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacedLine:
    line: Line
    y: float

    def placements(self) -> Iterator[tuple[MeasuredToken, float, float]]:
        for placement in self.line.placements:
            yield placement.token, placement.x, self.y


@dataclass(frozen=True)
class Page:
    """A page of placed lines. `cursor` is where the next line would start."""
    number: int
    lines: tuple[PlacedLine, ...]
    cursor: float
    height: float
    width: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def placements(self) -> Iterator[tuple[MeasuredToken, float, float]]:
        """Yield (token, x, y) for every token on the page, in drawing order."""
        for placed in self.lines:
            yield from placed.placements()


def paginate(
    lines: Iterable[Line],
    line_height: float,
    page_height: float,
    margin_top: float,
    margin_bottom: float,
    *,
    paragraph_gap: float = 0.0,
    page_width: float = 0.0,
) -> tuple[Page, ...]:
    """
    Assign lines to pages and baselines.

    The cursor starts at page_height - margin_top. A line occupies the
    band [cursor - line_height, cursor] and its baseline is the
    bottom of that band; when that band would dip below
    margin_bottom a new page is started. After the last line of a
    paragraph the cursor drops by paragraph_gap.

    Always returns at least one page. A line taller than an empty page
    is still placed rather than dropped.
    """
    top = page_height - margin_top
    pages: list[Page] = []
    current: list[PlacedLine] = []
    cursor = top

    def close_page() -> None:
        pages.append(Page(
            number=len(pages) + 1,
            lines=tuple(current),
            cursor=cursor,
            height=page_height,
            width=page_width,
        ))

    for line in lines:
        if cursor - line_height < margin_bottom and current:
            close_page()
            current = []
            cursor = top

        cursor -= line_height
        current.append(PlacedLine(line, cursor))

        if line.is_final_of_paragraph:
            cursor -= paragraph_gap

    close_page()
    logger.debug(
        "Paginated %d lines onto %d page(s)",
        sum(len(p.lines) for p in pages),
        len(pages),
    )
    return tuple(pages)
