"""Caption pipeline: links, footnotes, verse, then block quotes."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .base import Document, Prose
from .blockquote import extract_block_quotes
from .footnotes import extract_footnotes
from .links import repair_links, shorten_link_text
from .patterns import normalize_line_breaks
from .verse import extract_verse

logger = logging.getLogger(__name__)

TextPass = Callable[[str], str]


class CaptionParser:
    """Classify caption text into an ordered list of segments.

    Extraction order is fixed: footnote bodies may contain short lines that
    must not be taken for verse, and block quotes must not claim text that is
    already part of a poem.
    """

    def __init__(
        self,
        link_repair: TextPass | None = repair_links,
        typography: TextPass | None = None,
    ) -> None:
        self.link_repair = link_repair
        self.typography = typography

    def parse(self, text: str) -> Document:
        text = normalize_line_breaks(text)
        if self.link_repair is not None:
            text = self.link_repair(text)
        text = shorten_link_text(text)
        if self.typography is not None:
            text = self.typography(text)

        text, footnotes = extract_footnotes(text)
        segments = extract_verse([Prose(text)])
        segments = extract_block_quotes(segments)

        logger.debug("Parsed caption into %d segments", len(segments))
        return Document(segments=segments, footnotes=footnotes)
