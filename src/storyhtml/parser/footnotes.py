"""Trailing footnote block extraction."""

from __future__ import annotations

import logging

from .base import FootnoteBlock, FootnoteEntry
from .patterns import CREDIT_NOTE_MARKER, FOOTNOTE_NOTE_MARKER, find_footnote_block, superscript_to_int

logger = logging.getLogger(__name__)


def extract_footnotes(text: str) -> tuple[str, FootnoteBlock | None]:
    """Remove the footnote block following a ``___`` line.

    Returns the remaining text and the parsed notes, or the text unchanged and
    ``None`` when there is no block with at least one note.
    """
    match = find_footnote_block(text)
    if match is None:
        return text, None

    block = parse_notes(match.group("notes"))
    if not block.entries:
        return text, None

    logger.debug("Extracted %d footnotes (credit=%s)", len(block.entries), block.has_credit)
    return text[: match.start()], block


def parse_notes(notes: str) -> FootnoteBlock:
    """Parse one note per line. A line starting with ``*`` is the photo credit."""
    credit: str | None = None
    numbered: list[tuple[int | None, str]] = []

    for line in notes.split("\n"):
        if not line.strip():
            continue

        credit_match = CREDIT_NOTE_MARKER.match(line)
        if credit_match:
            if credit is None:
                credit = line[credit_match.end():].strip()
                continue
            logger.warning("Ignoring extra credit marker in footnote %r", line.strip())

        marker: int | None = None
        marker_match = FOOTNOTE_NOTE_MARKER.match(line)
        if marker_match:
            marker = superscript_to_int(marker_match.group("digits"))
            line = line[marker_match.end():]
        numbered.append((marker, line.strip()))

    entries: list[FootnoteEntry] = []
    if credit is not None:
        entries.append(FootnoteEntry(ordinal=0, text=credit, credit=True))

    for ordinal, (marker, body) in enumerate(numbered, start=1):
        if marker is not None and marker != ordinal:
            logger.warning("Footnote marked %d is listed at position %d", marker, ordinal)
        entries.append(FootnoteEntry(ordinal=ordinal, text=body, marker=marker))

    return FootnoteBlock(entries=entries)
