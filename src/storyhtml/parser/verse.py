"""Poem and haiku recognition."""

from __future__ import annotations

import logging
import re

from .base import Haiku, Poem, Segment, Verse, split_prose
from .patterns import LINE_OPEN_QUOTE, VERSE_CLOSE_QUOTE, VERSE_OPEN_QUOTE, iter_embedded_verse

logger = logging.getLogger(__name__)


def extract_verse(segments: list[Segment]) -> list[Segment]:
    """Set embedded poems aside as Verse segments."""
    return split_prose(segments, iter_embedded_verse, _verse_from_match)


def _verse_from_match(match: re.Match[str]) -> Verse | None:
    verse = parse_verse(match.group("body"))
    if not verse.stanzas:
        # whitespace-only lines
        return None
    logger.debug(
        "Extracted verse of %d stanzas at %d-%d (quoted=%s)",
        len(verse.stanzas),
        match.start(),
        match.end(),
        verse.quoted,
    )
    return verse


def parse_verse(body: str) -> Verse:
    """Split a poem body into stanzas of lines.

    A poem that opens and closes with curly quotes is taken to be quoted
    poetry; the quote opening each stanza and the final closing quote are
    removed. A false positive is possible when a poem merely begins and ends
    with internal quotes.
    """
    quoted = bool(VERSE_OPEN_QUOTE.match(body) and VERSE_CLOSE_QUOTE.search(body))
    if quoted:
        body = LINE_OPEN_QUOTE.sub("", body)
        body = VERSE_CLOSE_QUOTE.sub(lambda m: m.group("sup"), body, count=1)

    stanzas: list[list[str]] = []
    current: list[str] = []
    for line in body.rstrip().split("\n"):
        if line.strip():
            current.append(line)
        elif current:
            stanzas.append(current)
            current = []
    if current:
        stanzas.append(current)

    return Verse(stanzas=stanzas, quoted=quoted)


def parse_haiku(match: re.Match[str]) -> Haiku:
    return Haiku(lines=(match.group(1), match.group(2), match.group(3)))


def parse_poem(text: str) -> Poem:
    """Whole-document poem with its dash delimiters already removed."""
    return Poem(lines=text.split("\n"))
