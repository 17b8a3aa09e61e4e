from __future__ import annotations

from samples import LIPSUM, PHRASE

from storyhtml.parser.base import Blockquote, Prose, Verse
from storyhtml.parser.blockquote import extract_block_quotes


def test_extracts_quote_and_strips_following_whitespace() -> None:
    text = f"Intro\n“{PHRASE}”¹\n\n   Outro"
    segments = extract_block_quotes([Prose(text)])

    assert segments == [
        Prose("Intro"),
        Blockquote(paragraphs=[PHRASE + "¹"]),
        Prose("Outro"),
    ]


def test_multi_paragraph_quote_drops_all_quote_marks() -> None:
    text = f"“{LIPSUM}\n\n“{LIPSUM}”"
    segments = extract_block_quotes([Prose(text)])

    assert segments == [Blockquote(paragraphs=[LIPSUM, LIPSUM])]


def test_short_quote_stays_prose() -> None:
    segments = [Prose("“Short and sweet.”")]
    assert extract_block_quotes(segments) == segments


def test_verse_segments_are_not_searched() -> None:
    verse = Verse(stanzas=[[f"“{LIPSUM}”"]])
    assert extract_block_quotes([verse]) == [verse]


def test_text_between_quotes_is_trimmed() -> None:
    first = "a" * 210
    second = "b" * 210
    text = f"“{first}”\n   between\n“{second}”"

    assert extract_block_quotes([Prose(text)]) == [
        Blockquote(paragraphs=[first]),
        Prose("between"),
        Blockquote(paragraphs=[second]),
    ]
