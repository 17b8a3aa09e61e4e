from __future__ import annotations

import pytest

from storyhtml.config import IconConfig
from storyhtml.parser.base import (
    Blockquote,
    Document,
    FootnoteBlock,
    FootnoteEntry,
    Haiku,
    Paragraph,
    Poem,
    Prose,
    Quip,
    Verse,
)
from storyhtml.renderer.html_renderer import HTMLRenderer, assemble_paragraphs, split_paragraphs


def test_split_paragraphs_skips_blank_lines() -> None:
    assert split_paragraphs("one\n\n  \ntwo\n") == ["one", "two"]


def test_assemble_marks_first_paragraph_after_block() -> None:
    blocks = assemble_paragraphs(
        [
            Prose("before"),
            Blockquote(paragraphs=["quoted"]),
            Prose("after one\nafter two"),
            Verse(stanzas=[["a line"]]),
            Prose("\n\nlast"),
        ]
    )

    assert blocks == [
        Paragraph("before"),
        Blockquote(paragraphs=["quoted"]),
        Paragraph("after one", css_class="first"),
        Paragraph("after two"),
        Verse(stanzas=[["a line"]]),
        Paragraph("last", css_class="first"),
    ]


def test_assemble_turns_opening_quote_into_quip() -> None:
    blocks = assemble_paragraphs([Prose("“Ready?” she asked.\n“Ready,” I said.")])
    assert blocks == [Quip("“Ready?” she asked."), Paragraph("“Ready,” I said.")]


def test_render_document_appends_footnotes() -> None:
    document = Document(
        segments=[Prose("Text¹"), Verse(stanzas=[["· · in", "out"], ["next"]])],
        footnotes=FootnoteBlock(entries=[FootnoteEntry(ordinal=1, text="Note", marker=1)]),
    )

    assert HTMLRenderer().render(document) == (
        "<p>Text<sup>¹</sup></p>"
        '<blockquote class="poem"><p><span class="tab"></span>in<br/>out</p><p>next</p></blockquote>'
        '<ol class="footnotes"><li><span>Note</span></li></ol>'
    )


def test_render_blockquote_paragraphs() -> None:
    html = HTMLRenderer().render_segment(Blockquote(paragraphs=["one¹", "two"]))
    assert html == "<blockquote><p>one<sup>¹</sup></p><p>two</p></blockquote>"


def test_render_poem_and_haiku_with_icons() -> None:
    renderer = HTMLRenderer(IconConfig(haiku="eco", glyphs={"eco": "~"}))

    assert renderer.render_segment(Poem(lines=["a", "· · b"])) == '<p class="poem">a<br/><span class="tab"></span>b</p>'
    assert renderer.render_haiku(Haiku(lines=("one", "two", "three"))) == (
        '<p class="haiku">one<br/>two<br/>three<i class="material-icons eco">~</i></p>'
    )


def test_render_credit_footnote() -> None:
    block = FootnoteBlock(
        entries=[
            FootnoteEntry(ordinal=0, text="Photo", credit=True),
            FootnoteEntry(ordinal=1, text="Note"),
        ]
    )
    assert HTMLRenderer().render_footnotes(block) == (
        '<ol class="footnotes" start="0">'
        '<li class="credit"><i class="material-icons star">star</i><span>Photo</span></li>'
        "<li><span>Note</span></li></ol>"
    )


def test_unassembled_prose_is_rejected() -> None:
    with pytest.raises(TypeError):
        HTMLRenderer().render_segment(Prose("raw"))


def test_empty_verse_is_an_error() -> None:
    with pytest.raises(AssertionError):
        HTMLRenderer().render_verse(Verse())
