"""Assemble classified segments into an HTML fragment."""

from __future__ import annotations

import logging

from storyhtml.config import IconConfig
from storyhtml.parser.base import (
    Blockquote,
    Document,
    FootnoteBlock,
    Haiku,
    Paragraph,
    Poem,
    Prose,
    Quip,
    Segment,
    Verse,
)
from storyhtml.parser.patterns import is_quip

from .inline import icon_tag, indent, superscript_markers

logger = logging.getLogger(__name__)


class HTMLRenderer:
    """Render a parsed Document as paragraphs, quotes, poems and footnotes."""

    def __init__(self, icons: IconConfig | None = None) -> None:
        self.icons = icons or IconConfig()

    def render(self, document: Document) -> str:
        blocks = assemble_paragraphs(document.segments)
        html = "".join(self.render_segment(block) for block in blocks)
        if document.footnotes is not None:
            html += self.render_footnotes(document.footnotes)
        return html

    def render_segment(self, segment: Segment) -> str:
        if isinstance(segment, Paragraph):
            attrs = f' class="{segment.css_class}"' if segment.css_class else ""
            return f"<p{attrs}>{superscript_markers(segment.text)}</p>"

        if isinstance(segment, Quip):
            return f'<p class="quip">{superscript_markers(segment.text)}</p>'

        if isinstance(segment, Blockquote):
            body = "</p><p>".join(superscript_markers(p) for p in segment.paragraphs)
            return f"<blockquote><p>{body}</p></blockquote>"

        if isinstance(segment, Verse):
            return self.render_verse(segment)

        if isinstance(segment, Haiku):
            return self.render_haiku(segment)

        if isinstance(segment, Poem):
            body = "<br/>".join(indent(line) for line in segment.lines)
            return f'<p class="poem">{body}</p>'

        if isinstance(segment, Prose):
            raise TypeError("Prose must be assembled into paragraphs before rendering")

        return ""

    def render_verse(self, verse: Verse) -> str:
        assert verse.stanzas, "verse segment has no lines to render"
        stanzas = [
            "<br/>".join(superscript_markers(indent(line)) for line in stanza)
            for stanza in verse.stanzas
        ]
        return '<blockquote class="poem"><p>' + "</p><p>".join(stanzas) + "</p></blockquote>"

    def render_haiku(self, haiku: Haiku) -> str:
        icon = icon_tag(self.icons.haiku, self.icons.glyph(self.icons.haiku))
        return f'<p class="haiku">{"<br/>".join(haiku.lines)}{icon}</p>'

    def render_footnotes(self, block: FootnoteBlock) -> str:
        start = ' start="0"' if block.has_credit else ""
        items: list[str] = []
        for entry in block.entries:
            if entry.credit:
                icon = icon_tag(self.icons.credit, self.icons.glyph(self.icons.credit))
                items.append(f'<li class="credit">{icon}<span>{entry.text}</span></li>')
            else:
                items.append(f"<li><span>{entry.text}</span></li>")
        return f'<ol class="footnotes"{start}>' + "".join(items) + "</ol>"


def assemble_paragraphs(segments: list[Segment]) -> list[Segment]:
    """Split prose into paragraphs and assign CSS classes.

    The first paragraph after a block quote or poem is marked ``first``; the
    opening paragraph of the document becomes a quip when it is a short quote.
    """
    blocks: list[Segment] = []
    after_block = False

    for segment in segments:
        if not isinstance(segment, Prose):
            blocks.append(segment)
            after_block = isinstance(segment, (Blockquote, Verse))
            continue

        for text in split_paragraphs(segment.text):
            blocks.append(Paragraph(text, css_class="first" if after_block else None))
            after_block = False

    if blocks and isinstance(blocks[0], Paragraph) and blocks[0].css_class is None:
        if is_quip(blocks[0].text):
            logger.debug("Opening paragraph is a quip")
            blocks[0] = Quip(blocks[0].text)

    return blocks


def split_paragraphs(text: str) -> list[str]:
    """One paragraph per line, skipping blank lines."""
    return [line for line in text.split("\n") if line.strip()]
