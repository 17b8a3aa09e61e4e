"""Public entry points: format story and caption text as HTML."""

from __future__ import annotations

import logging

from storyhtml.config import IconConfig
from storyhtml.parser.caption_parser import CaptionParser, TextPass
from storyhtml.parser.links import repair_links
from storyhtml.parser.patterns import (
    is_whole_document_verse,
    match_haiku_prefix,
    match_whole_haiku,
    normalize_line_breaks,
    strip_verse_delimiters,
)
from storyhtml.parser.verse import parse_haiku, parse_poem
from storyhtml.renderer.html_renderer import HTMLRenderer

logger = logging.getLogger(__name__)


class Formatter:
    """Convert plain story text into an HTML fragment.

    *link_repair* fixes provider-specific anchor damage before links are
    shortened and *typography* converts straight quotes and dashes; both are
    plain ``str -> str`` callables and either may be ``None``.
    """

    def __init__(
        self,
        icons: IconConfig | None = None,
        *,
        link_repair: TextPass | None = repair_links,
        typography: TextPass | None = None,
    ) -> None:
        self.icons = icons or IconConfig()
        self._parser = CaptionParser(link_repair=link_repair, typography=typography)
        self._renderer = HTMLRenderer(self.icons)

    def story(self, text: str) -> str:
        """Format text that may be entirely a poem or begin with a haiku."""
        if not text:
            return text

        text = normalize_line_breaks(text)

        if is_whole_document_verse(text):
            body = strip_verse_delimiters(text)
            haiku = match_whole_haiku(body)
            if haiku is not None:
                logger.debug("Story is a haiku")
                return self._renderer.render_haiku(parse_haiku(haiku)) + self.caption(body[haiku.end():])
            logger.debug("Story is a poem")
            return self._renderer.render_segment(parse_poem(body))

        haiku = match_haiku_prefix(text)
        if haiku is not None:
            logger.debug("Story begins with a haiku")
            return self._renderer.render_haiku(parse_haiku(haiku)) + self.caption(text[haiku.end():])

        return self.caption(text)

    def caption(self, text: str) -> str:
        """Convert line breaks to paragraphs and set aside footnotes, poems and quotes."""
        if not text:
            return ""
        return self._renderer.render(self._parser.parse(text))


_default = Formatter()


def story(text: str, icons: IconConfig | None = None) -> str:
    formatter = _default if icons is None else Formatter(icons)
    return formatter.story(text)


def caption(text: str, icons: IconConfig | None = None) -> str:
    formatter = _default if icons is None else Formatter(icons)
    return formatter.caption(text)
