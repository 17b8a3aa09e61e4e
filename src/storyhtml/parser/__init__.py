"""Parser package."""

from .base import Blockquote, Document, FootnoteBlock, FootnoteEntry, Haiku, Paragraph, Poem, Prose, Quip, Verse
from .caption_parser import CaptionParser
from .links import repair_links, shorten_link_text

__all__ = [
    "Blockquote",
    "Document",
    "FootnoteBlock",
    "FootnoteEntry",
    "Haiku",
    "Paragraph",
    "Poem",
    "Prose",
    "Quip",
    "Verse",
    "CaptionParser",
    "repair_links",
    "shorten_link_text",
]
