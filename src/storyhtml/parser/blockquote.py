"""Long quoted passage extraction."""

from __future__ import annotations

import logging
import re

from .base import Blockquote, Segment, split_prose
from .patterns import CURLY_DOUBLE_QUOTE, iter_block_quotes

logger = logging.getLogger(__name__)


def extract_block_quotes(segments: list[Segment]) -> list[Segment]:
    """Pull long quotes out of prose so paragraph splitting leaves them whole."""
    return split_prose(segments, iter_block_quotes, _quote_from_match, strip_following=True)


def _quote_from_match(match: re.Match[str]) -> Blockquote:
    body = CURLY_DOUBLE_QUOTE.sub("", match.group("quote"))
    paragraphs = [part for part in body.split("\n") if part.strip()]
    logger.debug("Extracted block quote of %d paragraphs", len(paragraphs))
    return Blockquote(paragraphs=paragraphs)
