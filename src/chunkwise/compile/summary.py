"""Chunk statistics and extractive whole-text summaries."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chunkwise.config import SummaryConfig
from chunkwise.types import ChunkSummary

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

__all__ = ["summarize_chunks", "summarize_text"]

logger = logging.getLogger(__name__)

_ELLIPSIS = "..."

# Sentence terminators; a run like "?!" counts as one break.
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def summarize_chunks(chunks: Sequence[str], preview_length: int = 100) -> list[ChunkSummary]:
    """Build a ChunkSummary for each chunk, preserving order."""
    summaries: list[ChunkSummary] = []
    for index, chunk in enumerate(chunks):
        preview = chunk[:preview_length]
        if len(chunk) > preview_length:
            preview += _ELLIPSIS
        summaries.append(
            ChunkSummary(
                index=index,
                content=chunk,
                length=len(chunk),
                word_count=len(chunk.split()),
                preview=preview,
            )
        )
    return summaries


def summarize_text(
    text: str,
    max_length: int = 500,
    markers: Iterable[str] | None = None,
) -> str:
    """Shorten ``text`` to at most ``max_length`` chars (plus an ellipsis).

    Sentences containing an importance marker word are preferred. When none
    are found, or they do not fit, the text is truncated instead.

    Args:
        text: Text to summarize.
        max_length: Length budget for the summary.
        markers: Marker words; defaults to ``SummaryConfig().markers``.

    Returns:
        The text itself if it already fits, otherwise the summary.
    """
    if not isinstance(text, str):
        return ""
    if len(text) <= max_length:
        return text

    words = [m.lower() for m in (markers if markers is not None else SummaryConfig().markers)]
    sentences = [s.strip() for s in _SENTENCE_SPLIT_RE.split(text)]
    important = [
        s for s in sentences if s and any(word in s.lower() for word in words)
    ]

    if important:
        summary = ". ".join(important) + "."
        if len(summary) <= max_length:
            logger.debug("Extracted %d marker sentences", len(important))
            return summary

    return text[:max_length] + _ELLIPSIS
