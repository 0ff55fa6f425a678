"""Boundary-aware character splitter.

Cuts text into chunks no longer than a character budget. Each cut point is
chosen by walking a ladder of boundary tiers, from strongest to weakest:

1. configured section separators (blank line, markdown headings)
2. paragraph breaks
3. sentence enders
4. word boundaries (spaces)
5. line breaks
6. hard cut at the budget

A tier only wins if its boundary lies past ``min_cut_ratio`` of the budget,
so chunks never come out pathologically short. Consecutive chunks can share
an overlapping tail.
"""

from __future__ import annotations

import logging

from chunkwise.config import SplitConfig
from chunkwise.exceptions import ChunkError

__all__ = ["check_char_limit", "find_cut_point", "split_text"]

logger = logging.getLogger(__name__)

_PARAGRAPH_BREAK = "\n\n"


def _last_boundary(text: str, marker: str, max_length: int, threshold: float) -> int:
    """Return the offset just past the last ``marker`` ending within ``max_length``.

    Returns -1 when there is no occurrence or when it starts at or before
    ``threshold``.
    """
    index = text.rfind(marker, 0, max_length)
    if index >= 0 and index > threshold:
        return index + len(marker)
    return -1


def find_cut_point(text: str, max_length: int, config: SplitConfig | None = None) -> int:
    """Find the best offset at which to cut ``text`` within ``max_length`` chars.

    Args:
        text: Remaining text to cut.
        max_length: Character budget for the piece before the cut.
        config: Splitter options; defaults to ``SplitConfig()``.

    Returns:
        Offset in ``[1, max_length]``, or ``len(text)`` if everything fits.
    """
    cfg = config or SplitConfig()

    if max_length >= len(text):
        return len(text)

    threshold = max_length * cfg.min_cut_ratio

    for separator in cfg.section_separators:
        cut = _last_boundary(text, separator, max_length, threshold)
        if cut > 0:
            logger.debug("Cut at section separator %r (offset %d)", separator, cut)
            return cut

    if cfg.preserve_paragraphs:
        cut = _last_boundary(text, _PARAGRAPH_BREAK, max_length, threshold)
        if cut > 0:
            logger.debug("Cut at paragraph break (offset %d)", cut)
            return cut

    if cfg.preserve_sentences:
        best_index = -1
        best_cut = -1
        for ender in cfg.sentence_enders:
            index = text.rfind(ender, 0, max_length)
            if index >= 0 and index > threshold and index > best_index:
                best_index = index
                best_cut = index + len(ender)
        if best_cut > 0:
            logger.debug("Cut at sentence end (offset %d)", best_cut)
            return best_cut

    for marker in (" ", "\n"):
        cut = _last_boundary(text, marker, max_length, threshold)
        if cut > 0:
            logger.debug("Cut at %r (offset %d)", marker, cut)
            return cut

    logger.debug("Hard cut at offset %d", max_length)
    return max_length


def check_char_limit(char_limit: object) -> None:
    """Raise ChunkError unless ``char_limit`` is a positive integer."""
    if isinstance(char_limit, bool) or not isinstance(char_limit, int) or char_limit < 1:
        raise ChunkError(f"char_limit must be a positive integer, got {char_limit!r}")


def _effective_overlap(overlap: int, char_limit: int) -> int:
    """Return the overlap actually carried between chunks.

    An overlap that does not fit under ``char_limit`` is disabled, so the
    carried tail always leaves at least one char of budget.
    """
    if overlap >= char_limit:
        logger.debug("Overlap %d >= char limit %d, disabling overlap", overlap, char_limit)
        return 0
    return max(overlap, 0)


def split_text(text: object, char_limit: int, config: SplitConfig | None = None) -> list[str]:
    """Split text into chunks of at most ``char_limit`` characters.

    Chunks are stripped of surrounding whitespace and blank chunks are
    dropped. Non-string or empty input yields an empty list.

    Args:
        text: Text to split.
        char_limit: Maximum characters per chunk.
        config: Splitter options; defaults to ``SplitConfig()``.

    Returns:
        Ordered list of chunk strings.

    Raises:
        ChunkError: If ``char_limit`` is not a positive integer.
        ConfigError: If ``config`` holds out-of-range options.
    """
    check_char_limit(char_limit)
    cfg = config or SplitConfig()
    cfg.validate()

    if not isinstance(text, str) or not text:
        return []

    if len(text) <= char_limit:
        stripped = text.strip()
        return [stripped] if stripped else []

    overlap = _effective_overlap(cfg.overlap, char_limit)

    chunks: list[str] = []
    current = ""
    remaining = text

    while remaining:
        if len(remaining) <= char_limit:
            if len(current) + len(remaining) <= char_limit:
                chunks.append(current + remaining)
            else:
                chunks.append(current)
                chunks.append(remaining)
            break

        cut = find_cut_point(remaining, char_limit - len(current), cfg)
        piece = remaining[:cut]
        chunks.append(current + piece)
        remaining = remaining[cut:]

        if overlap > 0 and len(piece) > overlap:
            current = piece[-overlap:]
        else:
            current = ""

    result = [c.strip() for c in chunks]
    result = [c for c in result if c]

    logger.debug(
        "Split %d chars into %d chunks (char_limit=%d, overlap=%d)",
        len(text),
        len(result),
        char_limit,
        overlap,
    )
    return result
