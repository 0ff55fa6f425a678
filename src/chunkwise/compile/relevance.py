"""Deterministic keyword scoring for chunk relevance.

Scores chunks by counting query-word occurrences in the chunk's content,
with a flat bonus when the whole query appears verbatim. No embedder or
LLM needed; output is fully deterministic.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["rank_chunks", "score_chunk"]

logger = logging.getLogger(__name__)

# Bonus when the full query appears as a substring of the chunk.
PHRASE_BONUS = 10


def score_chunk(content: str, query: str, phrase_bonus: int = PHRASE_BONUS) -> int:
    """Score chunk content against a query.

    Each whitespace-separated query word adds the number of times it occurs
    in the content (case-insensitive, matched literally, non-overlapping).
    The full lower-cased query appearing in the content adds ``phrase_bonus``.

    Args:
        content: Chunk text.
        query: Free-text query.
        phrase_bonus: Bonus for a verbatim query match.

    Returns:
        Integer score, 0 when nothing matches or the query is blank.
    """
    query_lower = query.lower().strip()
    if not query_lower or not content:
        return 0

    content_lower = content.lower()
    score = sum(content_lower.count(word) for word in query_lower.split())
    if query_lower in content_lower:
        score += phrase_bonus
    return score


def rank_chunks(
    chunks: Sequence[str],
    query: str,
    max_results: int = 3,
    phrase_bonus: int = PHRASE_BONUS,
) -> list[str]:
    """Score, filter, and rank chunks by keyword relevance.

    Chunks scoring 0 are dropped. The rest are sorted by score descending,
    ties keeping their input order, and the top ``max_results`` returned.

    Args:
        chunks: Candidate chunks.
        query: Free-text query.
        max_results: Maximum number of chunks to return.
        phrase_bonus: Bonus for a verbatim query match.

    Returns:
        Chunk contents, most relevant first.
    """
    if not chunks or not isinstance(query, str) or not query.strip():
        return []

    scored = [
        (index, chunk, score_chunk(chunk, query, phrase_bonus))
        for index, chunk in enumerate(chunks)
    ]
    # Score descending, then original position ascending for stability
    scored.sort(key=lambda x: (-x[2], x[0]))

    result = [chunk for _, chunk, score in scored if score > 0][: max(max_results, 0)]

    logger.debug(
        "Relevance scoring: kept %d/%d chunks for query %r",
        len(result),
        len(chunks),
        query,
    )
    return result
