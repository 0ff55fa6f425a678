"""Chunk post-processing: ranking, summaries and context assembly."""

from chunkwise.compile.context import assemble_context
from chunkwise.compile.relevance import rank_chunks, score_chunk
from chunkwise.compile.summary import summarize_chunks, summarize_text

__all__ = [
    "assemble_context",
    "rank_chunks",
    "score_chunk",
    "summarize_chunks",
    "summarize_text",
]
