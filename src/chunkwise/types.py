"""Data contracts returned by chunkwise.

Frozen dataclasses handed back to callers:
  str → list[str] (chunks) → ChunkSummary / ProcessResult
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ChunkSummary",
    "ProcessResult",
]


@dataclass(frozen=True)
class ChunkSummary:
    """Per-chunk statistics and a short preview."""

    index: int
    content: str
    length: int
    word_count: int
    preview: str


@dataclass(frozen=True)
class ProcessResult:
    """Output of a chunking strategy run over a whole document."""

    original_length: int
    chunk_count: int
    chunks: tuple[str, ...]
    summary: tuple[ChunkSummary, ...]
    strategy: str
