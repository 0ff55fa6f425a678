"""Chunking strategies and the document-level entry point.

Three strategies are registered on ``default_registry``:

- ``basic``: boundary-aware splitting only
- ``section``: heading sections first, boundary splitting for oversized ones
- ``smart``: ``section``, falling back to ``basic`` when the whole document
  comes back as a single oversized chunk
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chunkwise.chunk.base import BaseChunker
from chunkwise.chunk.boundary import split_text
from chunkwise.chunk.section import split_by_section
from chunkwise.compile.summary import summarize_chunks
from chunkwise.config import ChunkwiseConfig, SplitConfig
from chunkwise.registry import default_registry
from chunkwise.types import ProcessResult

if TYPE_CHECKING:
    from chunkwise.registry import ChunkerRegistry

__all__ = [
    "BoundaryChunker",
    "SectionChunker",
    "SmartChunker",
    "process_text",
    "register_builtin_chunkers",
]

logger = logging.getLogger(__name__)


class BoundaryChunker(BaseChunker):
    """Splits at the best boundary under the budget, with overlap."""

    name = "basic"

    def __init__(self, config: SplitConfig | None = None) -> None:
        self.config = config or SplitConfig()

    def split(self, text: str, char_limit: int) -> list[str]:
        return split_text(text, char_limit, self.config)


class SectionChunker(BaseChunker):
    """Splits at markdown headings, boundary-splitting oversized sections."""

    name = "section"

    def __init__(self, config: SplitConfig | None = None) -> None:
        self.config = config or SplitConfig()

    def split(self, text: str, char_limit: int) -> list[str]:
        return split_by_section(text, char_limit, self.config)


class SmartChunker(BaseChunker):
    """Section-first splitting with a boundary-splitter fallback."""

    name = "smart"

    def __init__(self, config: SplitConfig | None = None) -> None:
        self.config = config or SplitConfig()

    def split(self, text: str, char_limit: int) -> list[str]:
        chunks = split_by_section(text, char_limit, self.config)
        if len(chunks) == 1 and len(chunks[0]) > char_limit:
            logger.debug("Single oversized section, falling back to boundary splitting")
            chunks = split_text(text, char_limit, self.config)
        return chunks


def process_text(
    text: str,
    max_tokens: int | None = None,
    strategy: str | None = None,
    config: ChunkwiseConfig | None = None,
) -> ProcessResult:
    """Chunk a document for a model prompt and summarize the result.

    The character limit is estimated as ``max_tokens * chars_per_token``.

    Args:
        text: Document text.
        max_tokens: Token budget per chunk; defaults to ``config.chat.max_tokens``.
        strategy: Registered chunker name; defaults to ``config.chat.strategy``.
        config: Full configuration; defaults to ``ChunkwiseConfig()``.

    Returns:
        ProcessResult with chunks and per-chunk summaries.

    Raises:
        PluginError: If ``strategy`` is not a registered chunker.
        ChunkError: If the derived character limit is not positive.
    """
    cfg = config or ChunkwiseConfig()
    tokens = cfg.chat.max_tokens if max_tokens is None else max_tokens
    name = strategy or cfg.chat.strategy
    char_limit = tokens * cfg.chat.chars_per_token

    chunker: BaseChunker = default_registry.create(name, cfg)
    chunks = chunker.split(text, char_limit)
    summary = summarize_chunks(chunks, cfg.summary.preview_length)

    original_length = len(text) if isinstance(text, str) else 0
    logger.info(
        "Chunked %d chars into %d chunks (strategy=%s, char_limit=%d)",
        original_length,
        len(chunks),
        name,
        char_limit,
    )

    return ProcessResult(
        original_length=original_length,
        chunk_count=len(chunks),
        chunks=tuple(chunks),
        summary=tuple(summary),
        strategy=name,
    )


def register_builtin_chunkers(registry: ChunkerRegistry) -> None:
    """Register the built-in chunkers on ``registry``."""
    for cls in (BoundaryChunker, SectionChunker, SmartChunker):
        registry.register(cls.name, lambda cfg, cls=cls: cls(cfg.split))


register_builtin_chunkers(default_registry)
