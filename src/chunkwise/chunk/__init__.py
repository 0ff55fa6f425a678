"""Chunking engine: boundary-aware and section-aware character splitting."""

from chunkwise.chunk.base import BaseChunker
from chunkwise.chunk.boundary import find_cut_point, split_text
from chunkwise.chunk.section import find_sections, split_by_section
from chunkwise.chunk.strategy import (
    BoundaryChunker,
    SectionChunker,
    SmartChunker,
    process_text,
)

__all__ = [
    "BaseChunker",
    "BoundaryChunker",
    "SectionChunker",
    "SmartChunker",
    "find_cut_point",
    "find_sections",
    "process_text",
    "split_by_section",
    "split_text",
]
