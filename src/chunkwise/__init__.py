"""chunkwise: boundary-aware text chunking for model prompts."""

from chunkwise.chunk import process_text, split_by_section, split_text
from chunkwise.compile import (
    assemble_context,
    rank_chunks,
    summarize_chunks,
    summarize_text,
)
from chunkwise.config import SplitConfig

__version__ = "0.1.0"

__all__ = [
    "SplitConfig",
    "__version__",
    "assemble_context",
    "process_text",
    "rank_chunks",
    "split_by_section",
    "split_text",
    "summarize_chunks",
    "summarize_text",
]
