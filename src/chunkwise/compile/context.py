"""Context assembly: join selected chunks into one prompt-ready string."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["assemble_context", "format_part"]


def format_part(number: int, chunk: str) -> str:
    """Render one chunk under its ``--- Part N ---`` header."""
    return f"--- Part {number} ---\n{chunk}\n"


def assemble_context(chunks: Sequence[str], max_chunks: int = 3) -> str:
    """Join the first ``max_chunks`` chunks, each under a numbered header.

    Parts are separated by a blank line. Returns an empty string when there
    is nothing to include.
    """
    selected = list(chunks[: max(max_chunks, 0)])
    return "\n".join(format_part(i, chunk) for i, chunk in enumerate(selected, start=1))
