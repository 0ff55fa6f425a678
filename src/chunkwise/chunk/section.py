"""Section-aware partitioner.

Splits markdown-ish text at heading lines first and only falls back to the
boundary splitter for sections (or the preamble) that exceed the budget.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chunkwise.chunk.boundary import check_char_limit, split_text

if TYPE_CHECKING:
    from chunkwise.config import SplitConfig

__all__ = ["find_sections", "split_by_section"]

logger = logging.getLogger(__name__)

# Heading pattern: "# Heading" through "###### Heading", on a single line
_HEADING_RE = re.compile(r"^#{1,6}[ \t]+\S.*$", re.MULTILINE)


def find_sections(text: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` offsets of each region in document order.

    The first region is the preamble before the first heading, when there is
    one. Each following region runs from a heading to the next heading or the
    end of text. Returns an empty list when the text has no headings.
    """
    starts = [m.start() for m in _HEADING_RE.finditer(text)]
    if not starts:
        return []

    regions: list[tuple[int, int]] = []
    if starts[0] > 0:
        regions.append((0, starts[0]))

    ends = [*starts[1:], len(text)]
    regions.extend(zip(starts, ends, strict=True))
    return regions


def split_by_section(
    text: object,
    char_limit: int,
    config: SplitConfig | None = None,
) -> list[str]:
    """Split text by heading-delimited sections.

    Sections that fit in ``char_limit`` (after trimming) become one chunk
    each; larger ones go through :func:`split_text`. Overlap never spans two
    sections.

    Args:
        text: Text to split.
        char_limit: Maximum characters per chunk.
        config: Options forwarded to the boundary splitter.

    Returns:
        Ordered list of chunk strings.

    Raises:
        ChunkError: If ``char_limit`` is not a positive integer.
    """
    check_char_limit(char_limit)

    if not isinstance(text, str) or not text:
        return []

    regions = find_sections(text)
    if not regions:
        return split_text(text, char_limit, config)

    chunks: list[str] = []
    for start, end in regions:
        content = text[start:end].strip()
        if not content:
            continue
        if len(content) <= char_limit:
            chunks.append(content)
        else:
            chunks.extend(split_text(content, char_limit, config))

    logger.debug("Split %d sections into %d chunks", len(regions), len(chunks))
    return chunks
