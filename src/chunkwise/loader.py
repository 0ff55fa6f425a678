"""Document loading and text cleanup ahead of chunking.

Reads plain text or markdown files and normalizes whitespace so the
splitters see consistent line endings and spacing.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from chunkwise.exceptions import LoadError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["MAX_FILE_SIZE", "clean_text", "read_document"]

logger = logging.getLogger(__name__)

MAX_FILE_SIZE: int = 50 * 1024 * 1024  # 50 MB

# Matches 3+ consecutive newlines (to collapse to 2)
_MULTI_BLANK_RE = re.compile(r"\n{3,}")

# Matches 3+ spaces after a non-space char; leading indentation is kept
_SPACE_RUN_RE = re.compile(r"(?<=\S) {3,}")


def clean_text(text: object) -> str:
    """Normalize text before splitting.

    - Convert CRLF and CR line endings to LF
    - Expand tabs to four spaces
    - Strip trailing whitespace from each line
    - Collapse 3+ consecutive newlines to 2
    - Collapse runs of 3+ spaces inside a line to two spaces
    - Strip leading/trailing whitespace from the whole document

    Non-string input yields an empty string.
    """
    if not isinstance(text, str) or not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\t", "    ")
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = _MULTI_BLANK_RE.sub("\n\n", text)
    text = _SPACE_RUN_RE.sub("  ", text)
    return text.strip()


def read_document(path: Path, max_size: int = MAX_FILE_SIZE) -> str:
    """Read a UTF-8 text document from disk.

    Args:
        path: Path to the file.
        max_size: Maximum file size in bytes.

    Returns:
        File content with any BOM removed.

    Raises:
        LoadError: If the file is missing, too large, or unreadable.
    """
    if not path.exists():
        msg = f"File not found: {path}"
        raise LoadError(msg)

    if not path.is_file():
        msg = f"Not a file: {path}"
        raise LoadError(msg)

    _check_file_size(path, max_size)

    logger.info("Reading document: %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning("UTF-8 decode failed for %s, retrying with replacement", path.name)
        raw = path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        msg = f"Cannot read file {path.name}: {e}"
        raise LoadError(msg) from e

    # Strip BOM if present
    if raw.startswith("\ufeff"):
        raw = raw[1:]

    logger.info("Read %s: %d chars", path.name, len(raw))
    return raw


def _check_file_size(path: Path, max_size: int) -> None:
    """Validate file size.

    Raises:
        LoadError: If the file exceeds the size limit.
    """
    file_size = path.stat().st_size
    if file_size > max_size:
        msg = f"File {path.name} ({file_size} bytes) exceeds maximum size ({max_size} bytes)"
        raise LoadError(msg)
