"""Abstract base class for chunking strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

__all__ = ["BaseChunker"]

logger = logging.getLogger(__name__)


class BaseChunker(ABC):
    """Base class for all chunking strategies.

    Subclasses split a document string into an ordered list of chunk strings.
    """

    name: str = ""

    @abstractmethod
    def split(self, text: str, char_limit: int) -> list[str]:
        """Split text into chunks.

        Args:
            text: The document to chunk.
            char_limit: Maximum characters per chunk.

        Returns:
            Ordered list of non-empty, stripped chunks.

        Raises:
            ChunkError: If ``char_limit`` is invalid.
        """
