"""Strategy registry for chunkwise.

Maps strategy names from config or the CLI to chunker factories.
Example: ``registry.create("smart", config)`` → ``SmartChunker``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chunkwise.exceptions import PluginError

if TYPE_CHECKING:
    from collections.abc import Callable

    from chunkwise.chunk.base import BaseChunker
    from chunkwise.config import ChunkwiseConfig

__all__ = ["ChunkerRegistry", "default_registry"]

logger = logging.getLogger(__name__)


class ChunkerRegistry:
    """Named chunking strategies.

    With ``load_builtins=True`` the first lookup imports
    ``chunkwise.chunk.strategy``, which registers ``basic``, ``section`` and
    ``smart`` on :data:`default_registry`.
    """

    def __init__(self, *, load_builtins: bool = False) -> None:
        self._factories: dict[str, Callable[[ChunkwiseConfig], BaseChunker]] = {}
        self._load_builtins = load_builtins
        self._loaded = False

    def register(self, name: str, factory: Callable[[ChunkwiseConfig], BaseChunker]) -> None:
        """Register ``factory`` under strategy ``name``.

        Raises:
            PluginError: If ``name`` is already taken.
        """
        if name in self._factories:
            raise PluginError(f"Strategy '{name}' is already registered")
        self._factories[name] = factory
        logger.debug("Registered strategy %s", name)

    def _ensure_loaded(self) -> None:
        if self._loaded or not self._load_builtins:
            return
        self._loaded = True
        import chunkwise.chunk.strategy  # noqa: F401  (registers built-in chunkers)

    def names(self) -> list[str]:
        """Registered strategy names, sorted."""
        self._ensure_loaded()
        return sorted(self._factories)

    def create(self, name: str, config: ChunkwiseConfig) -> BaseChunker:
        """Build the chunker registered as ``name``.

        Raises:
            PluginError: If no strategy is registered under ``name``.
        """
        self._ensure_loaded()
        factory = self._factories.get(name)
        if factory is None:
            raise PluginError(
                f"Unknown strategy '{name}'. Available: {', '.join(self.names()) or 'none'}"
            )
        logger.debug("Creating %s chunker", name)
        return factory(config)


default_registry = ChunkerRegistry(load_builtins=True)
