"""Custom exception hierarchy for chunkwise."""

__all__ = [
    "ChunkError",
    "ChunkwiseError",
    "ConfigError",
    "LoadError",
    "PluginError",
]


class ChunkwiseError(Exception):
    """Base exception for all chunkwise errors."""


class ConfigError(ChunkwiseError):
    """Raised when configuration loading or validation fails."""


class ChunkError(ChunkwiseError):
    """Raised when a chunker is called with invalid arguments."""


class LoadError(ChunkwiseError):
    """Raised when a document cannot be read from disk."""


class PluginError(ChunkwiseError):
    """Raised when a chunking strategy lookup or registration fails."""
