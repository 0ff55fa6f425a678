"""Configuration system for chunkwise.

Manages tunables via an optional chunkwise.toml with typed dataclasses
and sensible defaults for all values.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

import tomli_w

from chunkwise.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

_T = TypeVar("_T")

__all__ = [
    "CONFIG_FILE",
    "ChatConfig",
    "ChunkwiseConfig",
    "ContextConfig",
    "RankConfig",
    "SplitConfig",
    "SummaryConfig",
    "default_config",
    "load_config",
    "save_config",
]

logger = logging.getLogger(__name__)

CONFIG_FILE = "chunkwise.toml"


@dataclass
class SplitConfig:
    """[split] section.

    Also passed directly to the splitters as their option set.
    """

    char_limit: int = 8000
    overlap: int = 100
    preserve_sentences: bool = True
    preserve_paragraphs: bool = True
    section_separators: list[str] = field(
        default_factory=lambda: ["\n\n", "\n# ", "\n## ", "\n### "]
    )
    sentence_enders: list[str] = field(
        default_factory=lambda: [". ", "! ", "? ", ".\n", "!\n", "?\n"]
    )
    # A boundary is only accepted past this fraction of the remaining budget.
    min_cut_ratio: float = 0.5

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigError: If any value is out of range.
        """
        if self.char_limit < 1:
            raise ConfigError(f"split.char_limit must be >= 1, got {self.char_limit}")
        if self.overlap < 0:
            raise ConfigError(f"split.overlap must be >= 0, got {self.overlap}")
        if not 0 <= self.min_cut_ratio < 1:
            raise ConfigError(
                f"split.min_cut_ratio must be in [0, 1), got {self.min_cut_ratio}"
            )
        for name in ("section_separators", "sentence_enders"):
            if any(not isinstance(s, str) or not s for s in getattr(self, name)):
                raise ConfigError(f"split.{name} must contain only non-empty strings")


@dataclass
class ChatConfig:
    """[chat] section."""

    max_tokens: int = 2000
    # Rough estimate, not tokenizer-exact.
    chars_per_token: int = 4
    strategy: str = "smart"


@dataclass
class RankConfig:
    """[rank] section."""

    max_results: int = 3
    phrase_bonus: int = 10


@dataclass
class ContextConfig:
    """[context] section."""

    max_chunks: int = 3


@dataclass
class SummaryConfig:
    """[summary] section."""

    max_length: int = 500
    preview_length: int = 100
    markers: list[str] = field(
        default_factory=lambda: [
            "important",
            "main",
            "key",
            "basic",
            "fundamental",
            "first",
            "finally",
            "conclusion",
            "summary",
        ]
    )


@dataclass
class ChunkwiseConfig:
    """Root configuration combining all sections."""

    split: SplitConfig = field(default_factory=SplitConfig)
    chat: ChatConfig = field(default_factory=ChatConfig)
    rank: RankConfig = field(default_factory=RankConfig)
    context: ContextConfig = field(default_factory=ContextConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)


_SECTION_MAP: dict[str, type] = {
    "split": SplitConfig,
    "chat": ChatConfig,
    "rank": RankConfig,
    "context": ContextConfig,
    "summary": SummaryConfig,
}


def default_config() -> ChunkwiseConfig:
    """Return a config with all default values."""
    return ChunkwiseConfig()


def _config_to_dict(config: ChunkwiseConfig) -> dict[str, object]:
    """Convert ChunkwiseConfig to a nested dict suitable for TOML serialization."""
    return {name: dict(vars(getattr(config, name))) for name in _SECTION_MAP}


def save_config(config: ChunkwiseConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _config_to_dict(config)
    try:
        with path.open("wb") as f:
            tomli_w.dump(data, f)
        logger.info("Saved config to %s", path)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def _load_section(cls: type[_T], data: dict[str, object]) -> _T:
    """Load a dataclass section from a dict, ignoring unknown keys."""
    known_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    filtered = {k: v for k, v in data.items() if k in known_fields}
    return cls(**filtered)


def load_config(path: Path) -> ChunkwiseConfig:
    """Load configuration from a TOML file.

    Missing sections or keys get default values.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = path.read_bytes()
        data = tomllib.loads(raw.decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    config = ChunkwiseConfig()
    for name, cls in _SECTION_MAP.items():
        section = data.get(name)
        if isinstance(section, dict):
            setattr(config, name, _load_section(cls, section))

    config.split.validate()
    logger.info("Loaded config from %s", path)
    return config
