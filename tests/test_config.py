"""Tests for chunkwise.config module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chunkwise.config import (
    ChunkwiseConfig,
    SplitConfig,
    default_config,
    load_config,
    save_config,
)
from chunkwise.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaultConfig:
    def test_default_has_all_sections(self):
        config = default_config()
        assert config.split is not None
        assert config.chat is not None
        assert config.rank is not None
        assert config.context is not None
        assert config.summary is not None

    def test_default_split_values(self):
        cfg = SplitConfig()
        assert cfg.overlap == 100
        assert cfg.preserve_sentences is True
        assert cfg.preserve_paragraphs is True
        assert cfg.section_separators == ["\n\n", "\n# ", "\n## ", "\n### "]
        assert cfg.sentence_enders == [". ", "! ", "? ", ".\n", "!\n", "?\n"]
        assert cfg.min_cut_ratio == 0.5

    def test_default_utility_values(self):
        config = default_config()
        assert config.chat.max_tokens == 2000
        assert config.chat.chars_per_token == 4
        assert config.chat.strategy == "smart"
        assert config.rank.max_results == 3
        assert config.rank.phrase_bonus == 10
        assert config.context.max_chunks == 3
        assert config.summary.max_length == 500
        assert config.summary.preview_length == 100

    def test_separator_lists_not_shared(self):
        a = SplitConfig()
        b = SplitConfig()
        a.section_separators.append("---")
        assert "---" not in b.section_separators


class TestValidate:
    def test_defaults_valid(self):
        SplitConfig().validate()

    def test_negative_overlap(self):
        with pytest.raises(ConfigError, match="overlap"):
            SplitConfig(overlap=-1).validate()

    @pytest.mark.parametrize("ratio", [-0.1, 1.0, 2.0])
    def test_min_cut_ratio_out_of_range(self, ratio):
        with pytest.raises(ConfigError, match="min_cut_ratio"):
            SplitConfig(min_cut_ratio=ratio).validate()

    def test_char_limit_positive(self):
        with pytest.raises(ConfigError, match="char_limit"):
            SplitConfig(char_limit=0).validate()

    def test_empty_separator(self):
        with pytest.raises(ConfigError, match="section_separators"):
            SplitConfig(section_separators=["\n\n", ""]).validate()

    def test_empty_sentence_ender(self):
        with pytest.raises(ConfigError, match="sentence_enders"):
            SplitConfig(sentence_enders=[""]).validate()

    def test_overlap_above_limit_allowed(self):
        SplitConfig(char_limit=50, overlap=500).validate()


class TestConfigRoundTrip:
    def test_save_and_load_defaults(self, tmp_path: Path):
        path = tmp_path / "chunkwise.toml"
        original = default_config()
        save_config(original, path)
        loaded = load_config(path)
        assert loaded == original

    def test_save_and_load_with_values(self, tmp_path: Path):
        path = tmp_path / "chunkwise.toml"
        config = ChunkwiseConfig()
        config.split.overlap = 25
        config.split.section_separators = ["\n---\n", "\n\n"]
        config.split.min_cut_ratio = 0.25
        config.chat.strategy = "section"
        config.summary.markers = ["note"]

        save_config(config, path)
        loaded = load_config(path)

        assert loaded.split.overlap == 25
        assert loaded.split.section_separators == ["\n---\n", "\n\n"]
        assert loaded.split.min_cut_ratio == 0.25
        assert loaded.chat.strategy == "section"
        assert loaded.summary.markers == ["note"]

    def test_save_creates_parent_dirs(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "chunkwise.toml"
        save_config(default_config(), path)
        assert path.exists()

    def test_load_partial_toml_gets_defaults(self, tmp_path: Path):
        """A TOML with only [split] should get defaults for other sections."""
        path = tmp_path / "chunkwise.toml"
        path.write_text("[split]\noverlap = 10\n", encoding="utf-8")

        loaded = load_config(path)
        assert loaded.split.overlap == 10
        assert loaded.split.preserve_sentences is True
        assert loaded.chat.max_tokens == 2000

    def test_load_ignores_unknown_keys(self, tmp_path: Path):
        path = tmp_path / "chunkwise.toml"
        path.write_text(
            "[split]\noverlap = 5\nmystery = true\n\n[unknown]\nkey = 1\n",
            encoding="utf-8",
        )
        loaded = load_config(path)
        assert loaded.split.overlap == 5


class TestConfigErrors:
    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("this is not [valid toml", encoding="utf-8")
        with pytest.raises(ConfigError, match="Failed to load"):
            load_config(path)

    def test_load_out_of_range_value_raises(self, tmp_path: Path):
        path = tmp_path / "chunkwise.toml"
        path.write_text("[split]\noverlap = -5\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="overlap"):
            load_config(path)
