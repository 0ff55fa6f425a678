"""Tests for chunk summaries, whole-text summaries and context assembly."""

from __future__ import annotations

import pytest

from chunkwise.compile.context import assemble_context, format_part
from chunkwise.compile.summary import summarize_chunks, summarize_text
from chunkwise.types import ChunkSummary


class TestSummarizeChunks:
    def test_basic_fields(self):
        assert summarize_chunks(["hello world"]) == [
            ChunkSummary(
                index=0,
                content="hello world",
                length=11,
                word_count=2,
                preview="hello world",
            )
        ]

    def test_indexes_follow_order(self):
        summaries = summarize_chunks(["a", "b", "c"])
        assert [s.index for s in summaries] == [0, 1, 2]
        assert [s.content for s in summaries] == ["a", "b", "c"]

    def test_word_count_ignores_extra_whitespace(self):
        assert summarize_chunks(["  a   b\n c "])[0].word_count == 3

    def test_long_preview_truncated(self):
        summary = summarize_chunks(["x" * 150])[0]
        assert summary.preview == "x" * 100 + "..."
        assert summary.length == 150

    def test_preview_at_limit_not_truncated(self):
        assert summarize_chunks(["y" * 100])[0].preview == "y" * 100

    def test_custom_preview_length(self):
        assert summarize_chunks(["abcdef"], preview_length=3)[0].preview == "abc..."

    def test_empty(self):
        assert summarize_chunks([]) == []


class TestSummarizeText:
    def test_short_text_unchanged(self):
        assert summarize_text("Short.", 500) == "Short."

    def test_marker_sentences_extracted(self):
        text = "This is the main point. Filler sentence here! " + "Padding words. " * 50
        assert summarize_text(text, 100) == "This is the main point."

    def test_multiple_marker_sentences_joined(self):
        text = (
            "First, install it. Some filler? Finally, run it! " + "Padding words. " * 50
        )
        assert summarize_text(text, 100) == "First, install it. Finally, run it."

    def test_no_markers_truncates(self):
        text = "abc " * 200
        assert summarize_text(text, 50) == text[:50] + "..."

    def test_marker_summary_too_long_truncates(self):
        text = "The main idea is long. " * 30
        assert summarize_text(text, 100) == text[:100] + "..."

    def test_custom_markers(self):
        text = "Alpha beta. Gamma delta. " + "Filler text. " * 30
        assert summarize_text(text, 50, markers=["gamma"]) == "Gamma delta."

    def test_markers_case_insensitive(self):
        text = "The KEY result. " + "Other words. " * 30
        assert summarize_text(text, 60) == "The KEY result."

    def test_non_string(self):
        assert summarize_text(None) == ""


class TestAssembleContext:
    def test_parts_labelled_and_separated(self):
        assert assemble_context(["A", "B"]) == "--- Part 1 ---\nA\n\n--- Part 2 ---\nB\n"

    def test_default_max_chunks_is_three(self):
        context = assemble_context(["a", "b", "c", "d", "e"])
        assert "--- Part 3 ---\nc" in context
        assert "--- Part 4 ---" not in context
        assert "d" not in context

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_max_chunks(self, count):
        context = assemble_context(["x"] * 5, count)
        assert context.count("--- Part ") == count

    def test_empty(self):
        assert assemble_context([]) == ""
        assert assemble_context(["a"], 0) == ""

    def test_format_part(self):
        assert format_part(7, "body") == "--- Part 7 ---\nbody\n"
