"""Shared fixtures for chunkwise tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

GUIDE = """# Guide

Intro paragraph for the guide. It explains the main idea.

## Installation

Install the package with pip. Then configure the settings file.

## Usage

Run the command line tool against a document. The tool prints chunks.

## Troubleshooting

If something fails, check the log output first.
"""


@pytest.fixture
def sample_document(tmp_path: Path) -> Path:
    """A small markdown document with several sections."""
    f = tmp_path / "guide.md"
    f.write_text(GUIDE, encoding="utf-8")
    return f
