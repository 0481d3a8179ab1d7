"""Shared fixtures for tips tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tips.config import TipsConfig


@pytest.fixture
def home(tmp_path: Path) -> Path:
    d = tmp_path / "tips"
    d.mkdir()
    return d


@pytest.fixture
def config(home: Path) -> TipsConfig:
    return TipsConfig(home=home)
