from __future__ import annotations

from pathlib import Path

import pytest

from scaffoldgen.config import ScaffoldConfig
from tests._fixtures.completion_builder import CompletionBuilder


@pytest.fixture
def completion() -> CompletionBuilder:
    """Provide a fresh completion builder."""
    return CompletionBuilder()


@pytest.fixture
def mock_config(tmp_path: Path) -> ScaffoldConfig:
    """Configuration that routes every model to the offline mock provider."""
    return ScaffoldConfig(root=tmp_path, mock=True)
