from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.source_builder import SourceBuilder


@pytest.fixture
def source_builder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SourceBuilder:
    """Provide a source tree builder and run the test from inside its root."""
    builder = SourceBuilder(tmp_path)
    monkeypatch.chdir(builder.root)
    return builder


@pytest.fixture(autouse=True)
def _propagate_srcdoc_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep srcdoc records visible to caplog even after the CLI configured logging."""
    logger = logging.getLogger("srcdoc")
    monkeypatch.setattr(logger, "propagate", True)
    monkeypatch.setattr(logger, "handlers", [])
