"""Shared pytest fixtures for microresult tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep config discovery and logging state from leaking between tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("MICRORESULT_CONFIG", "MICRORESULT_CODEC__COMPACT", "MICRORESULT_CODEC__INDENT"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("microresult")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
    structlog.contextvars.clear_contextvars()


def write_json(path: Path, payload: Any) -> Path:
    """Write *payload* as JSON to *path* and return the path."""
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
