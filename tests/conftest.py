"""Shared pytest fixtures and configuration for the zk-cli test suite.

Guidelines
----------
* No network access in any test.
* Tests must never read the real user's configuration file.
* Command output is captured through an in-memory sink, not stdout.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``$ZK_CONFIG`` at a not-yet-existing file under *tmp_path*."""
    path = tmp_path / "zk" / "config.yaml"
    monkeypatch.setenv("ZK_CONFIG", str(path))
    monkeypatch.delenv("ZK_LOG_LEVEL", raising=False)
    return path


@pytest.fixture(autouse=True)
def _restore_zk_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during a test."""
    logger = logging.getLogger("zk")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()
