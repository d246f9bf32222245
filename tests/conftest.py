"""Shared pytest fixtures and test helpers for fdm tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fdm.config.settings import FdmSettings
from fdm.services.modeling import ModelingService


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test in an empty temp dir with no FDM_* environment.

    Keeps a developer's own ``fdm.toml`` or env vars from leaking in.
    """
    for key in list(os.environ):
        if key.startswith("FDM_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state; CLI invocations reconfigure logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fdm = logging.getLogger("fdm")
    fdm_level = fdm.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fdm.setLevel(fdm_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> FdmSettings:
    return FdmSettings.from_cli()


@pytest.fixture
def service(settings: FdmSettings) -> ModelingService:
    return ModelingService(settings)
