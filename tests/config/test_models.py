"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from fdm.config.models import FdmConfig, GameConfig, PasswordConfig


def test_defaults() -> None:
    cfg = FdmConfig()
    assert cfg.password == PasswordConfig(min_length=8, require_digit=True)
    assert cfg.game == GameConfig(prompt="> ", start="hall")


def test_min_length_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        PasswordConfig(min_length=0)


def test_frozen() -> None:
    with pytest.raises(ValidationError):
        GameConfig().start = "cellar"  # type: ignore[misc]
