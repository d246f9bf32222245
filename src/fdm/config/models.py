"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fdm.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PasswordConfig(BaseModel):
    """[password] section."""

    model_config = {"frozen": True}

    min_length: int = Field(default=8, ge=1)
    require_digit: bool = True


class GameConfig(BaseModel):
    """[game] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    start: str = "hall"


class FdmConfig(BaseModel):
    """Root config model — all fdm.toml sections."""

    model_config = {"frozen": True}

    password: PasswordConfig = Field(default_factory=PasswordConfig)
    game: GameConfig = Field(default_factory=GameConfig)
