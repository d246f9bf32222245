"""FdmSettings: CLI flags, ``FDM_*`` environment and ``fdm.toml`` merged.

Sources, strongest first:

1. keyword arguments (the CLI flags)
2. ``FDM_*`` environment variables; ``__`` reaches into sections,
   e.g. ``FDM_PASSWORD__MIN_LENGTH=12``
3. the ``fdm.toml`` chosen by :meth:`FdmSettings.from_cli`
4. defaults on the section models in :mod:`fdm.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from fdm.config.discovery import find_config
from fdm.config.models import GameConfig, PasswordConfig

# TOML file for the settings object currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("fdm_toml_file", default=None)


def _problems(exc: ValidationError) -> str:
    """``password.min_length: Input should be ...`` per invalid setting."""
    return "; ".join(
        ".".join(str(part) for part in err["loc"]) + f": {err['msg']}" for err in exc.errors()
    )


class FdmSettings(BaseSettings):
    """Frozen settings for one fdm invocation."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="FDM_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    password: PasswordConfig = Field(default_factory=PasswordConfig)
    game: GameConfig = Field(default_factory=GameConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = _toml_file.get()
        if toml_file is None:
            return init_settings, env_settings
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls, toml_file)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FdmSettings:
        """Build settings for a CLI invocation.

        An explicit *config_path* replaces walk-up discovery from *start*
        and is ignored if it names no file.

        Raises:
            click.ClickException: If the chosen file is not valid TOML, or a
                setting (from the file or ``FDM_*``) is out of range.
        """
        if config_path:
            explicit = Path(config_path)
            toml_file = explicit if explicit.is_file() else None
        else:
            toml_file = find_config(start)

        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        except ValidationError as exc:
            source = toml_file or "environment"
            raise click.ClickException(f"Invalid configuration in {source}: {_problems(exc)}") from exc
        finally:
            _toml_file.reset(token)
