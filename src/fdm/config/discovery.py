"""Locating and reading ``fdm.toml``.

The nearest ``fdm.toml`` in the working directory or any ancestor applies,
the way git finds ``.git``. ``FDM_CONFIG`` names a file directly and skips
the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from fdm.config.models import FdmConfig

CONFIG_FILENAME = "fdm.toml"
CONFIG_ENV_VAR = "FDM_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    When ``FDM_CONFIG`` is set but names no file, no config applies.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> FdmConfig:
    """Parse *path* (or the discovered file) into :class:`FdmConfig`.

    Missing sections and keys keep their defaults; no file at all yields
    ``FdmConfig()``.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If a value is out of range.
    """
    source = path if path is not None else find_config(cwd)
    if source is None:
        return FdmConfig()
    with source.open("rb") as fh:
        return FdmConfig.model_validate(tomllib.load(fh))
