"""Config file discovery and loading.

Walk-up finder locates vetted.toml, similar to how git finds .git/.
Supports VETTED_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from vetted.config.models import VettedConfig

CONFIG_FILENAME = "vetted.toml"
CONFIG_ENV_VAR = "VETTED_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for vetted.toml.

    Returns the path to the config file, or None if not found.
    Checks VETTED_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> VettedConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default VettedConfig if no file is found. Only keys present in
    the file count as set, so ``model_dump(exclude_unset=True)`` yields the
    sparse overrides.

    Raises:
        click.ClickException: If the file is not UTF-8 TOML.
        pydantic.ValidationError: If a value has the wrong type.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return VettedConfig()

    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        import click

        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
    return VettedConfig.model_validate(data)
