"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``VETTED_*`` prefix, ``__`` for nesting
  3. TOML file    — ``vetted.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses ``find_config`` and ``load_config`` from
:mod:`vetted.config.discovery`, so the file is type-checked against
:class:`VettedConfig` before it is merged.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from vetted.config.discovery import find_config, load_config
from vetted.config.models import RulesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``vetted.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = load_config(toml_path).model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class VettedSettings(BaseSettings):
    """Unified settings for the vetted CLI and services.

    Stored on the :class:`AppContext` at the CLI root level.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        rules: Bounds for the person rules.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VETTED_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    rules: RulesConfig = Field(default_factory=RulesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> VettedSettings:
        """Construct settings from CLI invocation.

        Uses an explicit *config_path* when it names a file; otherwise
        discovers ``vetted.toml`` by walking up from *start* (default: cwd).
        CLI flags are merged as highest-priority overrides.

        Raises:
            click.ClickException: If the TOML file or any source holds a
                value of the wrong type.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            import click

            msg = f"Invalid configuration: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
