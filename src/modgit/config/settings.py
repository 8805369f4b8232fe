"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MODGIT_*`` prefix
  3. TOML file    — ``modgit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`modgit.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from modgit.config.discovery import find_config, find_definitions
from modgit.config.models import CatalogConfig, GitConfig, VisibilityConfig


def _read_toml(toml_path: Path | None) -> dict[str, Any]:
    if not toml_path or not toml_path.is_file():
        return {}
    raw = toml_path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        import click

        msg = f"Invalid TOML in {toml_path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``modgit.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ModgitSettings(BaseSettings):
    """Unified settings for the modgit CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        root: Repository root holding the definitions file.
        config_path: The modgit.toml in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MODGIT_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths (not in TOML) ---
    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    visibility: VisibilityConfig = Field(default_factory=VisibilityConfig)

    @property
    def definitions_path(self) -> Path:
        return self.root / self.catalog.filename

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
        root: Path | None = None,
        **cli_flags: Any,
    ) -> ModgitSettings:
        """Construct settings from CLI invocation.

        Discovers ``modgit.toml`` via walk-up (or explicit *config_path*).
        Without an explicit *root*, the root is the nearest directory
        holding the definitions file, else the config file's directory,
        else the CWD.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            catalog = _read_toml(toml_path).get("catalog", {})
            filename = catalog.get("filename", CatalogConfig().filename)
            definitions = find_definitions(filename)
            if definitions is not None:
                resolved_root = definitions.parent
            elif toml_path is not None:
                resolved_root = toml_path.parent
            else:
                resolved_root = Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
