"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``STAFFCTL_*`` prefix
  3. TOML file    — ``staffctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The TOML file is located by :func:`find_config` and fed to Pydantic
Settings through :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from staffctl.config.models import DisplayConfig, StorageConfig, StoreConfig

CONFIG_FILENAME = "staffctl.toml"
CONFIG_ENV_VAR = "STAFFCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate the ``staffctl.toml`` in effect for *start* (default: CWD).

    ``STAFFCTL_CONFIG`` names the file directly and wins when set; if that
    file is missing there is no config.  Otherwise the nearest
    ``staffctl.toml`` in *start* or one of its parents is used.
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


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``staffctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class StaffSettings(BaseSettings):
    """Unified settings for the entire staffctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    :class:`~staffctl.commands._context.AppContext` at the CLI root.

    Attributes:
        project_root: Directory relative data paths resolve against
            (parent of ``staffctl.toml``, or CWD if no config found).
        config_path: The TOML file in effect, or None.
        data_file: ``--data-file`` override for ``[storage] data_file``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STAFFCTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved paths, derived from the config location ---
    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    data_file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

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

    @property
    def resolved_data_file(self) -> Path:
        """Absolute path of the record file in effect."""
        path = self.data_file or Path(self.storage.data_file)
        path = path.expanduser()
        if not path.is_absolute():
            path = self.project_root / path
        return path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> StaffSettings:
        """Construct settings from CLI invocation.

        Discovers ``staffctl.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.  ``None``
        flag values are dropped so they never mask lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **flags,
            )
        finally:
            _tls.toml_path = None
