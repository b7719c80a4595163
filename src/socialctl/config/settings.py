"""Settings for the CLI and MCP server, merged into one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SOCIALCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``socialctl.toml``, found by walking up from the data root
  4. Code defaults — baked into the section models

The TOML layer is pydantic-settings' own :class:`TomlConfigSettingsSource`;
only the file location is decided here.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from socialctl.config.models import DatabaseConfig, McpConfig, UsersConfig

CONFIG_FILENAME = "socialctl.toml"
CONFIG_ENV_VAR = "SOCIALCTL_CONFIG"
DATA_DIRNAME = ".socialctl"

# The file chosen by from_cli(), read while the settings object is built.
_active_toml: ContextVar[Path | None] = ContextVar("socialctl_active_toml", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file the way git locates ``.git``.

    ``$SOCIALCTL_CONFIG`` wins when set (None if it names no file);
    otherwise each directory from *start* (default: cwd) up to the
    filesystem root is checked for ``socialctl.toml``.
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


class SocialSettings(BaseSettings):
    """Resolved configuration for one CLI invocation or MCP server.

    Attributes:
        data_root: Project directory (parent of ``socialctl.toml``, or the
            CWD without one). The SQLite file lives under
            ``{data_root}/.socialctl/``.
        config_path: The config file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SOCIALCTL_",
        "env_nested_delimiter": "__",
    }

    data_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    users: UsersConfig = Field(default_factory=UsersConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = _active_toml.get()
        if toml_path is None:
            return (init_settings, env_settings)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_path),
        )

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the store (explicit URL or the local SQLite file)."""
        if self.database.url:
            return self.database.url
        return f"sqlite:///{self.data_root / DATA_DIRNAME / self.database.filename}"

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        data_root: Path | None = None,
        **cli_flags: Any,
    ) -> SocialSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that names no file means "no config".
        Without *data_root* the config file's directory (or the CWD) is used.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(data_root)

        if data_root is None:
            data_root = toml_path.parent if toml_path else Path.cwd()

        token = _active_toml.set(toml_path)
        try:
            return cls(data_root=data_root, config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _active_toml.reset(token)
