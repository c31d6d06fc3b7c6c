"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``RANGECTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``rangectl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The ``[tree]``, ``[ranges]`` and ``[lines]`` sections seed the live
:class:`~rangectl.infrastructure.app_state.AppState` of each session.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rangectl.config.discovery import find_config
from rangectl.config.models import LinesConfig, RangesConfig
from rangectl.domain.state import TreeConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rangectl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RangeSettings(BaseSettings):
    """Unified settings for the rangectl CLI.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        tree: Initial tree configuration (board given as card tokens).
        ranges: Initial range string per seat.
        lines: Initial manual game-tree edit counters.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RANGECTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    tree: TreeConfig = Field(default_factory=TreeConfig)
    ranges: RangesConfig = Field(default_factory=RangesConfig)
    lines: LinesConfig = Field(default_factory=LinesConfig)

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
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> RangeSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when it names an existing file, otherwise
        discovers ``rangectl.toml`` by walking up from *search_from*
        (default: cwd). CLI flags override every other source.

        Raises:
            click.ClickException: if the TOML or an env var holds a value
                the section models reject.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(search_from)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid settings ({source}):\n{_describe_errors(exc)}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None


def _describe_errors(exc: ValidationError) -> str:
    lines = []
    for err in exc.errors():
        where = ".".join(str(part) for part in err["loc"])
        lines.append(f"  {where}: {err['msg']}")
    return "\n".join(lines)
