"""Settings for the microresult CLI: flags, env vars and microresult.toml.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MICRORESULT_*`` prefix, ``__`` for nested keys
  3. TOML file    — ``microresult.toml`` found by walking up from the cwd
  4. Code defaults — baked into :class:`~microresult.config.models.CodecConfig`

``MICRORESULT_CONFIG`` or ``--config`` pin the TOML file instead of the
walk-up.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from microresult.config.models import CodecConfig

CONFIG_FILENAME = "microresult.toml"
CONFIG_ENV_VAR = "MICRORESULT_CONFIG"
TOML_SECTIONS = frozenset({"codec"})


def find_config(start: Path | None = None) -> Path | None:
    """Locate the microresult.toml in effect for *start* (default: cwd).

    ``MICRORESULT_CONFIG`` wins when set; if it names a missing file no
    config is used at all. Otherwise the nearest ancestor holding a
    microresult.toml, the way git finds ``.git/``.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the sections of a ``microresult.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        # Only known sections; CLI-only flags cannot be set from the file.
        return {key: value for key, value in self._data.items() if key in TOML_SECTIONS}


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class MicroResultSettings(BaseSettings):
    """Settings for the microresult CLI, frozen after construction.

    Attributes:
        config_path: The TOML file in effect, or None when none was found.
        codec: Default wire format for commands that encode Results.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MICRORESULT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    codec: CodecConfig = Field(default_factory=CodecConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> MicroResultSettings:
        """Construct settings for one CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        :func:`find_config` from *start*. Nested dicts in *cli_flags*
        (``codec={"compact": True}``) merge over the file's sections.

        Raises:
            click.ClickException: The TOML is unparsable, or a value from
                any source fails validation.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            where = toml_path or "environment"
            msg = f"Invalid settings ({where}): {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None

