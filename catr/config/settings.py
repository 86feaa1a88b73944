# catr/config/settings.py
# Configuration management for catr: numbering format, decoding & exit policy

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from ..catr_io.generics import read_json_safe
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.types import (
    DEFAULT_DECODE_ERRORS,
    DEFAULT_NUMBER_SEPARATOR,
    DEFAULT_NUMBER_WIDTH,
)

# environment variable overriding the settings file location
CONFIG_ENV_VAR = "CATR_CONFIG"

VALID_DECODE_ERRORS = {
    "strict",
    "replace",
    "ignore",
    "backslashreplace",
}


# * Default settings dataclass for catr
@dataclass
class CatrSettings:
    # numbered line format: f"{n:>{number_width}}{number_separator}{line}"
    number_width: int = DEFAULT_NUMBER_WIDTH
    number_separator: str = DEFAULT_NUMBER_SEPARATOR

    # codec error handler for input decoding
    decode_errors: str = DEFAULT_DECODE_ERRORS

    # exit non-zero when any source could not be opened
    fail_on_unreadable: bool = True

    # dev mode setting (enables DEBUG diagnostics w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        if (
            isinstance(self.number_width, bool)
            or not isinstance(self.number_width, int)
            or not 1 <= self.number_width <= 20
        ):
            raise SettingsValidationError(
                f"number_width must be an integer 1-20, got {self.number_width!r}",
                "number_width",
                self.number_width,
            )

        if not isinstance(self.number_separator, str):
            raise SettingsValidationError(
                f"number_separator must be a string, "
                f"got {type(self.number_separator).__name__}",
                "number_separator",
                self.number_separator,
            )

        if self.decode_errors not in VALID_DECODE_ERRORS:
            raise SettingsValidationError(
                f"decode_errors must be one of {sorted(VALID_DECODE_ERRORS)}, "
                f"got '{self.decode_errors}'",
                "decode_errors",
                self.decode_errors,
            )

        # strict bool validation (no coercion)
        for name in ("fail_on_unreadable", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    name,
                    value,
                )


# * Default settings file location, honoring CATR_CONFIG
def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".catr" / "config.json"


# * Settings loader backed by a JSON file w/ per-process caching
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._explicit_path = config_path
        self._settings: Optional[CatrSettings] = None

    @property
    def config_path(self) -> Path:
        return self._explicit_path or default_config_path()

    @config_path.setter
    def config_path(self, path: Optional[Path]) -> None:
        self._explicit_path = path
        self._settings = None

    # load settings from file or return defaults
    def load(self) -> CatrSettings:
        if self._settings is not None:
            return self._settings

        path = self.config_path
        if path.exists():
            try:
                data = read_json_safe(path)
                self._settings = CatrSettings(**data)
            except (JSONParsingError, SettingsValidationError, TypeError) as e:
                typer.echo(f"Warning: Invalid config file {path}: {e}", err=True)
                typer.echo("Using default settings", err=True)
                self._settings = CatrSettings()
        else:
            self._settings = CatrSettings()

        return self._settings

    # forget cached settings so the next load() rereads the file
    def reset_cache(self) -> None:
        self._settings = None

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()
