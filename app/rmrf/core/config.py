"""User configuration for rmrf.

Settings are stored in ~/.config/rmrf/config.toml. A missing file is
not an error: every setting has a default, and command-line options
override whatever the file says.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rmrf.core.paths import get_config_path

OutputFormat = Literal["table", "json"]


class RmrfConfig(BaseModel):
    """Configuration for rmrf.

    Attributes:
        prune_directories: Remove directory nodes after emptying them.
        protected_patterns: Extra glob patterns that must never be deleted.
        output_format: Default result format for the delete command.
    """

    model_config = ConfigDict(extra="forbid")

    prune_directories: Annotated[
        bool,
        Field(description="Remove directories after their contents are deleted"),
    ] = False
    protected_patterns: Annotated[
        list[str],
        Field(description="Additional glob patterns that are never deleted"),
    ] = []
    output_format: Annotated[
        OutputFormat,
        Field(description="Default output format (table or json)"),
    ] = "table"

    @field_validator("protected_patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject empty patterns and relative patterns."""
        for pattern in v:
            if not pattern.strip():
                msg = "protected pattern cannot be empty"
                raise ValueError(msg)
            if not pattern.startswith(("/", "~")):
                msg = f"protected pattern must start with '/' or '~': {pattern!r}"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> RmrfConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RmrfConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return RmrfConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return RmrfConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: RmrfConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The RmrfConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(mode="json"), f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path
