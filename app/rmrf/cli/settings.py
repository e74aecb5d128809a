"""Access to the effective configuration from CLI commands."""

from pathlib import Path

import typer

from rmrf.core.config import RmrfConfig, load_config
from rmrf.core.paths import get_config_path


def get_config_file(ctx: typer.Context) -> Path:
    """Return the config file in effect: --config if given, else the default.

    Args:
        ctx: Typer context of the running command.

    Returns:
        Path of the config file commands should read or write.
    """
    if ctx.obj and isinstance(ctx.obj.get("config_path"), Path):
        return ctx.obj["config_path"]
    return get_config_path()


def get_settings(ctx: typer.Context) -> RmrfConfig:
    """Return the configuration loaded by the main callback.

    Falls back to loading the effective config file when a command is
    invoked without the main callback having stored one.

    Args:
        ctx: Typer context of the running command.

    Returns:
        The effective RmrfConfig.
    """
    if ctx.obj and isinstance(ctx.obj.get("settings"), RmrfConfig):
        return ctx.obj["settings"]
    return load_config(get_config_file(ctx))
