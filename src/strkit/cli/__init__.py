"""CLI module for strkit."""

import logging
from pathlib import Path

import click

from strkit.cli.exit_codes import ExitCode
from strkit.cli.output import error_exit
from strkit.config.models import StrkitConfig

logger = logging.getLogger(__name__)


def _configure_logging(
    config: StrkitConfig,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Apply the --log-* options on top of the configured logging."""
    from strkit.logging import configure_logging

    configure_logging(
        config.logging.with_overrides(
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    )


@click.group()
@click.version_option(package_name="strkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.strkit/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """strkit - trim, pad, slice, replace and tokenize text."""
    from strkit.config import get_config

    ctx.ensure_object(dict)

    try:
        config = get_config(config_path=config_path)
        _configure_logging(config, log_level, log_file, log_json)
    except ValueError as e:
        error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)

    ctx.obj["config"] = config

    logger.debug(
        "strkit starting: width=%s, capacity=%s",
        config.defaults.width,
        config.defaults.capacity,
    )


# Defer import to avoid circular dependency
def _register_commands():
    from strkit.cli.ops import (
        pad_command,
        replace_command,
        reverse_command,
        slice_command,
        tokenize_command,
        trim_command,
    )
    from strkit.cli.recipe import apply_command

    main.add_command(trim_command)
    main.add_command(pad_command)
    main.add_command(slice_command)
    main.add_command(reverse_command)
    main.add_command(replace_command)
    main.add_command(tokenize_command)
    main.add_command(apply_command)


_register_commands()
