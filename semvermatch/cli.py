"""
Command-line interface for semvermatch.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from semvermatch.config import load_config
from semvermatch.__version__ import __version__
from semvermatch.context import SemverMatchContext
from semvermatch.constants import CONFIG_ENV_VAR
from semvermatch.exceptions import ConfigError, SemverMatchError
from semvermatch.utils.logger import get_logger, level_for_verbosity, setup_logging
from semvermatch.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar=CONFIG_ENV_VAR,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="SEMVERMATCH_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="semvermatch",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """semvermatch: semantic version parsing and requirement matching.

    \b
    Available commands:
      semvermatch show VERSION...              Display version components
      semvermatch compare LEFT RIGHT           Compare two versions
      semvermatch match REQUIREMENT VERSION... Check versions against a requirement

    \b
    Examples:
      semvermatch compare 1.0.0-alpha 1.0.0
      semvermatch match "~> 2.1.2" 2.1.6 2.2.0
      semvermatch -v match ">= 1.0.0 and < 2.0.0" 1.4.2 --latest
    """
    _configure_logging(verbose)

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    semvermatch_ctx = SemverMatchContext()
    semvermatch_ctx.config_path = config or loaded_config.source_path
    semvermatch_ctx.color = color
    semvermatch_ctx.verbose = verbose
    semvermatch_ctx.config = loaded_config
    ctx.obj = semvermatch_ctx

    logger.debug("semvermatch v%s", __version__)
    logger.debug("Config path: %s", semvermatch_ctx.config_path)
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
from semvermatch.commands.show import show  # noqa: E402
from semvermatch.commands.match import match  # noqa: E402
from semvermatch.commands.compare import compare  # noqa: E402

cli.add_command(show)
cli.add_command(compare)
cli.add_command(match)


def main() -> int:
    """Main entry point for the semvermatch CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error, or no match
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except SemverMatchError as exc:
        print_error(str(exc))
        logger.debug(
            "SemverMatchError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
