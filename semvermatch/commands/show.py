"""Show command implementation for semvermatch.

Parses one or more version strings and displays their components.

Typical usage::

    $ semvermatch show 1.0.0-rc.1+build.5 2.1.0
    $ semvermatch show 1.0.0 --format json
"""

from __future__ import annotations

import sys
import json
from typing import Any, Dict, List, Optional, Tuple

import click

from semvermatch.api import parse
from semvermatch.models import Version
from semvermatch.constants import OUTPUT_FORMATS
from semvermatch.exceptions import InvalidVersionError
from semvermatch.context import pass_context, SemverMatchContext
from semvermatch.utils import get_logger, print_error, print_line, print_table

logger = get_logger("commands.show")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@pass_context
def show(
    ctx: SemverMatchContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Parse VERSIONS and display their components.

    Exits with status 1 if any version is invalid; valid ones are still
    displayed.
    """
    output_format = ctx.settings.resolve_output_format(output_format)

    parsed: List[Version] = []
    failures = 0
    for raw in versions:
        try:
            parsed.append(parse(raw))
        except InvalidVersionError as exc:
            print_error(str(exc))
            failures += 1

    logger.info("Parsed %d of %d version(s)", len(parsed), len(versions))

    if parsed:
        if output_format == "json":
            print(json.dumps([_version_to_dict(v) for v in parsed], indent=2))
        elif output_format == "simple":
            for version in parsed:
                print_line(_version_to_line(version))
        else:
            print_table(
                [_version_to_row(v) for v in parsed],
                title="Versions",
                column_styles={
                    "Version": {"style": "bold cyan", "no_wrap": True},
                    "Major": {"justify": "right"},
                    "Minor": {"justify": "right"},
                    "Patch": {"justify": "right"},
                    "Build": {"style": "dim"},
                },
            )

    sys.exit(1 if failures else 0)


def _version_to_dict(version: Version) -> Dict[str, Any]:
    return {
        "version": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "pre": list(version.pre),
        "build": version.build,
    }


def _version_to_row(version: Version) -> Dict[str, str]:
    return {
        "Version": str(version),
        "Major": str(version.major),
        "Minor": str(version.minor),
        "Patch": str(version.patch),
        "Pre": ".".join(str(part) for part in version.pre) or "-",
        "Build": version.build or "-",
    }


def _version_to_line(version: Version) -> str:
    pre = ".".join(str(part) for part in version.pre) or "-"
    return " ".join(
        (
            str(version),
            str(version.major),
            str(version.minor),
            str(version.patch),
            pre,
            version.build or "-",
        )
    )
