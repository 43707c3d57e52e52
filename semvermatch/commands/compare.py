"""Compare command implementation for semvermatch.

Prints ``lt``, ``eq`` or ``gt`` for two versions. Build metadata is
ignored, so ``1.0.0+a`` and ``1.0.0+b`` compare ``eq``.

Typical usage::

    $ semvermatch compare 1.0.0-alpha 1.0.0
    lt
"""

from __future__ import annotations

import sys
import json
from typing import Optional

import click

from semvermatch.api import compare as compare_versions
from semvermatch.constants import DEFAULT_COMPARE_FORMAT, OUTPUT_FORMATS
from semvermatch.exceptions import InvalidVersionError
from semvermatch.context import pass_context, SemverMatchContext
from semvermatch.utils import (
    colorize_ordering,
    get_logger,
    print_error,
    print_line,
    print_table,
)

logger = get_logger("commands.compare")


@click.command()
@click.argument("left")
@click.argument("right")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format, else simple).",
)
@pass_context
def compare(
    ctx: SemverMatchContext,
    left: str,
    right: str,
    output_format: Optional[str],
) -> None:
    """Compare version LEFT with version RIGHT."""
    output_format = ctx.settings.resolve_output_format(output_format, DEFAULT_COMPARE_FORMAT)

    try:
        result = compare_versions(left, right)
    except InvalidVersionError as exc:
        print_error(str(exc))
        sys.exit(1)

    logger.debug("compare(%r, %r) = %s", left, right, result)

    if output_format == "json":
        print(json.dumps({"left": left, "right": right, "result": result.value}))
    elif output_format == "simple":
        print_line(result.value)
    else:
        print_table(
            [{"Left": left, "Right": right, "Result": colorize_ordering(result.value)}],
            column_styles={"Result": {"justify": "center"}},
        )
