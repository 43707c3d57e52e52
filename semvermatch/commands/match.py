"""Match command implementation for semvermatch.

Evaluates a requirement against a list of candidate versions.

Typical usage::

    # Which of these satisfy the requirement?
    $ semvermatch match "~> 2.1.2" 2.1.1 2.1.6 2.1.6-dev 2.2.0

    # Highest satisfying release, ignoring pre-releases
    $ semvermatch match ">= 2.0.0 and < 3.0.0" 2.4.0 2.9.1 3.0.0 --latest --no-allow-pre

Exit status is 0 when at least one version matches and 1 when none does
or an input is invalid.
"""

from __future__ import annotations

import sys
import json
import warnings
from typing import Any, Dict, List, Optional, Tuple

import click

from semvermatch.api import match as match_version, parse, parse_requirement
from semvermatch.models import Requirement, Version
from semvermatch.constants import OUTPUT_FORMATS
from semvermatch.exceptions import SemverMatchError
from semvermatch.context import pass_context, SemverMatchContext
from semvermatch.utils import (
    get_logger,
    print_error,
    print_line,
    print_success,
    print_table,
    print_warning,
)

logger = get_logger("commands.match")

MatchResult = Tuple[Version, bool]


@click.command()
@click.argument("requirement")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--allow-pre/--no-allow-pre",
    default=None,
    help="Let pre-releases satisfy >, >= and ~> (defaults to the configured allow_pre).",
)
@click.option(
    "--matching-only",
    is_flag=True,
    help="Show only versions that satisfy the requirement.",
)
@click.option(
    "--latest",
    is_flag=True,
    help="Show only the greatest version that satisfies the requirement.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@pass_context
def match(
    ctx: SemverMatchContext,
    requirement: str,
    versions: Tuple[str, ...],
    allow_pre: Optional[bool],
    matching_only: bool,
    latest: bool,
    output_format: Optional[str],
) -> None:
    """Check VERSIONS against REQUIREMENT."""
    settings = ctx.settings
    output_format = settings.resolve_output_format(output_format)
    if allow_pre is None:
        allow_pre = settings.allow_pre

    try:
        parsed_requirement = _parse_requirement_with_advisories(requirement)
        results = [
            (version, match_version(version, parsed_requirement, allow_pre=allow_pre))
            for version in (parse(raw) for raw in versions)
        ]
    except SemverMatchError as exc:
        print_error(str(exc))
        sys.exit(1)

    matching = [version for version, matched in results if matched]
    logger.info(
        "%d of %d version(s) satisfy %s (allow_pre=%s)",
        len(matching),
        len(results),
        parsed_requirement,
        allow_pre,
    )

    if latest:
        _display_latest(parsed_requirement, max(matching) if matching else None, output_format)
    else:
        shown = [r for r in results if r[1]] if matching_only else results
        if output_format == "json":
            _display_json(parsed_requirement, allow_pre, shown)
        elif output_format == "simple":
            _display_simple(shown)
        else:
            _display_table(parsed_requirement, shown)

    sys.exit(0 if matching else 1)


def _parse_requirement_with_advisories(source: str) -> Requirement:
    """Parse ``source`` and surface deprecation warnings to the user."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", DeprecationWarning)
        requirement = parse_requirement(source)

    for warning in caught:
        if issubclass(warning.category, DeprecationWarning):
            print_warning(str(warning.message))
    return requirement


# ---------------------------------------------------------------------------
# Display renderers
# ---------------------------------------------------------------------------


def _display_latest(
    requirement: Requirement,
    latest: Optional[Version],
    output_format: str,
) -> None:
    if output_format == "json":
        print(
            json.dumps(
                {
                    "requirement": str(requirement),
                    "latest": str(latest) if latest is not None else None,
                }
            )
        )
    elif latest is None:
        if output_format != "simple":
            print_error(f"No version satisfies {requirement}")
    elif output_format == "simple":
        print_line(str(latest))
    else:
        print_success(f"{latest} is the latest version satisfying {requirement}")


def _display_json(
    requirement: Requirement,
    allow_pre: bool,
    results: List[MatchResult],
) -> None:
    data: Dict[str, Any] = {
        "requirement": str(requirement),
        "allow_pre": allow_pre,
        "results": [
            {"version": str(version), "matches": matched} for version, matched in results
        ],
    }
    print(json.dumps(data, indent=2))


def _display_simple(results: List[MatchResult]) -> None:
    for version, matched in results:
        print_line(f"{version} {'match' if matched else 'no-match'}")


def _display_table(requirement: Requirement, results: List[MatchResult]) -> None:
    if not results:
        print_warning(f"No version satisfies {requirement}")
        return

    print_table(
        [
            {"Version": str(version), "Matches": "yes" if matched else "no"}
            for version, matched in results
        ],
        title=f"Requirement: {requirement}",
        column_styles={
            "Version": {"style": "bold cyan", "no_wrap": True},
            "Matches": {"justify": "center"},
        },
        row_styler=lambda row: None if row["Matches"] == "yes" else "dim",
    )
