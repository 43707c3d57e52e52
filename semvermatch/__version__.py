"""
semvermatch version information.

This module provides a single source of truth for the package version.
The version follows Semantic Versioning and is validated with the
package's own parser.

Version format:
    MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
"""

from __future__ import annotations

from semvermatch.core.parser import parse_version

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Structured version metadata
# ---------------------------------------------------------------------------

VERSION_INFO = parse_version(__version__)

# ---------------------------------------------------------------------------
# Human-readable version (for CLI)
# ---------------------------------------------------------------------------

VERSION_STRING = f"semvermatch {__version__}"
