"""Command-line argument parsing for scm-prompt."""

import argparse
from typing import Dict, List, Optional

from scm_prompt.__version__ import __version__


def _key_value(text: str) -> tuple:
    """Parse a KEY=VALUE argument, keeping whitespace in VALUE."""
    key, separator, value = text.partition("=")
    if not separator or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key, value


def pairs_to_dict(pairs: Optional[List[tuple]]) -> Dict[str, str]:
    """Collect repeated KEY=VALUE arguments, later ones win."""
    return dict(pairs or [])


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="scm-prompt",
        description="Print a git status segment for a shell prompt",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to describe (default: cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"scm-prompt {__version__}")
    parser.add_argument(
        "--branch-max-length",
        type=int,
        default=0,
        metavar="N",
        help="Truncate branch names longer than N characters (default: 0, no limit)",
    )
    parser.add_argument(
        "--truncate-symbol", default="", help="Symbol appended to truncated branch names"
    )
    parser.add_argument(
        "--no-full-branch-path",
        action="store_true",
        help="Only show the last path segment of branch names",
    )
    parser.add_argument(
        "--branch-pattern",
        action="append",
        default=[],
        metavar="REGEX[:GROUP]",
        help="Extract part of the branch name; first matching pattern wins (repeatable)",
    )
    parser.add_argument(
        "--map-branch",
        action="append",
        type=_key_value,
        metavar="GLOB=LABEL",
        help="Replace branches matching GLOB with LABEL, e.g. 'feat/*=F ' (repeatable)",
    )
    parser.add_argument(
        "--status-format",
        action="append",
        type=_key_value,
        metavar="CATEGORY=TEMPLATE",
        help="Override how a change category renders, e.g. 'added=+%%d' (repeatable)",
    )
    parser.add_argument(
        "--native-fallback",
        action="store_true",
        help="Use the native git when git.exe is unavailable on a WSL shared drive",
    )
    parser.add_argument(
        "--no-status", action="store_true", help="Only show the branch, skip git status"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
