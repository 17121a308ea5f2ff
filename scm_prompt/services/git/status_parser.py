"""Parser for `git status --branch --porcelain=2` output"""
from typing import Dict, Optional

from scm_prompt.constants import DETACHED_HEAD, INITIAL_OID, SHORT_SHA_LENGTH
from scm_prompt.models.status import GitStatus, ScmStatus
from scm_prompt.logging_config import get_logger

logger = get_logger(__name__)

# Porcelain v2 line prefixes
BRANCH_HEADER = "#"
ORDINARY_ENTRY = "1"
RENAMED_ENTRY = "2"
UNMERGED_ENTRY = "u"
UNTRACKED_ENTRY = "?"
IGNORED_ENTRY = "!"

# Unmerged XY codes where both sides made the same kind of change
BOTH_SIDES_CONFLICTS = ("AA", "DD")


def _parse_ahead_behind(value: str, status: GitStatus) -> None:
    # "+<ahead> -<behind>"
    for token in value.split():
        try:
            if token.startswith("+"):
                status.ahead = int(token[1:])
            elif token.startswith("-"):
                status.behind = int(token[1:])
        except ValueError:
            logger.debug(f"Unparsable branch.ab token: {token!r}")


def parse_porcelain_status(output: str, formats: Optional[Dict[str, str]] = None) -> GitStatus:
    """
    Parse porcelain v2 status output into counters and branch information.

    Args:
        output: Raw stdout of `git status -unormal --branch --porcelain=2`
        formats: Optional per-category format overrides for both areas

    Returns:
        GitStatus; an empty one for empty output

    Example:
        "# branch.head main\\n1 .M N... 100644 100644 100644 a b file.txt"
        gives head "main" and working.modified == 1
    """
    staging = ScmStatus(formats=dict(formats or {}))
    working = ScmStatus(formats=dict(formats or {}))
    status = GitStatus(staging=staging, working=working)
    oid = ""
    has_ahead_behind = False

    for line in output.splitlines():
        if not line:
            continue

        kind, _, rest = line.partition(" ")

        if kind == BRANCH_HEADER:
            key, _, value = rest.partition(" ")
            if key == "branch.oid":
                oid = value
            elif key == "branch.head":
                status.head = value
            elif key == "branch.upstream":
                status.upstream = value
            elif key == "branch.ab":
                has_ahead_behind = True
                _parse_ahead_behind(value, status)
            continue

        if kind in (ORDINARY_ENTRY, RENAMED_ENTRY):
            codes = rest[:2]
            if len(codes) < 2:
                logger.debug(f"Skipping malformed status line: {line!r}")
                continue
            staging.add(codes[0])
            working.add(codes[1])
        elif kind == UNMERGED_ENTRY:
            # Both sides added or both deleted the path
            if rest[:2] in BOTH_SIDES_CONFLICTS:
                working.conflicted += 1
            else:
                working.unmerged += 1
        elif kind == UNTRACKED_ENTRY:
            working.untracked += 1
        elif kind == IGNORED_ENTRY:
            continue
        else:
            logger.debug(f"Skipping unknown status line: {line!r}")

    if status.head == DETACHED_HEAD:
        status.detached = True
        if oid and oid != INITIAL_OID:
            status.head = oid[:SHORT_SHA_LENGTH]

    # git omits branch.ab when the upstream no longer exists
    if status.upstream and not has_ahead_behind:
        status.upstream_gone = True

    return status
