"""Status summary formatting utilities."""

from typing import TYPE_CHECKING

from scm_prompt.constants import STAGING_SEPARATOR
from scm_prompt.models.status import GitStatus

if TYPE_CHECKING:
    from scm_prompt.config import SegmentConfig


def format_branch_status(status: GitStatus, config: "SegmentConfig") -> str:
    """
    Format upstream tracking information with the configured icons.

    Args:
        status: Parsed git status
        config: Segment configuration holding the icons

    Returns:
        Branch status text, empty when there is no upstream
    """
    return status.branch_status(
        identical_icon=config.branch_identical_icon,
        ahead_icon=config.branch_ahead_icon,
        behind_icon=config.branch_behind_icon,
        gone_icon=config.branch_gone_icon,
    )


def format_segment(branch: str, status: GitStatus, config: "SegmentConfig") -> str:
    """
    Assemble the full segment text.

    Args:
        branch: Already formatted branch name
        status: Parsed git status
        config: Segment configuration

    Returns:
        "<branch>[ <branch status>][ <working>][ |][ <staging>]"

    Example:
        "main ↑1 ~3 x1 | +2"
    """
    parts = [branch] if branch else []

    branch_status = format_branch_status(status, config)
    if branch_status:
        parts.append(branch_status)

    if status.working.changed:
        parts.append(str(status.working))
    if status.working.changed and status.staging.changed:
        parts.append(STAGING_SEPARATOR)
    if status.staging.changed:
        parts.append(str(status.staging))

    return " ".join(parts)
