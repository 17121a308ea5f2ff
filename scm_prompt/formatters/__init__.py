"""Formatting utilities for scm-prompt.

This package provides the formatting functions for the prompt segment,
organized into logical modules:
- branch: Branch name mapping, pattern extraction and truncation
- status: Upstream tracking and full segment formatting
"""

# Branch formatters
from .branch import (
    BranchFormatter,
    BranchPattern,
    parse_branch_pattern,
    extract_branch,
    map_branch,
    truncate,
)

# Status formatters
from .status import (
    format_branch_status,
    format_segment,
)

__all__ = [
    # Branch
    "BranchFormatter",
    "BranchPattern",
    "parse_branch_pattern",
    "extract_branch",
    "map_branch",
    "truncate",
    # Status
    "format_branch_status",
    "format_segment",
]
