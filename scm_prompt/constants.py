"""Shared constants for scm-prompt."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class StatusCategory:
    """A change category and its default display symbol."""

    name: str
    symbol: str


# Canonical render order for status summaries
STATUS_CATEGORIES: List[StatusCategory] = [
    StatusCategory("untracked", "?"),
    StatusCategory("added", "+"),
    StatusCategory("modified", "~"),
    StatusCategory("deleted", "-"),
    StatusCategory("moved", ">"),
    StatusCategory("unmerged", "x"),
    StatusCategory("conflicted", "!"),
]


# Porcelain status letters mapped to the counter they increment
STATUS_CODES = {
    "A": "added",
    "M": "modified",
    "T": "modified",
    "D": "deleted",
    "R": "moved",
    "C": "added",
    "U": "unmerged",
    "?": "untracked",
}


# Executable names
GIT_COMMAND = "git"
WINDOWS_SUFFIX = ".exe"

# Platform names reported by Environment.platform()
PLATFORM_WINDOWS = "windows"
PLATFORM_LINUX = "linux"
PLATFORM_DARWIN = "darwin"

# git status invocation used for the segment
GIT_STATUS_ARGS = ["status", "-unormal", "--branch", "--porcelain=2"]

# Placeholder HEAD used by git before the first commit or when detached
DETACHED_HEAD = "(detached)"
INITIAL_OID = "(initial)"
SHORT_SHA_LENGTH = 7


# Upstream tracking icons
BRANCH_IDENTICAL_ICON = "≡"
BRANCH_AHEAD_ICON = "↑"
BRANCH_BEHIND_ICON = "↓"
BRANCH_GONE_ICON = "≢"

# Separator between working and staging summaries
STAGING_SEPARATOR = "|"
