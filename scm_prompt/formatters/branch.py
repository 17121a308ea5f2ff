"""Branch name formatting utilities."""

import re
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Dict, Iterable, Optional, Tuple, TYPE_CHECKING

from scm_prompt.logging_config import get_logger

if TYPE_CHECKING:
    from scm_prompt.config import SegmentConfig

logger = get_logger(__name__)

GLOB_WILDCARDS = "*?["


@dataclass(frozen=True)
class BranchPattern:
    """A parsed `regex[:group]` branch pattern.

    group is None when the whole match should be used. group_valid is False
    when a suffix was given but is not a non-negative integer.
    """

    expression: str
    group: Optional[int] = None
    group_valid: bool = True


def parse_branch_pattern(text: str) -> BranchPattern:
    """
    Split a `regex[:group]` pattern on its last colon.

    Args:
        text: Pattern text, e.g. "feature/(.*):1"

    Returns:
        BranchPattern. "feature/(.*)" and "feature/(.*):" select the whole
        match, "feature/(.*):1" selects group 1, and non-numeric or negative
        suffixes produce an invalid group.

    Example:
        >>> parse_branch_pattern("(.*)/(.*):2")
        BranchPattern(expression='(.*)/(.*)', group=2, group_valid=True)
    """
    expression, separator, suffix = text.rpartition(":")
    if not separator:
        return BranchPattern(text)
    if not suffix:
        return BranchPattern(expression)
    try:
        group = int(suffix)
    except ValueError:
        return BranchPattern(expression, group_valid=False)
    if group < 0:
        return BranchPattern(expression, group, group_valid=False)
    return BranchPattern(expression, group)


def extract_branch(name: str, patterns: Iterable[BranchPattern]) -> str:
    """
    Apply the first matching pattern to a branch name.

    The first pattern whose regex matches governs: a usable group returns its
    text, an invalid or out-of-range group returns the name unchanged.
    Patterns that fail to compile are skipped.
    """
    for pattern in patterns:
        try:
            compiled = re.compile(pattern.expression)
        except re.error as e:
            logger.debug(f"Skipping invalid branch pattern {pattern.expression!r}: {e}")
            continue

        match = compiled.search(name)
        if match is None:
            continue

        if not pattern.group_valid:
            return name
        if pattern.group is None:
            return match.group(0)
        if pattern.group > compiled.groups:
            logger.debug(
                f"Group {pattern.group} out of range for {pattern.expression!r} "
                f"({compiled.groups} groups)"
            )
            return name
        return match.group(pattern.group) or ""

    return name


def glob_prefix(glob: str) -> str:
    """Return the literal text before the first wildcard of a glob."""
    for index, char in enumerate(glob):
        if char in GLOB_WILDCARDS:
            return glob[:index]
    return glob


def map_branch(name: str, mapped_branches: Dict[str, str]) -> Tuple[str, Optional[str]]:
    """
    Replace the literal prefix of the first matching glob with its label.

    Globs are tried longest first so the most specific one wins.

    Returns:
        Tuple of (mapped name, label) where label is None if nothing matched

    Example:
        >>> map_branch("feat/my-new-feature", {"feat/*": "🚀 "})
        ('🚀 my-new-feature', '🚀 ')
    """
    for glob in sorted(mapped_branches, key=lambda key: (-len(key), key)):
        if not fnmatchcase(name, glob):
            continue
        label = mapped_branches[glob]
        return label + name[len(glob_prefix(glob)):], label
    return name, None


def truncate(text: str, max_length: int, symbol: str = "") -> str:
    """
    Cut text to max_length characters, the symbol included.

    Text that already fits is returned untouched, without the symbol.
    """
    if max_length <= 0 or len(text) <= max_length:
        return text
    keep = max(max_length - len(symbol), 0)
    return text[:keep] + symbol


class BranchFormatter:
    """Turns a raw branch name into its prompt display form."""

    def __init__(
        self,
        max_length: int = 0,
        truncate_symbol: str = "",
        full_branch_path: bool = True,
        patterns: Iterable[str] = (),
        mapped_branches: Optional[Dict[str, str]] = None,
    ):
        self.max_length = max_length
        self.truncate_symbol = truncate_symbol
        self.full_branch_path = full_branch_path
        self.patterns = tuple(parse_branch_pattern(pattern) for pattern in patterns)
        self.mapped_branches = dict(mapped_branches or {})

    @classmethod
    def from_config(cls, config: "SegmentConfig") -> "BranchFormatter":
        return cls(
            max_length=config.branch_max_length,
            truncate_symbol=config.truncate_symbol,
            full_branch_path=config.full_branch_path,
            patterns=config.branch_patterns,
            mapped_branches=config.mapped_branches,
        )

    def format(self, branch: str) -> str:
        """
        Format a branch name for display.

        Steps run in order: glob label mapping, pattern extraction, path
        reduction (when full_branch_path is off), then truncation.

        Args:
            branch: Raw branch name

        Returns:
            Display string; the raw name when no rule applies
        """
        name, label = map_branch(branch, self.mapped_branches)
        name = extract_branch(name, self.patterns)

        if not self.full_branch_path:
            name = self._reduce_path(name, label)

        return truncate(name, self.max_length, self.truncate_symbol)

    @staticmethod
    def _reduce_path(name: str, label: Optional[str]) -> str:
        prefix = ""
        if label and name.startswith(label):
            prefix, name = label, name[len(label):]
        if "/" in name:
            name = name.rsplit("/", 1)[1]
        return prefix + name
