"""Status models for source-control changes"""
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional

from scm_prompt.constants import (
    BRANCH_AHEAD_ICON,
    BRANCH_BEHIND_ICON,
    BRANCH_GONE_ICON,
    BRANCH_IDENTICAL_ICON,
    STATUS_CATEGORIES,
    STATUS_CODES,
    StatusCategory,
)
from scm_prompt.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ScmStatus:
    """Per-category change counters for one area (index or work tree)."""

    categories: ClassVar[List[StatusCategory]] = STATUS_CATEGORIES

    untracked: int = 0
    added: int = 0
    modified: int = 0
    deleted: int = 0
    moved: int = 0
    unmerged: int = 0
    conflicted: int = 0
    formats: Dict[str, str] = field(default_factory=dict)  # category -> "%d" template

    @property
    def changed(self) -> bool:
        """True when at least one category has changes."""
        return any(self.count(category.name) > 0 for category in self.categories)

    def count(self, name: str) -> int:
        return getattr(self, name, 0)

    def add(self, code: str) -> None:
        """Increment the counter for a porcelain status letter.

        Unknown letters, '.' and ' ' mean "unchanged" and are ignored.
        """
        name = STATUS_CODES.get(code)
        if name is None:
            return
        setattr(self, name, self.count(name) + 1)

    def _format_for(self, name: str) -> Optional[str]:
        for key, template in self.formats.items():
            if key.lower() == name:
                return template
        return None

    def _render(self, category: StatusCategory, value: int) -> str:
        template = self._format_for(category.name)
        if template is not None:
            try:
                return template % value
            except (TypeError, ValueError) as e:
                logger.debug(f"Ignoring format {template!r} for {category.name}: {e}")
        return f"{category.symbol}{value}"

    def __str__(self) -> str:
        """Compact summary, e.g. "~3 x1"; empty when nothing changed."""
        parts = []
        for category in self.categories:
            value = self.count(category.name)
            if value <= 0:
                continue
            parts.append(self._render(category, value))
        return " ".join(parts)


@dataclass
class GitStatus:
    """Parsed result of `git status --branch --porcelain=2`."""

    head: str = ""
    detached: bool = False
    upstream: Optional[str] = None
    upstream_gone: bool = False
    ahead: int = 0
    behind: int = 0
    staging: ScmStatus = field(default_factory=ScmStatus)
    working: ScmStatus = field(default_factory=ScmStatus)

    def branch_status(
        self,
        identical_icon: str = BRANCH_IDENTICAL_ICON,
        ahead_icon: str = BRANCH_AHEAD_ICON,
        behind_icon: str = BRANCH_BEHIND_ICON,
        gone_icon: str = BRANCH_GONE_ICON,
    ) -> str:
        """Describe how the branch relates to its upstream.

        Returns:
            Empty string without upstream, the gone icon when the upstream
            was deleted, the identical icon when in sync, otherwise ahead
            and/or behind counts, e.g. "↑1 ↓2"
        """
        if not self.upstream:
            return ""
        if self.upstream_gone:
            return gone_icon
        if self.ahead == 0 and self.behind == 0:
            return identical_icon

        parts = []
        if self.ahead > 0:
            parts.append(f"{ahead_icon}{self.ahead}")
        if self.behind > 0:
            parts.append(f"{behind_icon}{self.behind}")
        return " ".join(parts)
