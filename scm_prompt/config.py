"""Configuration handling for scm-prompt"""

from dataclasses import dataclass, field, fields
from typing import Dict, List

from scm_prompt.constants import (
    BRANCH_AHEAD_ICON,
    BRANCH_BEHIND_ICON,
    BRANCH_GONE_ICON,
    BRANCH_IDENTICAL_ICON,
    STATUS_CATEGORIES,
)


@dataclass
class SegmentConfig:
    """Configuration for the source-control prompt segment with validation."""

    # Branch name formatting
    branch_max_length: int = 0  # 0 means no truncation
    truncate_symbol: str = ""
    full_branch_path: bool = True
    branch_patterns: List[str] = field(default_factory=list)  # regex[:group]
    mapped_branches: Dict[str, str] = field(default_factory=dict)  # glob -> label

    # Status summary overrides, category -> "%d" template
    status_formats: Dict[str, str] = field(default_factory=dict)

    # Executable resolution
    native_fallback: bool = False

    # Skip `git status` entirely and only show the branch
    fetch_status: bool = True

    # Upstream tracking icons
    branch_identical_icon: str = BRANCH_IDENTICAL_ICON
    branch_ahead_icon: str = BRANCH_AHEAD_ICON
    branch_behind_icon: str = BRANCH_BEHIND_ICON
    branch_gone_icon: str = BRANCH_GONE_ICON

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_branch_max_length()
        self._validate_branch_patterns()
        self._validate_mapped_branches()
        self._validate_status_formats()

    def _validate_branch_max_length(self):
        """Validate branch_max_length is not negative."""
        if not isinstance(self.branch_max_length, int) or isinstance(self.branch_max_length, bool):
            raise ValueError(f"branch_max_length must be an integer, got {self.branch_max_length!r}")
        if self.branch_max_length < 0:
            raise ValueError(f"branch_max_length must not be negative, got {self.branch_max_length}")

    def _validate_branch_patterns(self):
        """Validate branch_patterns is a list of strings."""
        if isinstance(self.branch_patterns, tuple):
            self.branch_patterns = list(self.branch_patterns)
        if not isinstance(self.branch_patterns, list):
            raise ValueError("branch_patterns must be a list")
        if not all(isinstance(pattern, str) for pattern in self.branch_patterns):
            raise ValueError("branch_patterns must only contain strings")

    def _validate_mapped_branches(self):
        """Validate mapped_branches maps glob strings to label strings."""
        if not isinstance(self.mapped_branches, dict):
            raise ValueError("mapped_branches must be a mapping")
        for key, value in self.mapped_branches.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError(f"mapped_branches entry {key!r} must map a string to a string")

    def _validate_status_formats(self):
        """Validate status_formats only names known categories."""
        if not isinstance(self.status_formats, dict):
            raise ValueError("status_formats must be a mapping")
        allowed = [category.name for category in STATUS_CATEGORIES]
        for key in self.status_formats:
            if not isinstance(key, str) or key.lower() not in allowed:
                raise ValueError(f"status_formats keys must be one of {allowed}, got {key!r}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SegmentConfig":
        """Create SegmentConfig from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
