"""Data models for scm-prompt."""

from .status import ScmStatus, GitStatus

__all__ = ["ScmStatus", "GitStatus"]
