"""Git-related services for scm-prompt."""

from .runner import GitCommandRunner
from .status_parser import parse_porcelain_status

__all__ = [
    "GitCommandRunner",
    "parse_porcelain_status",
]
