"""
scm-prompt - Source-control status segment for shell prompts
"""

from .__version__ import __version__
from .config import SegmentConfig
from .core import ScmSegment
from .formatters import BranchFormatter, parse_branch_pattern
from .models import GitStatus, ScmStatus

__all__ = [
    "ScmSegment",
    "SegmentConfig",
    "BranchFormatter",
    "parse_branch_pattern",
    "GitStatus",
    "ScmStatus",
    "__version__",
]
