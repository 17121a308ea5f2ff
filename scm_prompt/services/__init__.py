"""Services for scm-prompt."""

from .command_resolver import CommandResolver, Environment, SystemEnvironment
from .git import GitCommandRunner, parse_porcelain_status

__all__ = [
    "CommandResolver",
    "Environment",
    "SystemEnvironment",
    "GitCommandRunner",
    "parse_porcelain_status",
]
