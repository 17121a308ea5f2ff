"""Custom exceptions for scm-prompt"""

from typing import Optional


class ScmPromptError(Exception):
    """Base exception for all scm-prompt errors."""
    pass


class CommandNotFoundError(ScmPromptError):
    """Exception raised when no usable VCS executable can be resolved."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Command '{command}' not found")


class CommandExecutionError(ScmPromptError):
    """Exception raised when running the VCS executable fails."""

    def __init__(self, operation: str, command: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.command = command
        self.message = message

        error_msg = f"Command operation '{operation}' failed"
        if command:
            error_msg += f" for '{command}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NotARepositoryError(CommandExecutionError):
    """Exception raised when the path is not inside a work tree."""

    def __init__(self, path: str):
        super().__init__("is_inside_work_tree", message=f"'{path}' is not inside a work tree")
