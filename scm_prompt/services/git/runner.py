"""Git command execution via GitPython"""
import git

from scm_prompt.exceptions import CommandExecutionError
from scm_prompt.logging_config import get_logger

logger = get_logger(__name__)


class GitCommandRunner:
    """Runs a resolved git executable inside a working directory."""

    def __init__(self, repo_path: str):
        """Initialize the runner.

        Args:
            repo_path: Directory the commands run in (string path)
        """
        self.repo_path = repo_path

    def _get_git(self) -> git.Git:
        """Get a command wrapper bound to the working directory."""
        return git.Git(self.repo_path)

    def run(self, command: str, *args: str) -> str:
        """
        Run command with args and return its standard output.

        Args:
            command: Resolved executable name, e.g. "git" or "git.exe"
            *args: Command arguments

        Returns:
            Standard output text, trailing newline removed

        Raises:
            CommandExecutionError: If the executable is missing or exits non-zero
        """
        operation = args[0] if args else "run"
        logger.debug(f"Running {command} {' '.join(args)} in {self.repo_path}")
        try:
            return self._get_git().execute([command, *args])
        except git.exc.GitCommandNotFound as e:
            raise CommandExecutionError(operation, command, "executable not found") from e
        except git.exc.GitCommandError as e:
            stderr = e.stderr.strip() if e.stderr else ""
            if stderr:
                error_msg = f"exit {e.status}: {stderr}"
            else:
                error_msg = f"exit {e.status}"
            raise CommandExecutionError(operation, command, error_msg) from e
