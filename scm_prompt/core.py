"""Source-control prompt segment"""
from typing import Optional

from scm_prompt.config import SegmentConfig
from scm_prompt.constants import GIT_COMMAND, GIT_STATUS_ARGS
from scm_prompt.exceptions import NotARepositoryError, ScmPromptError
from scm_prompt.formatters import BranchFormatter, format_segment
from scm_prompt.logging_config import get_logger
from scm_prompt.models.status import GitStatus, ScmStatus
from scm_prompt.services.command_resolver import CommandResolver, SystemEnvironment
from scm_prompt.services.git import GitCommandRunner, parse_porcelain_status

logger = get_logger(__name__)


class ScmSegment:
    """Builds the git segment of a shell prompt for one directory."""

    def __init__(
        self,
        repo_path: str,
        config: Optional[SegmentConfig] = None,
        resolver: Optional[CommandResolver] = None,
        runner: Optional[GitCommandRunner] = None,
    ):
        """Initialize the segment.

        Args:
            repo_path: Directory to describe
            config: Segment configuration, defaults when omitted
            resolver: Executable resolver shared for the session
            runner: Command runner (dependency injection for tests)
        """
        self.repo_path = repo_path
        self.config = config or SegmentConfig()
        self.resolver = resolver or CommandResolver(
            SystemEnvironment(repo_path), native_fallback=self.config.native_fallback
        )
        self.runner = runner or GitCommandRunner(repo_path)
        self.branch_formatter = BranchFormatter.from_config(self.config)

    def _git(self, *args: str) -> str:
        # Raises CommandNotFoundError or CommandExecutionError, both ScmPromptError
        return self.runner.run(self.resolver.require(GIT_COMMAND), *args)

    def enabled(self) -> bool:
        """True when git is available and repo_path is inside a work tree."""
        if not self.resolver.has_command(GIT_COMMAND):
            logger.info("git executable not found")
            return False
        try:
            return self._git("rev-parse", "--is-inside-work-tree").strip() == "true"
        except ScmPromptError as e:
            logger.debug(f"Not a git work tree: {e}")
            return False

    def status(self) -> GitStatus:
        """
        Collect branch and change information.

        Command failures degrade to an empty status instead of raising.
        """
        formats = self.config.status_formats
        empty = GitStatus(staging=ScmStatus(formats=dict(formats)), working=ScmStatus(formats=dict(formats)))

        if not self.config.fetch_status:
            empty.head = self.head()
            return empty

        try:
            output = self._git(*GIT_STATUS_ARGS)
        except ScmPromptError as e:
            logger.warning(f"Could not read git status for {self.repo_path}: {e}")
            return empty
        return parse_porcelain_status(output, formats)

    def head(self) -> str:
        """Current branch name, or the short commit SHA when detached."""
        try:
            return self._git("symbolic-ref", "--short", "HEAD").strip()
        except ScmPromptError:
            logger.debug("HEAD is detached, falling back to commit SHA")
        try:
            return self._git("rev-parse", "--short", "HEAD").strip()
        except ScmPromptError as e:
            logger.warning(f"Could not read HEAD for {self.repo_path}: {e}")
            return ""

    def render(self) -> str:
        """
        Render the segment text.

        Raises:
            NotARepositoryError: If repo_path is not inside a git work tree
        """
        if not self.enabled():
            raise NotARepositoryError(self.repo_path)

        status = self.status()
        branch = self.branch_formatter.format(status.head)
        return format_segment(branch, status, self.config)
