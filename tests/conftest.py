"""Pytest fixtures for scm-prompt tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest
import git

from scm_prompt.config import SegmentConfig
from scm_prompt.constants import PLATFORM_LINUX


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_changes(git_repo):
    """Repository on a feature branch with staged, modified and untracked files."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.checkout('-b', 'feature/test-this-branch')

    (repo_path / "staged.txt").write_text("staged\n")
    repo.index.add(["staged.txt"])

    (repo_path / "README.md").write_text("# Changed\n")
    (repo_path / "untracked.txt").write_text("untracked\n")

    yield repo


@pytest.fixture
def mock_environment():
    """Create a mock Environment for a plain Linux host with git on PATH."""
    environment = Mock()
    environment.os_name = Mock(return_value=PLATFORM_LINUX)
    environment.in_wsl_shared_drive = Mock(return_value=False)
    environment.has_command = Mock(side_effect=lambda command: command == "git")
    return environment


@pytest.fixture
def segment_config():
    """Create a default segment configuration."""
    return SegmentConfig()
