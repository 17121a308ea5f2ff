"""Tests for executable resolution."""

from unittest.mock import Mock, patch

import pytest

from scm_prompt.constants import PLATFORM_LINUX, PLATFORM_WINDOWS
from scm_prompt.exceptions import CommandNotFoundError
from scm_prompt.services.command_resolver import CommandResolver, SystemEnvironment


def make_environment(os_name="", wsl_shared_path=False, native_fallback=False):
    environment = Mock()
    environment.os_name = Mock(return_value=os_name)
    environment.in_wsl_shared_drive = Mock(return_value=wsl_shared_path)

    def has_command(command):
        if command == "git":
            return True
        if command == "git.exe":
            return not native_fallback
        return False

    environment.has_command = Mock(side_effect=has_command)
    return environment


class TestCommandResolver:
    """Test picking git vs git.exe."""

    @pytest.mark.parametrize(
        "case,expected,os_name,wsl_shared_path,native_fallback,resolved",
        [
            ("On Windows", "git.exe", PLATFORM_WINDOWS, False, False, None),
            ("Cache", "git.exe", "", False, False, {"git": "git.exe"}),
            ("Non Windows", "git", "", False, False, None),
            ("Inside WSL2, non shared", "git", PLATFORM_LINUX, False, False, None),
            ("Inside WSL2, shared", "git.exe", PLATFORM_LINUX, True, False, None),
            ("Inside WSL2, shared fallback", "git", PLATFORM_LINUX, True, True, None),
        ],
    )
    def test_resolve(self, case, expected, os_name, wsl_shared_path, native_fallback, resolved):
        environment = make_environment(os_name, wsl_shared_path, native_fallback)
        resolver = CommandResolver(environment, native_fallback=native_fallback, resolved=resolved)

        assert resolver.resolve("git") == expected, case

    def test_missing_exe_without_fallback(self):
        environment = make_environment(PLATFORM_LINUX, wsl_shared_path=True, native_fallback=True)
        resolver = CommandResolver(environment, native_fallback=False)

        assert resolver.resolve("git") is None
        assert resolver.has_command("git") is False

    def test_result_is_cached(self, mock_environment):
        resolver = CommandResolver(mock_environment)

        assert resolver.resolve("git") == "git"
        assert resolver.resolve("git") == "git"
        assert mock_environment.has_command.call_count == 1

    def test_misses_are_not_cached(self, mock_environment):
        resolver = CommandResolver(mock_environment)

        assert resolver.resolve("hg") is None
        assert resolver.resolve("hg") is None
        assert mock_environment.has_command.call_count == 2

    def test_resolvers_do_not_share_state(self, mock_environment):
        CommandResolver(mock_environment, resolved={"git": "git.exe"})
        assert CommandResolver(mock_environment).resolve("git") == "git"

    def test_require_raises_when_missing(self, mock_environment):
        resolver = CommandResolver(mock_environment)

        with pytest.raises(CommandNotFoundError) as exc_info:
            resolver.require("hg")
        assert exc_info.value.command == "hg"


class TestSystemEnvironment:
    """Test environment detection."""

    def test_windows_platform(self):
        with patch("scm_prompt.services.command_resolver.sys.platform", "win32"):
            assert SystemEnvironment("/tmp").os_name() == PLATFORM_WINDOWS

    def test_linux_platform(self):
        with patch("scm_prompt.services.command_resolver.sys.platform", "linux"):
            assert SystemEnvironment("/tmp").os_name() == PLATFORM_LINUX

    @pytest.mark.parametrize(
        "cwd,expected",
        [
            ("/mnt/c/Users/dev/project", True),
            ("/mnt/d", True),
            ("/home/dev/project", False),
            ("/mnt/data/project", False),
        ],
    )
    def test_wsl_shared_drive(self, cwd, expected):
        environment = SystemEnvironment(cwd)
        with patch.object(environment, "in_wsl", return_value=True):
            assert environment.in_wsl_shared_drive() is expected

    def test_relative_path_on_wsl_shared_drive(self):
        with patch("scm_prompt.services.command_resolver.os.getcwd", return_value="/mnt/c/Users/dev/project"):
            environment = SystemEnvironment(".")
        with patch.object(environment, "in_wsl", return_value=True):
            assert environment.in_wsl_shared_drive() is True

    def test_relative_path_is_made_absolute(self, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)
        assert SystemEnvironment("project").cwd == str(temp_dir.resolve() / "project")

    def test_not_wsl(self):
        environment = SystemEnvironment("/mnt/c/Users")
        with patch.object(environment, "in_wsl", return_value=False):
            assert environment.in_wsl_shared_drive() is False

    def test_wsl_detected_from_environment_variable(self):
        with patch.dict("os.environ", {"WSL_DISTRO_NAME": "Ubuntu"}):
            assert SystemEnvironment("/tmp").in_wsl() is True

    def test_has_command(self):
        with patch("scm_prompt.services.command_resolver.shutil.which", return_value="/usr/bin/git"):
            assert SystemEnvironment("/tmp").has_command("git") is True
        with patch("scm_prompt.services.command_resolver.shutil.which", return_value=None):
            assert SystemEnvironment("/tmp").has_command("git") is False
