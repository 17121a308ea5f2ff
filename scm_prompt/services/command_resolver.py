"""Resolution of the VCS executable name for the current environment"""
import os
import platform
import re
import shutil
import sys
from typing import Dict, Optional, Protocol

from scm_prompt.constants import (
    PLATFORM_DARWIN,
    PLATFORM_LINUX,
    PLATFORM_WINDOWS,
    WINDOWS_SUFFIX,
)
from scm_prompt.exceptions import CommandNotFoundError
from scm_prompt.logging_config import get_logger

logger = get_logger(__name__)

# Windows drives are mounted under /mnt/<letter> inside WSL
WSL_SHARED_DRIVE = re.compile(r"^/mnt/[a-zA-Z](/|$)")


class Environment(Protocol):
    """The environment signals needed to pick an executable."""

    def os_name(self) -> str:
        ...

    def in_wsl_shared_drive(self) -> bool:
        ...

    def has_command(self, command: str) -> bool:
        ...


class SystemEnvironment:
    """Environment backed by the running interpreter and PATH."""

    def __init__(self, cwd: Optional[str] = None):
        self.cwd = os.path.abspath(cwd or os.getcwd())

    def os_name(self) -> str:
        if sys.platform.startswith("win"):
            return PLATFORM_WINDOWS
        if sys.platform == "darwin":
            return PLATFORM_DARWIN
        return PLATFORM_LINUX

    def in_wsl(self) -> bool:
        """Detect Windows Subsystem for Linux."""
        if os.environ.get("WSL_DISTRO_NAME"):
            return True
        return "microsoft" in platform.uname().release.lower()

    def in_wsl_shared_drive(self) -> bool:
        """True inside WSL when the working directory is on a Windows drive."""
        if not self.in_wsl():
            return False
        return WSL_SHARED_DRIVE.match(str(self.cwd).replace("\\", "/")) is not None

    def has_command(self, command: str) -> bool:
        return shutil.which(command) is not None


class CommandResolver:
    """Resolves and remembers executable names for one session.

    On Windows, and inside WSL on a shared Windows drive, the Windows binary
    (e.g. git.exe) is preferred. With native_fallback the plain binary is used
    when the Windows one is not available.
    """

    def __init__(
        self,
        environment: Environment,
        native_fallback: bool = False,
        resolved: Optional[Dict[str, str]] = None,
    ):
        """Initialize the resolver.

        Args:
            environment: Source of platform and PATH information
            native_fallback: Allow the native binary when the .exe is missing
            resolved: Previously resolved names, keyed by command
        """
        self.environment = environment
        self.native_fallback = native_fallback
        self._resolved: Dict[str, str] = dict(resolved or {})

    def resolve(self, command: str) -> Optional[str]:
        """
        Find the executable name to use for a command.

        Args:
            command: Base command name, e.g. "git"

        Returns:
            The executable name, or None if it is not available
        """
        if command in self._resolved:
            return self._resolved[command]

        resolved = self._lookup(command)
        if resolved:
            logger.debug(f"Resolved '{command}' to '{resolved}'")
            self._resolved[command] = resolved
        else:
            logger.debug(f"Could not resolve '{command}'")
        return resolved

    def require(self, command: str) -> str:
        """Like resolve, but raise CommandNotFoundError when missing."""
        resolved = self.resolve(command)
        if resolved is None:
            raise CommandNotFoundError(command)
        return resolved

    def has_command(self, command: str) -> bool:
        return self.resolve(command) is not None

    def _lookup(self, command: str) -> Optional[str]:
        candidate = command
        if self.environment.os_name() == PLATFORM_WINDOWS or self.environment.in_wsl_shared_drive():
            candidate = command + WINDOWS_SUFFIX

        if self.environment.has_command(candidate):
            return candidate

        if not self.native_fallback or candidate == command:
            return None

        # Fall back to the native binary
        if self.environment.has_command(command):
            return command
        return None
