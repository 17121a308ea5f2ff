"""Version information for scm-prompt."""

__version__ = "0.1.0"
