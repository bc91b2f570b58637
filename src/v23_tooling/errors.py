"""Error types raised while resolving roots, configs and build environments.

Library code raises these and never recovers locally; the CLI turns them into
``Error: ...`` on stderr and exit code 1.
"""

from __future__ import annotations

from typing import Any


class ToolingError(Exception):
    """Base class for all v23_tooling errors."""


class ConfigError(ToolingError):
    """A required input (environment variable, setting) is missing or empty."""


class ToolingIOError(ToolingError, OSError):
    """Filesystem read, stat or symlink resolution failed."""


class ParseError(ToolingError, ValueError):
    """Config, registry or platform text could not be parsed."""


class NotFoundError(ToolingError, LookupError):
    """A tool or project is not present in the manifest registry."""


class UnsupportedPlatformError(ToolingError, ValueError):
    """The requested platform is not one the environment can be set up for."""

    def __init__(self, platform: Any) -> None:
        self.platform = platform
        super().__init__(f"unsupported platform {platform}")
