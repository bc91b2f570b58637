"""Build environment and path resolution for a V23_ROOT source tree."""

from .context import Context
from .env import vanadium_environment
from .envutil import Snapshot
from .errors import (
    ConfigError,
    NotFoundError,
    ParseError,
    ToolingError,
    ToolingIOError,
    UnsupportedPlatformError,
)
from .platforms import Platform, PlatformKind, host_platform, parse_platform

__all__ = [
    "ConfigError",
    "Context",
    "NotFoundError",
    "ParseError",
    "Platform",
    "PlatformKind",
    "Snapshot",
    "ToolingError",
    "ToolingIOError",
    "UnsupportedPlatformError",
    "host_platform",
    "parse_platform",
    "vanadium_environment",
]
