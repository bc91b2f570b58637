"""Build target platforms: (os, arch, sub_arch) descriptors and target dispatch.

Platforms use Go naming (``amd64``, ``386``, ``arm``; ``linux``, ``darwin``,
``android``, ``nacl``). The set of targets the environment can be prepared
for is closed, see ``PlatformKind``.
"""

from __future__ import annotations

import platform as _platform
import re
import sys
from dataclasses import dataclass
from enum import Enum

from v23_tooling.errors import ParseError, UnsupportedPlatformError

# platform.machine() -> GOARCH
MACHINE_ARCHES: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
}

# sys.platform prefix -> GOOS
SYS_PLATFORM_OSES: dict[str, str] = {
    "linux": "linux",
    "darwin": "darwin",
    "win32": "windows",
    "cygwin": "windows",
    "freebsd": "freebsd",
}

NACL_ARCHES = frozenset({"386", "amd64p32"})

_ARM_SUB_ARCH = re.compile(r"^arm(v\d+)$")


@dataclass(frozen=True)
class Platform:
    os: str
    arch: str
    sub_arch: str = ""

    def __str__(self) -> str:
        return f"{self.arch}{self.sub_arch}-{self.os}"


class PlatformKind(Enum):
    HOST = "host"
    ARM_LINUX = "arm-linux"
    ARM_ANDROID = "arm-android"
    NACL = "nacl"


def parse_platform(text: str) -> Platform:
    """Parse ``<arch>[<sub_arch>]-<os>``, e.g. ``armv7-android`` or ``amd64p32-nacl``."""
    parts = text.strip().split("-")
    if len(parts) != 2 or not all(parts):
        msg = f"invalid platform {text!r}: expected <arch>-<os>"
        raise ParseError(msg)
    arch, os_name = parts
    m = _ARM_SUB_ARCH.match(arch)
    if m:
        return Platform(os=os_name, arch="arm", sub_arch=m.group(1))
    return Platform(os=os_name, arch=arch)


def host_platform() -> Platform:
    """Platform of the running machine, in Go naming."""
    machine = _platform.machine().lower()
    arch = MACHINE_ARCHES.get(machine, machine)
    os_name = next(
        (goos for prefix, goos in SYS_PLATFORM_OSES.items() if sys.platform.startswith(prefix)),
        sys.platform,
    )
    return Platform(os=os_name, arch=arch)


def classify(target: Platform, host: Platform) -> PlatformKind:
    """Map ``target`` onto the closed set of supported targets relative to ``host``."""
    if target.arch == host.arch and target.os == host.os:
        return PlatformKind.HOST
    if target.arch == "arm" and target.os == "linux":
        return PlatformKind.ARM_LINUX
    if target.arch == "arm" and target.os == "android":
        return PlatformKind.ARM_ANDROID
    if target.arch in NACL_ARCHES and target.os == "nacl":
        return PlatformKind.NACL
    raise UnsupportedPlatformError(target)
