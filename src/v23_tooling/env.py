"""Build environment for a target platform.

Starts from a copy of the context's environment, adds the configured Go and
VDL workspaces, the bundled leveldb cgo flags on darwin/linux, and the
cross-compilation settings for the target. The result is a ``Snapshot``;
callers pass ``snapshot.to_dict()`` to the build subprocess.
"""

from __future__ import annotations

import logging
from pathlib import Path

from v23_tooling.config import Config, load_config
from v23_tooling.context import Context
from v23_tooling.envutil import Snapshot
from v23_tooling.errors import ToolingIOError
from v23_tooling.paths import v23_root
from v23_tooling.platforms import Platform, PlatformKind, classify

log = logging.getLogger(__name__)

CGO_OSES = ("darwin", "linux")


def vanadium_environment(
    ctx: Context, platform: Platform, config: Config | None = None
) -> Snapshot:
    """Return the environment for building for ``platform``.

    Raises ConfigError when V23_ROOT is unset, then UnsupportedPlatformError
    before touching anything when the target is neither the host nor a known
    cross-compilation target.
    """
    root = v23_root(ctx.environ)
    kind = classify(platform, ctx.host)
    env = Snapshot(ctx.environ)
    if config is None:
        config = load_config(ctx)
    set_go_path(env, root, config)
    set_vdl_path(env, root, config)
    if platform.os in CGO_OSES:
        set_syncbase_cgo_env(env, root, platform.os)

    log.debug("setting up %s environment for %s", kind.value, platform)
    if kind is PlatformKind.ARM_LINUX:
        set_arm_env(env, root, platform)
    elif kind is PlatformKind.ARM_ANDROID:
        set_android_env(env, root, platform)
    elif kind is PlatformKind.NACL:
        set_nacl_env(env, platform)
    return env


def set_go_path(env: Snapshot, root: Path, config: Config) -> None:
    """Append each configured Go workspace to GOPATH."""
    gopath = env.get_tokens("GOPATH", ":")
    gopath.extend(str(root / ws) for ws in config.go_workspaces)
    env.set_tokens("GOPATH", gopath, ":")


def set_vdl_path(env: Snapshot, root: Path, config: Config) -> None:
    """Append each configured VDL workspace to VDLPATH."""
    vdlpath = env.get_tokens("VDLPATH", ":")
    vdlpath.extend(str(root / ws) for ws in config.vdl_workspaces)
    env.set_tokens("VDLPATH", vdlpath, ":")


def set_syncbase_cgo_env(env: Snapshot, root: Path, os_name: str) -> None:
    """Enable cgo and point CGO_CFLAGS/CGO_LDFLAGS at the bundled leveldb."""
    env.set("CGO_ENABLED", "1")
    cflags = env.get_tokens("CGO_CFLAGS", " ")
    ldflags = env.get_tokens("CGO_LDFLAGS", " ")
    leveldb = root / "third_party" / "cout" / "leveldb"
    try:
        leveldb.stat()
    except FileNotFoundError:
        log.debug("%s not found, leaving cgo flags unchanged", leveldb)
    except OSError as e:
        msg = f"stat {leveldb} failed: {e}"
        raise ToolingIOError(msg) from e
    else:
        cflags.append(f"-I{leveldb / 'include'}")
        ldflags.append(f"-L{leveldb / 'lib'}")
        if os_name == "linux":
            ldflags.extend(["-Wl,-rpath", str(leveldb / "lib")])
    env.set_tokens("CGO_CFLAGS", cflags, " ")
    env.set_tokens("CGO_LDFLAGS", ldflags, " ")


def _goarm(platform: Platform) -> str:
    return platform.sub_arch.removeprefix("v")


def set_arm_env(env: Snapshot, root: Path, platform: Platform) -> None:
    """Cross-compilation for arm/linux: GOARCH/GOARM/GOOS and the arm toolchains first on PATH."""
    env.set("GOARCH", platform.arch)
    env.set("GOARM", _goarm(platform))
    env.set("GOOS", platform.os)
    toolchain = [
        str(root / "third_party" / "cout" / "xgcc" / "cross_arm"),
        str(root / "third_party" / "repos" / "go_arm" / "bin"),
    ]
    env.set_tokens("PATH", toolchain + env.get_tokens("PATH", ":"), ":")


def set_android_env(env: Snapshot, root: Path, platform: Platform) -> None:
    """Cross-compilation for arm/android: cgo on and the android Go first on PATH."""
    env.set("CGO_ENABLED", "1")
    env.set("GOOS", platform.os)
    env.set("GOARCH", platform.arch)
    env.set("GOARM", _goarm(platform))
    toolchain = [str(root / "environment" / "android" / "go" / "bin")]
    env.set_tokens("PATH", toolchain + env.get_tokens("PATH", ":"), ":")


def set_nacl_env(env: Snapshot, platform: Platform) -> None:
    env.set("GOARCH", platform.arch)
    env.set("GOOS", platform.os)
