"""Root directory lookup and well-known paths under it.

Environment variables:
    V23_ROOT: root of the source tree (required). Symlinks are resolved.

Every helper accepts an optional ``environ`` mapping; when omitted the live
process environment is read.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from v23_tooling.errors import ConfigError, ToolingIOError

log = logging.getLogger(__name__)

ROOT_ENV = "V23_ROOT"
GIT_REPO_HOST = "https://vanadium.googlesource.com/"
DEFAULT_MANIFEST = "default"


def git_repo_host() -> str:
    """URL that hosts the source repositories."""
    return GIT_REPO_HOST


def v23_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return the canonical root directory named by V23_ROOT."""
    env = os.environ if environ is None else environ
    root = env.get(ROOT_ENV, "")
    if not root:
        msg = f"{ROOT_ENV} is not set"
        raise ConfigError(msg)
    try:
        resolved = Path(root).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        msg = f"resolving {ROOT_ENV}={root} failed: {e}"
        raise ToolingIOError(msg) from e
    if not resolved.is_dir():
        msg = f"{ROOT_ENV}={root} is not a directory"
        raise ToolingIOError(msg)
    return resolved


def local_manifest_file(environ: Mapping[str, str] | None = None) -> Path:
    return v23_root(environ) / ".local_manifest"


def local_snapshot_dir(environ: Mapping[str, str] | None = None) -> Path:
    return v23_root(environ) / ".snapshot"


def manifest_dir(environ: Mapping[str, str] | None = None) -> Path:
    return v23_root(environ) / ".manifest" / "v2"


def manifest_file(name: str, environ: Mapping[str, str] | None = None) -> Path:
    """Path of the manifest ``name`` relative to the manifest directory."""
    return manifest_dir(environ) / name


def remote_snapshot_dir(environ: Mapping[str, str] | None = None) -> Path:
    return manifest_dir(environ) / "snapshot"


def resolve_manifest_path(name: str = "", environ: Mapping[str, str] | None = None) -> Path:
    """Resolve a manifest name to an absolute path.

    Absolute names are returned unchanged and relative names are looked up in
    the manifest directory. Without a name the local manifest is used when it
    exists, otherwise the ``default`` manifest.
    """
    if name:
        if os.path.isabs(name):
            return Path(name)
        return manifest_file(name, environ)
    path = local_manifest_file(environ)
    try:
        path.stat()
    except FileNotFoundError:
        log.debug("no local manifest at %s, using %s", path, DEFAULT_MANIFEST)
        return resolve_manifest_path(DEFAULT_MANIFEST, environ)
    except OSError as e:
        msg = f"stat {path} failed: {e}"
        raise ToolingIOError(msg) from e
    return path
