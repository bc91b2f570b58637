"""`v23 paths` - print the well-known locations under V23_ROOT."""

from __future__ import annotations

import argparse
import sys

from v23_tooling import paths
from v23_tooling.cli.parse_common import add_context_args, context_from_args, exit_on_error
from v23_tooling.config import build_cop_rotation_path, data_dir_path
from v23_tooling.context import Context


def collect_paths(ctx: Context) -> list[tuple[str, str]]:
    """(name, value) pairs for every well-known location of the context."""
    env = ctx.environ
    return [
        ("root", str(paths.v23_root(env))),
        ("manifest-dir", str(paths.manifest_dir(env))),
        ("manifest", str(paths.resolve_manifest_path(ctx.manifest, env))),
        ("local-snapshot-dir", str(paths.local_snapshot_dir(env))),
        ("remote-snapshot-dir", str(paths.remote_snapshot_dir(env))),
        ("data-dir", str(data_dir_path(ctx, ctx.tool_name))),
        ("buildcop-rotation", str(build_cop_rotation_path(ctx))),
        ("git-repo-host", paths.git_repo_host()),
    ]


def run_paths_argv(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'v23 paths'
    ap = argparse.ArgumentParser(prog="v23 paths", description="Print well-known paths")
    add_context_args(ap)
    args = ap.parse_args(argv)
    entries = exit_on_error(lambda: collect_paths(context_from_args(args)))
    for name, value in entries:
        print(f"{name}: {value}")
    sys.exit(0)
