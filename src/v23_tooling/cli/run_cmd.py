"""`v23 run` - run a command in the build environment for a platform."""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys

from v23_tooling.cli.parse_common import (
    add_context_args,
    add_platform_arg,
    context_from_args,
    exit_on_error,
    target_platform,
)
from v23_tooling.env import vanadium_environment

log = logging.getLogger(__name__)


def run_run_argv(argv: list[str] | None = None) -> None:
    """Parse argv, resolve the environment and exec the command after '--'. Exits with its code."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'v23 run'
    ap = argparse.ArgumentParser(
        prog="v23 run", description="Run a command in the build environment"
    )
    add_platform_arg(ap)
    add_context_args(ap)
    ap.add_argument("command", nargs=argparse.REMAINDER, help="Command to run (after --)")
    args = ap.parse_args(argv)
    cmd = args.command[1:] if args.command[:1] == ["--"] else args.command
    if not cmd:
        print("v23 run: missing command", file=sys.stderr)
        sys.exit(1)

    def resolve() -> dict[str, str]:
        ctx = context_from_args(args)
        return vanadium_environment(ctx, target_platform(args, ctx)).to_dict()

    env = exit_on_error(resolve)
    log.debug("running %s", cmd)
    try:
        r = subprocess.run(cmd, env=env)
    except OSError as e:
        print(f"Error: running {cmd[0]} failed: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(r.returncode)
