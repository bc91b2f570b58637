"""`v23 env` - print the build environment for a platform."""

from __future__ import annotations

import argparse
import json
import shlex
import sys

import yaml

from v23_tooling.cli.parse_common import (
    add_context_args,
    add_platform_arg,
    context_from_args,
    exit_on_error,
    target_platform,
)
from v23_tooling.env import vanadium_environment

FORMATS = ("shell", "json", "yaml")


def format_vars(variables: dict[str, str], fmt: str) -> str:
    """Render variables as shell assignments, a JSON object or a YAML mapping."""
    if fmt == "json":
        return json.dumps(variables, indent=2, sort_keys=True)
    if fmt == "yaml":
        return yaml.safe_dump(variables, default_flow_style=False, sort_keys=True).rstrip("\n")
    return "\n".join(f"{k}={shlex.quote(v)}" for k, v in sorted(variables.items()))


def run_env_argv(argv: list[str] | None = None) -> None:
    """Parse argv and print the resolved environment (changed variables unless names given)."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'v23 env'
    ap = argparse.ArgumentParser(prog="v23 env", description="Print the build environment")
    add_platform_arg(ap)
    add_context_args(ap)
    ap.add_argument(
        "--format", choices=FORMATS, default="shell", help="Output format (default: shell)"
    )
    ap.add_argument("names", nargs="*", help="Variables to print (default: all changed variables)")
    args = ap.parse_args(argv)

    def resolve() -> dict[str, str]:
        ctx = context_from_args(args)
        env = vanadium_environment(ctx, target_platform(args, ctx))
        if args.names:
            return {name: env.get(name) for name in args.names}
        return env.delta()

    variables = exit_on_error(resolve)
    out = format_vars(variables, args.format)
    if out:
        print(out)
    sys.exit(0)
