"""Shared CLI arguments (--platform, --manifest, --tool) and context setup."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TypeVar

from v23_tooling.context import DEFAULT_TOOL, Context
from v23_tooling.errors import ToolingError
from v23_tooling.platforms import Platform, parse_platform

T = TypeVar("T")


def add_context_args(ap: argparse.ArgumentParser) -> None:
    """Register --manifest and --tool."""
    ap.add_argument(
        "--manifest",
        default="",
        help="Manifest name or absolute path (default: .local_manifest, else 'default')",
    )
    ap.add_argument(
        "--tool",
        default=DEFAULT_TOOL,
        help=f"Tool whose data directory holds conf.json (default: {DEFAULT_TOOL})",
    )


def add_platform_arg(ap: argparse.ArgumentParser) -> None:
    ap.add_argument(
        "--platform",
        default=None,
        help="Target <arch>-<os>, e.g. armv7-linux, arm-android, amd64p32-nacl (default: host)",
    )


def context_from_args(args: argparse.Namespace) -> Context:
    return Context.from_os(tool_name=args.tool, manifest=args.manifest)


def target_platform(args: argparse.Namespace, ctx: Context) -> Platform:
    """Platform from --platform, or the host platform when not given."""
    if args.platform:
        return parse_platform(args.platform)
    return ctx.host


def exit_on_error(fn: Callable[[], T]) -> T:
    """Run ``fn``; print ToolingError as 'Error: ...' and exit 1."""
    try:
        return fn()
    except ToolingError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
