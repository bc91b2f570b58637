"""Main CLI entry point for v23 tooling."""

import logging
import sys

from v23_tooling.cli import env_cmd, paths_cmd, run_cmd


def _usage() -> None:
    print("Usage: v23 [-v] <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  env [--platform P] [--format shell|json|yaml] [NAME...]  - Print the build environment",
        file=sys.stderr,
    )
    print(
        "  run [--platform P] -- CMD...  - Run CMD in the build environment",
        file=sys.stderr,
    )
    print(
        "  paths                         - Print well-known paths under V23_ROOT",
        file=sys.stderr,
    )


def main() -> None:
    """Main CLI entry point."""
    verbose = len(sys.argv) > 1 and sys.argv[1] in ("-v", "--verbose")
    if verbose:
        del sys.argv[1]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(sys.argv) < 2:
        _usage()
        sys.exit(1)

    command = sys.argv[1]
    if command == "env":
        env_cmd.run_env_argv()
    elif command == "run":
        run_cmd.run_run_argv()
    elif command == "paths":
        paths_cmd.run_paths_argv()
    elif command in ("-h", "--help", "help"):
        _usage()
        sys.exit(0)
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
