"""
cli.py

sesh - CLI tool to declaratively launch tmux sessions from a YAML spec.

Example:
  sesh dev.yaml
  sesh --verbose -L scratch dev.yaml
  sesh --version

This is the only place that turns errors into messages and exit codes.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__
from .builder import BuilderConfig, SessionBuilder
from .errors import SeshError
from .spec import SessionSpecification
from .tmux import TmuxRunner, tmux_server


def cmd_launch(args: argparse.Namespace) -> int:
    """! @brief Load the spec and build the session it describes.

    @param args Parsed argparse args.
    @return Process exit code.
    @throws SeshError on any open/parse/build failure.
    """
    spec = SessionSpecification.from_yaml(args.spec)
    config = BuilderConfig(verbose=args.verbose)
    runner = TmuxRunner(tmux_server(args.socket_name))
    SessionBuilder(runner, config).build(spec)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sesh",
        description="sesh - CLI tool to declaratively launch tmux sessions from a YAML spec",
    )
    p.add_argument("spec", help="YAML spec path.")
    p.add_argument("--verbose", action="store_true", help="Echo every tmux command before running it.")
    p.add_argument("-L", "--socket-name", help="tmux server socket name (default: tmux's default server).")
    p.add_argument("--version", action="version", version=f"sesh v{__version__}")
    p.set_defaults(func=cmd_launch)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except SeshError as e:
        # YAML errors span several lines; report one.
        print(" ".join(line.strip() for line in str(e).splitlines() if line.strip()), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
