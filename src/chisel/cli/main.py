"""CLI entrypoint for Chisel."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from chisel import __version__
from chisel.constants.branding import CLI_DESCRIPTION, PROGRAM_NAME
from chisel.constants.config import DEFAULT_CONFIG_PATH
from chisel.constants.reporting import EXIT_ERROR
from chisel.exceptions import ChiselError, ErrorKind
from chisel.reporting import format_error
from chisel.runner import run


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    run_cmd = subparsers.add_parser("run", help="Run chisel with the closest configuration file")
    run_cmd.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_PATH),
        metavar="CONF_FILE",
        help=f"Sets a custom configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    run_cmd.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print(format_error(ErrorKind.NO_SUBCOMMAND.message))
        return EXIT_ERROR

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        report = run(args.config)
    except ChiselError as exc:
        print(format_error(str(exc)))
        return EXIT_ERROR

    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
