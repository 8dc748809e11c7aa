"""Command-line entry-point for boffset.

Usage::

    boffset [+|-]<offset> <infile> <outfile>
    boffset -s 4 -- -588 rip.bin fixed.bin
    boffset --config boffset.yaml +24 rip.bin fixed.bin

The offset is in bytes unless ``--sample-size`` is given. All messages go to
stderr. Exit status is 0 on success (including a zero offset) and 1 on any
failure.
"""

from __future__ import annotations

import argparse
import logging
import sys

from boffset.config import ShiftConfig, load_config
from boffset.offset import CD_AUDIO_SAMPLE_SIZE, parse_offset, samples_to_bytes
from boffset.shifter import shift
from boffset.types import ShiftError, UsageError

logger = logging.getLogger("boffset")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


class _HelpAction(argparse.Action):
    """Print help to stderr, like every other message."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit()


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="boffset",
        add_help=False,
        usage="%(prog)s [options] [+|-]<offset> <infile> <outfile>",
        description="Shift a binary file by a byte offset, padding with zeros "
        "so the output has the same size as the input.",
    )
    parser.add_argument("-h", "--help", action=_HelpAction, help="Show this help message and exit")
    parser.add_argument("offset", help="Signed offset, in bytes unless --sample-size is set")
    parser.add_argument("infile", help="Existing input file")
    parser.add_argument("outfile", help="Output file to create (never overwritten)")
    parser.add_argument(
        "-s", "--sample-size", type=int, default=None, metavar="BYTES",
        help=f"Multiply the offset by BYTES ({CD_AUDIO_SAMPLE_SIZE} for CD audio samples)",
    )
    parser.add_argument(
        "--sparse", action="store_true", default=None,
        help="Pad by leaving holes instead of writing zero bytes",
    )
    parser.add_argument("--config", default=None, metavar="PATH", help="YAML configuration file")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    return parser


def _configure_logging(level: str) -> None:
    """Route all boffset messages to stderr, one bare line each."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _resolve_config(args: argparse.Namespace) -> ShiftConfig:
    cfg = load_config(args.config) if args.config else ShiftConfig()
    if args.sparse is not None:
        cfg.sparse = args.sparse
    if args.sample_size is not None:
        cfg.sample_size = args.sample_size
    if args.verbose:
        cfg.log_level = "DEBUG"
    elif args.quiet:
        cfg.log_level = "WARNING"
    cfg.validate()
    return cfg


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return its exit status."""
    parser = _build_parser()
    _configure_logging("INFO")

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        logger.error("%s: error: %s", parser.prog, exc)
        return exc.exit_code

    try:
        cfg = _resolve_config(args)
        _configure_logging(cfg.log_level)
        offset = samples_to_bytes(parse_offset(args.offset), cfg.sample_size)
        shift(offset, args.infile, args.outfile, sparse=cfg.sparse)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        logger.error("%s: error: %s", parser.prog, exc)
        return exc.exit_code
    except ShiftError as exc:
        logger.error("Fatal: %s", exc)
        return exc.exit_code
    return 0


def run() -> None:
    """Console-script entry-point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
