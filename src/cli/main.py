"""SpeedBag CLI entry points.
This module exposes commands that address, slice, and group the items
given on the command line. It maps argparse commands onto container calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import SpeedBagConfig
from core.errors import SpeedBagError
from core.logging_config import configure_logging, get_logger
from sequence.indexed_sequence import IndexedSequence

_LOGGER = get_logger(__name__)
_INDEX_PASSTHROUGH = ("-h", "--help", "--")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="speedbag", description="SpeedBag sequence CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_index_command(subparsers)
    _add_slice_command(subparsers)
    _add_group_by_length_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the SpeedBag CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(_guard_index_token(sys.argv[1:] if argv is None else argv))
    configure_logging()
    try:
        config = SpeedBagConfig.from_env()
        configure_logging(config.log_level)
        items = _build_sequence(config, args.items)
        if args.command == "index":
            return _run_index_command(items, args)
        if args.command == "slice":
            return _run_slice_command(items, args)
        if args.command == "group-by-length":
            return _run_group_by_length_command(items)
    except SpeedBagError as error:
        _LOGGER.warning("cli_command_failed", command=args.command, error=str(error))
        print(f"error: {error}", file=sys.stderr)
        return 2
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _guard_index_token(argv: Sequence[str]) -> list[str]:
    """Keep index tokens such as ``-3:`` from being parsed as options.

    Args:
        argv: Raw argument vector.

    Returns:
        Argument vector with ``--`` ahead of the index positionals.
    """
    arguments = list(argv)
    if len(arguments) > 1 and arguments[0] == "index" and arguments[1] not in _INDEX_PASSTHROUGH:
        arguments.insert(1, "--")
    return arguments


def _build_sequence(config: SpeedBagConfig, values: Sequence[str]) -> IndexedSequence:
    """Append CLI items one by one into a configured sequence.

    Args:
        config: Runtime configuration.
        values: Raw item arguments.

    Returns:
        Sequence holding the items in order.
    """
    sequence = IndexedSequence(config.initial_capacity, growth_factor=config.growth_factor)
    for value in values:
        sequence.append(value)
    return sequence


def _run_index_command(items: IndexedSequence, args: argparse.Namespace) -> int:
    """Handle index command.

    Args:
        items: Sequence built from CLI items.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = items[args.token]
    if isinstance(result, IndexedSequence):
        _print_elements(result)
    else:
        print(result)
    return 0


def _run_slice_command(items: IndexedSequence, args: argparse.Namespace) -> int:
    """Handle slice command."""
    _print_elements(items.slice(args.offset, args.length))
    return 0


def _run_group_by_length_command(items: IndexedSequence) -> int:
    """Handle group-by-length command."""
    for group in items.group_by(len):
        print(",".join(group))
    return 0


def _print_elements(sequence: IndexedSequence) -> None:
    for element in sequence:
        print(element)


def _add_index_command(subparsers: Any) -> None:
    """Register index subcommand."""
    parser = subparsers.add_parser(
        "index",
        help="Read one item or a slice using an address such as 2, 1:3, :-2 or 5,3",
    )
    parser.add_argument("token", help="Slice address token")
    parser.add_argument("items", nargs="*", help="Sequence items")


def _add_slice_command(subparsers: Any) -> None:
    """Register slice subcommand."""
    parser = subparsers.add_parser("slice", help="Slice items by offset and optional length")
    parser.add_argument("offset", type=int, help="Start offset; negative counts from the end")
    parser.add_argument("--length", type=int, help="Element count; negative stops before the end")
    parser.add_argument("items", nargs="*", help="Sequence items")


def _add_group_by_length_command(subparsers: Any) -> None:
    """Register group-by-length subcommand."""
    parser = subparsers.add_parser(
        "group-by-length",
        help="Group items by character count in first-seen order",
    )
    parser.add_argument("items", nargs="*", help="Sequence items")
