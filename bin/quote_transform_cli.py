#!/usr/bin/env python3
"""Quote block transform CLI.

Subcommands:
  convert  Apply a registered transform to a YAML block file
  list     Show the registered (source -> target) transforms

Usage examples:
  bin/quote_transform_cli.py convert block.yaml --to core/quote
  bin/quote_transform_cli.py convert quote.yaml --to core/heading -o out.yaml --output-format html
  bin/quote_transform_cli.py list --from core/quote
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from quote_transforms.config import LOG_LEVELS, OUTPUT_FORMATS, Config
from quote_transforms.document import dump_blocks, load_block, write_blocks
from quote_transforms.exceptions import TransformNotFoundError
from quote_transforms.registry import default_registry

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    config = Config()
    parser = argparse.ArgumentParser(description="Transform text, heading and quote blocks")
    parser.add_argument("--log-level", default=config.log_level, choices=LOG_LEVELS,
                        help="Set the logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command")

    convert = subparsers.add_parser("convert", help="Apply a transform to a block file")
    convert.add_argument("input", type=Path, help="YAML block file")
    convert.add_argument("--to", dest="target", required=True, help="Target block name")
    convert.add_argument("-o", "--output", type=Path, default=None,
                         help="Write the resulting blocks here instead of stdout")
    convert.add_argument("--output-format", default=config.output_format, choices=OUTPUT_FORMATS,
                         help="Content field encoding (default: %(default)s)")

    list_cmd = subparsers.add_parser("list", help="List registered transforms")
    list_cmd.add_argument("--from", dest="source", default=None, help="Only rules from this block")
    return parser


def _run_convert(args: argparse.Namespace) -> int:
    try:
        block = load_block(args.input)
    except ValueError as e:
        print(f"Error: invalid block file {args.input}: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    registry = default_registry()
    try:
        blocks = registry.transform(block, args.target)
    except TransformNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info(f"{block.name} -> {args.target}: {len(blocks)} block(s)")
    if args.output is None:
        sys.stdout.write(dump_blocks(blocks, args.output_format))
        return 0

    write_blocks(args.output, blocks, args.output_format)
    print(f"[convert] wrote: {args.output}")
    return 0


def _run_list(args: argparse.Namespace) -> int:
    registry = default_registry()
    if args.source:
        for target in registry.targets_for(args.source):
            print(f"{args.source} -> {target}")
        return 0
    for rule in registry.rules():
        print(f"{rule.source} -> {rule.target}")
    return 0


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        stream=sys.stderr
    )

    if args.command == "convert":
        return _run_convert(args)
    if args.command == "list":
        return _run_list(args)
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
