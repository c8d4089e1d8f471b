"""
Command line entry point printing directory snapshots as JSON.

Usage:
    tree-tool tree <directory> [--output FILE] [--max-depth N]
    tree-tool load <directory> [--concurrency N]
    tree-tool files|statuses|dirs <directory>
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Optional, Sequence

from tree_builder.build_tree import build_tree
from tree_builder.config import settings
from tree_builder.errors import TreeError
from tree_filler.fill_tree import (
    list_child_dirs,
    list_child_files,
    list_child_statuses,
    load_all_files,
)

logger = logging.getLogger(__name__)

COMMANDS = ("tree", "load", "files", "statuses", "dirs")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree-tool",
        description="Recursively scan a directory and output a JSON snapshot.",
    )
    parser.add_argument("command", choices=COMMANDS, help="Snapshot to produce")
    parser.add_argument("directory", help="Root directory to scan")
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    parser.add_argument("--max-depth", type=int, default=None, help="Deepest sub-directory level to scan")
    parser.add_argument("--concurrency", type=int, default=None, help="Maximum file reads in flight")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


async def run_command(args: argparse.Namespace) -> Any:
    """Run the selected snapshot operation and return JSON-ready data."""
    if args.command == "tree":
        tree = await build_tree(args.directory, max_depth=args.max_depth)
        return tree.model_dump(mode="json")
    if args.command == "load":
        tree = await load_all_files(args.directory, max_depth=args.max_depth, concurrency=args.concurrency)
        return tree.model_dump(mode="json")
    if args.command == "files":
        items = await list_child_files(args.directory, max_depth=args.max_depth, concurrency=args.concurrency)
    elif args.command == "statuses":
        items = await list_child_statuses(args.directory, max_depth=args.max_depth)
    else:
        items = await list_child_dirs(args.directory, max_depth=args.max_depth)
    return [item.model_dump(mode="json") for item in items]


def start_cli(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = asyncio.run(run_command(args))
    except (TreeError, OSError, ValueError) as exc:
        logger.error("Snapshot of %s failed: %s", args.directory, exc)
        return 1

    output = json.dumps(result, indent=2)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output)
        except OSError as exc:
            logger.error("Could not write %s: %s", args.output, exc)
            return 1
        count = len(result) if isinstance(result, list) else len(result["content"])
        print(f"Snapshot written to {args.output} ({count} entries)")
    else:
        print(output)
    return 0


def main() -> None:
    sys.exit(start_cli())


if __name__ == "__main__":
    main()
