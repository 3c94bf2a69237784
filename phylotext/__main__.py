"""Command-line interface."""
import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .errors import TreeRenderError
from .logging_config import setup_logging
from .tree_components import TextTreeDescriber, caterpillar_tree, parse_newick, read_newick

logger = logging.getLogger("phylotext.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phylotext",
        description="Render a Newick tree as a fixed-size text grid.",
    )
    parser.add_argument("tree", nargs="?", help="Newick file, or '-' to read stdin")
    parser.add_argument("--width", type=int, default=80, help="grid width in characters (default: 80)")
    parser.add_argument("--height", type=int, default=20, help="grid height in rows (default: 20)")
    parser.add_argument(
        "--topology-only",
        action="store_true",
        help="draw every branch with unit length",
    )
    parser.add_argument(
        "--chars",
        default="ascii",
        choices=("ascii", "line", "heavy"),
        help="connector glyph set (default: ascii)",
    )
    parser.add_argument("--color", metavar="STYLE", help="rich style for connectors, e.g. 'cyan'")
    parser.add_argument(
        "--demo",
        type=int,
        metavar="DEPTH",
        help="render a generated ladder tree of this depth instead of reading one",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    parser.add_argument("--log-file", metavar="PATH", help="also append log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.demo is None and args.tree is None:
        parser.error("a tree file (or '-') is required unless --demo is given")

    try:
        if args.demo is not None:
            root = caterpillar_tree(args.demo)
        elif args.tree == "-":
            root = parse_newick(sys.stdin.read())
        else:
            root = read_newick(args.tree)

        describer = TextTreeDescriber(
            width=args.width,
            height=args.height,
            topology_only=args.topology_only,
            chars=args.chars,
            connector_style=args.color,
        )
        if args.color:
            console = Console(highlight=False, soft_wrap=True)
            for line in describer.lines(root, include_markup=True):
                console.print(line)
        else:
            describer.describe(root, sys.stdout)
    except (TreeRenderError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
