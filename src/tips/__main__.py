"""Entry point: tips [list|edit]

- list [name] [-q QUERY]:  tip names, or the lines of one tip
- edit <name> [--init]:    open a tip in $EDITOR
"""

from __future__ import annotations

import argparse
import logging
import sys

from tips import __version__
from tips.config import ConfigError, load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tips",
        description="List, filter and edit personal tips files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    list_parser = sub.add_parser("list", help="List tips, or the lines of one tip")
    list_parser.add_argument("name", nargs="?", help="Tip to show (default: list all names)")
    list_parser.add_argument("--query", "-q", help="Only show entries containing this substring")

    edit_parser = sub.add_parser("edit", help="Open a tip in $EDITOR")
    edit_parser.add_argument("name", help="Tip to edit")
    edit_parser.add_argument(
        "--init",
        action="store_true",
        help="Create the tips directory and an empty tip file if missing",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.command is None:
        print("Available commands: list, edit")
        return

    try:
        config = load_config()
    except ConfigError as e:
        print(f"tips: {e}", file=sys.stderr)
        sys.exit(1)
    _setup_logging(config.log_level)

    from tips.commands import edit_tips, list_tips

    if args.command == "list":
        list_tips(config, args.name, args.query)
    else:
        edit_tips(config, args.name, args.init)


if __name__ == "__main__":
    main()
