"""Command line: find files by keyword and copy the chosen ones to a folder."""

from __future__ import annotations

import argparse
import sys

from .session import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filesift",
        description="Find files whose names contain keywords and copy them elsewhere.",
    )
    parser.add_argument("root", help="folder to search, recursively")
    parser.add_argument(
        "-k", "--keyword", action="append", default=[],
        help="keyword the file name must contain (repeatable)",
    )
    parser.add_argument("-o", "--output", help="folder to copy the chosen files into")
    parser.add_argument(
        "-s", "--select", action="append", type=int, default=[],
        help="position of a listed file to copy (repeatable; default: all)",
    )
    parser.add_argument(
        "--invert", action="store_true", help="copy the files not selected instead",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    session = Session()
    for keyword in args.keyword:
        session.add_keyword(keyword)
    try:
        session.query(args.root)
    except ValueError as exc:
        print(f"filesift: {exc}", file=sys.stderr)
        return 2

    for position, entry in enumerate(session.entries):
        print(f"{position}\t{entry.name}\t{entry.extension}\t{entry.size_label()}\t{entry.path}")

    if args.output is None:
        return 0

    try:
        if args.select:
            for position in args.select:
                session.set_checked(position, True)
        else:
            session.select_all()
        if args.invert:
            session.invert_selection()
        results = session.copy_checked(args.output)
    except (ValueError, IndexError) as exc:
        print(f"filesift: {exc}", file=sys.stderr)
        return 2

    for result in results:
        print(f"{result.status}\t{result.source} -> {result.destination}")
    return 0 if all(result.success for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())