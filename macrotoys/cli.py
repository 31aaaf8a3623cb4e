"""Command line entry that writes one of the generated headers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from macrotoys.generators import generate_prepend_append_args, generate_remove_parenthesis
from macrotoys.splitlist import generate_split_list

_GENERATORS: dict[str, Callable[[], str]] = {
    "prepend-append-args": generate_prepend_append_args,
    "remove-parenthesis": generate_remove_parenthesis,
    "split-list": generate_split_list,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="macrotoys", description="Write a generated preprocessor header."
    )
    parser.add_argument("header", choices=sorted(_GENERATORS), help="header to generate")
    parser.add_argument(
        "-o", "--output", type=Path, help="file to write instead of standard output"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the chosen header and write it out. Returns the exit status."""
    args = _parser().parse_args(argv)
    content = _GENERATORS[args.header]()
    if args.output is not None:
        args.output.write_text(content, encoding="utf-8")
    else:
        sys.stdout.write(content)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())