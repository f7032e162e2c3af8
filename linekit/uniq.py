"""Collapse adjacent repeated lines, optionally counting them."""

from __future__ import annotations

import argparse
import io
import itertools
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Sequence, TextIO


def uniq_lines(lines: Iterable[str], count: bool = False) -> Iterator[str]:
    """Yield one line per run of adjacent lines equal up to trailing whitespace.

    Each line keeps its own line ending; with ``count`` it is prefixed by
    the run length right-aligned in four columns.
    """
    previous: Optional[str] = None
    repeats = 1
    for line in itertools.chain(lines, [""]):
        if (previous or "").rstrip() == line.rstrip():
            repeats += 1
            continue
        if previous is not None:
            yield f"{repeats:>4} {previous}" if count else previous
        repeats = 1
        previous = line


@contextmanager
def _open_input(name: str) -> Iterator[TextIO]:
    if name != "-":
        with open(name, encoding="utf-8", newline="") as handle:
            yield handle
        return
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield sys.stdin
        return
    wrapper = io.TextIOWrapper(buffer, encoding="utf-8", newline="")
    try:
        yield wrapper
    finally:
        wrapper.detach()


@contextmanager
def _open_output(name: Optional[str]) -> Iterator[TextIO]:
    if name is None:
        yield sys.stdout
        sys.stdout.flush()
        return
    with open(name, "w", encoding="utf-8", newline="") as handle:
        yield handle


def run(in_file: str = "-", out_file: Optional[str] = None, count: bool = False) -> None:
    """Read ``in_file`` ("-" for standard input) and write unique lines to
    ``out_file`` (standard output when None)."""
    with _open_input(in_file) as source, _open_output(out_file) as sink:
        sink.writelines(uniq_lines(source, count))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="uniq", description="Report or omit repeated lines.")
    parser.add_argument("in_file", nargs="?", default="-", help="Input file")
    parser.add_argument("out_file", nargs="?", default=None, help="Output file")
    parser.add_argument("-c", "--count", action="store_true", help="Show counts")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        run(args.in_file, args.out_file, args.count)
    except OSError as exc:
        if exc.filename is not None:
            print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        else:
            print(exc, file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"{args.in_file}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())