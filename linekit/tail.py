"""Print the last part of files, by lines or by bytes."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Sequence, Tuple, Union

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class PlusZero:
    """The special "+0" request: print the whole input."""


@dataclass(frozen=True)
class TakeNum:
    """A signed count: negative counts from the end, positive from the start."""

    value: int


TakeValue = Union[PlusZero, TakeNum]


def parse_num(val: str) -> TakeValue:
    """Parse a count argument; a bare number means "from the end".

    Raises ValueError whose message is the rejected text.
    """
    if val == "+0":
        return PlusZero()
    if not _INTEGER.fullmatch(val):
        raise ValueError(val)
    number = int(val)
    if not _I64_MIN <= number <= _I64_MAX:
        raise ValueError(val)
    if "+" not in val and "-" not in val:
        return TakeNum(-number)
    return TakeNum(number)


def count_lines_bytes(filename: str) -> Tuple[int, int]:
    """Return the number of lines and bytes in a file.

    Counting stops at the first line that is not valid UTF-8.
    """
    num_lines = 0
    num_bytes = 0
    with open(filename, "rb") as handle:
        for raw in handle:
            try:
                raw.decode("utf-8")
            except UnicodeDecodeError:
                break
            num_lines += 1
            num_bytes += len(raw)
    return num_lines, num_bytes


def get_start_index(take_val: TakeValue, total: int) -> Optional[int]:
    """Return the zero-based index to start printing from, or None for nothing."""
    if isinstance(take_val, PlusZero):
        return 0 if total > 0 else None

    pos = take_val.value
    if pos == 0 or total == 0:
        return None
    if pos < 0 and -pos >= total:
        return 0
    if abs(pos) <= total:
        return pos - 1 if pos > 0 else total + pos
    return None


def tail_lines(file: BinaryIO, take_val: TakeValue, total_lines: int) -> Iterator[str]:
    """Yield the selected lines of a binary file as text.

    Reading stops at the first line that is not valid UTF-8.
    """
    start = get_start_index(take_val, total_lines)
    if start is None:
        return
    for number, raw in enumerate(file, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            return
        if number > start:
            yield line


def tail_bytes(file: BinaryIO, take_val: TakeValue, total_bytes: int) -> Iterator[str]:
    """Yield the selected bytes of a seekable binary file, decoded leniently."""
    start = get_start_index(take_val, total_bytes)
    if start is None:
        return
    file.seek(start)
    for raw in file:
        yield raw.decode("utf-8", errors="replace")


def run(
    files: Sequence[str],
    lines: str = "10",
    byte_count: Optional[str] = None,
    quiet: bool = False,
) -> None:
    """Print the tail of every file to standard output.

    Raises ValueError for an unparseable count; unreadable files are
    reported on standard error and skipped.
    """
    try:
        line_take = parse_num(lines)
    except ValueError as exc:
        raise ValueError(f"illegal line count -- {exc}") from None

    byte_take: Optional[TakeValue] = None
    if byte_count is not None:
        try:
            byte_take = parse_num(byte_count)
        except ValueError as exc:
            raise ValueError(f"illegal byte count -- {exc}") from None

    out = sys.stdout
    show_headers = len(files) > 1 and not quiet

    for position, filename in enumerate(files):
        if show_headers:
            separator = "" if position == 0 else "\n"
            out.write(f"{separator}==> {filename} <==\n")
        try:
            handle = open(filename, "rb")
        except OSError as exc:
            print(f"{filename}: {exc.strerror}", file=sys.stderr)
            continue
        with handle:
            total_lines, total_bytes = count_lines_bytes(filename)
            if byte_take is None:
                out.writelines(tail_lines(handle, line_take, total_lines))
            else:
                out.writelines(tail_bytes(handle, byte_take, total_bytes))
    out.flush()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tail", description="Print the end of files.")
    parser.add_argument("files", nargs="+", metavar="FILE", help="Input file(s)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-n", "--lines", default=None, help="Number of lines")
    group.add_argument("-c", "--bytes", dest="byte_count", default=None, help="Number of bytes")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    args = _build_parser().parse_args(argv)
    lines = args.lines if args.lines is not None else "10"
    try:
        run(args.files, lines, args.byte_count, args.quiet)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc.strerror or exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())