"""Count lines, words, characters and bytes in files."""

from __future__ import annotations

import argparse
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Optional, Sequence, Union


@dataclass(frozen=True)
class FileInfo:
    """Counts gathered from one input, or the sum of several."""

    num_lines: int = 0
    num_words: int = 0
    num_bytes: int = 0
    num_chars: int = 0

    def __add__(self, other: "FileInfo") -> "FileInfo":
        if not isinstance(other, FileInfo):
            return NotImplemented
        return FileInfo(
            num_lines=self.num_lines + other.num_lines,
            num_words=self.num_words + other.num_words,
            num_bytes=self.num_bytes + other.num_bytes,
            num_chars=self.num_chars + other.num_chars,
        )


def count(file: Iterable[Union[bytes, str]]) -> FileInfo:
    """Count an input given as an iterable of lines, binary or text.

    Binary lines must be valid UTF-8; UnicodeDecodeError is raised otherwise.
    """
    num_lines = num_words = num_bytes = num_chars = 0
    for raw in file:
        if isinstance(raw, bytes):
            text = raw.decode("utf-8")
            size = len(raw)
        else:
            text = raw
            size = len(raw.encode("utf-8"))
        num_lines += 1
        num_words += len(text.split())
        num_bytes += size
        num_chars += len(text)
    return FileInfo(num_lines, num_words, num_bytes, num_chars)


def format_result(
    info: FileInfo,
    filename: str,
    show_lines: bool,
    show_words: bool,
    show_chars: bool,
    show_bytes: bool,
) -> str:
    """Render one result line; the name "-" (standard input) is not shown."""
    columns = [
        (show_lines, info.num_lines),
        (show_words, info.num_words),
        (show_chars, info.num_chars),
        (show_bytes, info.num_bytes),
    ]
    result = "".join(f"{value:>8}" for shown, value in columns if shown)
    if filename != "-":
        result += f" {filename}"
    return result


@contextmanager
def _open(filename: str) -> Iterator[IO]:
    if filename == "-":
        yield getattr(sys.stdin, "buffer", sys.stdin)
        return
    with open(filename, "rb") as handle:
        yield handle


def run(
    files: Sequence[str] = ("-",),
    show_lines: bool = False,
    show_words: bool = False,
    show_bytes: bool = False,
    show_chars: bool = False,
) -> None:
    """Print counts for each file and, for several files, a total.

    With no column selected, lines, words and bytes are shown.
    Unopenable files are reported on standard error and skipped.
    """
    if not (show_lines or show_words or show_bytes or show_chars):
        show_lines, show_words, show_bytes, show_chars = True, True, True, False

    total = FileInfo()
    for filename in files:
        try:
            opened = _open(filename)
            handle = opened.__enter__()
        except OSError as exc:
            print(f"{filename}: {exc.strerror}", file=sys.stderr)
            continue
        try:
            info = count(handle)
        finally:
            opened.__exit__(None, None, None)
        total = total + info
        print(format_result(info, filename, show_lines, show_words, show_chars, show_bytes))

    if len(files) > 1:
        print(format_result(total, "total", show_lines, show_words, show_chars, show_bytes))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wc", description="Count lines, words and bytes.")
    parser.add_argument("files", nargs="*", default=["-"], metavar="FILE", help="Input file(s)")
    parser.add_argument("-l", "--lines", action="store_true", help="Show line count")
    parser.add_argument("-w", "--words", action="store_true", help="Show word count")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-c", "--bytes", action="store_true", help="Show byte count")
    group.add_argument("-m", "--chars", action="store_true", help="Show character count")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        run(args.files, args.lines, args.words, args.bytes, args.chars)
    except UnicodeDecodeError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc.strerror or exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())