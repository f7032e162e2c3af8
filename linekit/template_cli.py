"""Render template lines read from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Mapping, Optional, Sequence

from linekit.template_generator import generate_html_tag, generate_html_template_var
from linekit.template_parser import (
    ExpressionData,
    ForTag,
    IfTag,
    Literal,
    TemplateSyntaxError,
    get_content_type,
)


def _default_context() -> Dict[str, List[str]]:
    return {"name": ["Bob"], "city": ["Boston"]}


def render_line(line: str, context: Mapping[str, List[str]]) -> str:
    """Render one template line to its HTML output."""
    content = get_content_type(line)
    if isinstance(content, ExpressionData):
        return generate_html_template_var(content, context).gen_html
    if isinstance(content, Literal):
        return content.text
    if isinstance(content, (ForTag, IfTag)):
        return generate_html_tag(content.content, context)
    return "Unrecognized input"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="template-engine",
        description="Render template lines from standard input to HTML.",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    _build_parser().parse_args(argv)
    context = _default_context()
    for raw in sys.stdin:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]
        try:
            print(render_line(line, context))
        except (TemplateSyntaxError, KeyError, IndexError) as exc:
            print(f"{line}: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())