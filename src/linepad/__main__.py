"""
Command line entry point for Linepad.
"""

import argparse
import curses
import logging
import sys
from typing import List, Optional, TextIO

from .core.filetype import FileType
from .core.line import Line
from .highlight import Highlighter
from .ui.viewer import Viewer, run

logger = logging.getLogger(__name__)


def parse_columns(value: str) -> range:
    """Parse a START:END column window."""

    start, _, end = value.partition(':')
    try:
        column_range = range(int(start or 0), int(end))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid column window: {value!r}")

    if column_range.start < 0:
        raise argparse.ArgumentTypeError(f"invalid column window: {value!r}")

    return column_range


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Linepad - Render text files through the grapheme-aware line model"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to render"
    )
    parser.add_argument(
        "--columns",
        type=parse_columns,
        default=range(0, 80),
        help="Visible column window as START:END (default 0:80)"
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Highlight every occurrence of this text"
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Open the file in the interactive curses viewer"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def load_lines(filename: str) -> List[Line]:
    """Read a file into lines."""

    with open(filename, 'r', encoding='utf-8', errors='replace') as f:
        return [Line(text) for text in f.read().split('\n')]


def dump(lines: List[Line], file_type: FileType, column_range: range,
         query: Optional[str], out: TextIO) -> None:
    """Write every line's visible annotated parts, tagging annotated runs."""

    highlighter = Highlighter(query, None, file_type)
    highlighter.highlight_lines(lines)

    for idx, line in enumerate(lines):
        annotated = line.get_annotated_visible_substr(column_range, highlighter.get_annotations(idx))

        rendered = []
        for part in annotated:
            if part.annotation_type is None:
                rendered.append(part.string)
            else:
                kind = part.annotation_type.value
                rendered.append(f"<{kind}>{part.string}</{kind}>")

        out.write(''.join(rendered) + '\n')


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        lines = load_lines(args.file)
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    sample = '\n'.join(str(line) for line in lines[:100])
    file_type = FileType.detect(args.file, sample)
    logger.debug("Loaded %d lines from %s as %s", len(lines), args.file, file_type)

    if args.view:
        curses.wrapper(run, Viewer(lines, file_type, args.search))
        return 0

    dump(lines, file_type, args.columns, args.search, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
