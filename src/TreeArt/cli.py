"""Command-line entry point: draw a tree from a list of paths."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from TreeArt.markdown_renderer import render_markdown
from TreeArt.renderer import render
from TreeArt.tree_builder import build_tree, parse_path_input

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="treeart",
        description="Draw a list of slash-separated paths as a box-drawing tree.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="File with one path per line (default: read from stdin)",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Label of the root line (default: .)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "markdown"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Markdown heading (default: the root label)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write to this file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def _write_stdout(output: str) -> None:
    """Write *output* to stdout as UTF-8 whatever the console encoding is."""
    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(output)
        return
    sys.stdout.flush()
    stream.write(output.encode("utf-8"))
    stream.flush()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.input:
            raw = Path(args.input).read_text(encoding="utf-8")
        else:
            raw = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read input: {exc}", file=sys.stderr)
        return 1

    paths = parse_path_input(raw)
    logger.debug("Read %d paths", len(paths))
    tree = build_tree(paths, root=args.root)

    if args.format == "markdown":
        output = render_markdown(args.title or args.root, tree)
    else:
        output = render(tree)

    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot write output: {exc}", file=sys.stderr)
            return 1
    else:
        _write_stdout(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
