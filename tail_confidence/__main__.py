"""CLI entry point: python -m tail_confidence <original> <processed>"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from tail_confidence.config import get_settings
from tail_confidence.scoring.confidence import (
    confidence_color_class,
    format_confidence,
    get_confidence_score,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tail-confidence",
        description="Score how much a processed text still matches the tail of its original",
    )
    parser.add_argument(
        "original",
        type=str,
        help="Path to the original text ('-' reads stdin)",
    )
    parser.add_argument(
        "processed",
        type=str,
        help="Path to the processed text ('-' reads stdin)",
    )
    parser.add_argument(
        "--tail-length",
        type=int,
        default=None,
        help="Trailing characters compared (default: from config)",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        default=False,
        help="Treat ORIGINAL and PROCESSED as literal text instead of paths",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON",
    )
    args = parser.parse_args(argv)

    if not args.text and args.original == "-" and args.processed == "-":
        parser.error("only one of ORIGINAL / PROCESSED can be read from stdin")
    if args.tail_length is not None and args.tail_length < 0:
        parser.error(f"--tail-length must be >= 0, got {args.tail_length}")

    return args


def _read_source(source: str, *, literal: bool) -> str:
    """Return the text named by a CLI argument."""
    if literal:
        return source
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"ERROR: Cannot read {path}: {exc}", file=sys.stderr)
        sys.exit(1)


def run(args: argparse.Namespace) -> None:
    try:
        settings = get_settings()
    except ValueError as exc:
        print(f"ERROR: Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    # Validate
    errors = settings.validate()
    if errors:
        for err in errors:
            print(f"ERROR: {err}", file=sys.stderr)
        sys.exit(1)

    # CLI flag overrides config
    tail_length = args.tail_length if args.tail_length is not None else settings.tail_length

    original = _read_source(args.original, literal=args.text)
    processed = _read_source(args.processed, literal=args.text)
    result = get_confidence_score(original, processed, tail_length)

    if args.json:
        payload = {**result.to_dict(), "color": confidence_color_class(result.level)}
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(format_confidence(result))


def main() -> None:
    run(parse_args())


if __name__ == "__main__":
    main()
