"""Command line entrypoint for isomorph detection."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Sequence

from Bio import SeqIO

from isomorph_core import Pattern, TiePolicy, get_isomorphs

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List repeated patterns (isomorphs) in a ciphertext"
    )
    parser.add_argument("input", help="Path to the ciphertext, or '-' for stdin")
    parser.add_argument(
        "--format",
        choices=("text", "fasta"),
        default="text",
        help="Input format; fasta reads the first record",
    )
    parser.add_argument(
        "--strip-whitespace",
        action="store_true",
        help="Remove all whitespace (e.g. five-letter groups) before scanning",
    )
    parser.add_argument(
        "--min-length",
        type=non_negative_int,
        default=3,
        help="Shortest pattern to report (0 derives it from --min-significance)",
    )
    parser.add_argument(
        "--max-length",
        type=non_negative_int,
        default=None,
        help="Longest pattern to scan (default: half the input length)",
    )
    parser.add_argument(
        "--min-significance",
        type=non_negative_int,
        default=2,
        help="Minimum number of repeating positions inside a pattern",
    )
    parser.add_argument(
        "--keep-ties",
        action="store_true",
        help="Keep sub-patterns that occur exactly as often as a longer pattern",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes for the per-length scans (1 disables the pool)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the result as JSON instead of a listing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def load_sequence(source: str, fmt: str, strip_whitespace: bool = False) -> str:
    """Read the ciphertext; line breaks are never part of it."""

    if fmt == "fasta":
        if source == "-":
            record = next(SeqIO.parse(sys.stdin, "fasta"), None)
        else:
            record = next(SeqIO.parse(Path(source), "fasta"), None)
        text = str(record.seq) if record is not None else ""
    elif source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")

    if strip_whitespace:
        return "".join(text.split())
    return "".join(text.splitlines())


def to_records(isomorphs: Dict[Pattern, List[int]]) -> List[dict]:
    return [
        {
            "pattern": pattern.to_string(),
            "length": len(pattern),
            "significance": pattern.significance,
            "distances": list(pattern.distances),
            "offsets": offsets,
        }
        for pattern, offsets in isomorphs.items()
    ]


def print_listing(text: str, isomorphs: Dict[Pattern, List[int]]) -> None:
    if not isomorphs:
        print("No isomorphs found")
        return
    width = len(str(len(text)))
    for pattern, offsets in isomorphs.items():
        print(
            f"pattern {pattern.to_string()} (size = {len(pattern)}, "
            f"significance = {pattern.significance}) at {len(offsets)} positions:"
        )
        for offset in offsets:
            print(f"  {offset:>{width}}: {text[offset : offset + len(pattern)]}")
        print()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = load_sequence(args.input, args.format, args.strip_whitespace)
    except (OSError, ValueError) as exc:
        print(f"Could not read {args.input}: {exc}", file=sys.stderr)
        return 1
    if not text:
        print(f"No sequence found in {args.input}", file=sys.stderr)
        return 1
    logger.debug("Loaded sequence of length %d from %s", len(text), args.input)

    isomorphs = get_isomorphs(
        text,
        min_length=args.min_length,
        max_length=args.max_length,
        min_significance=args.min_significance,
        tie_policy=TiePolicy.KEEP if args.keep_ties else TiePolicy.DROP,
        max_workers=max(args.workers, 1),
    )

    if args.json:
        print(json.dumps(to_records(isomorphs), indent=2))
    else:
        print_listing(text, isomorphs)
    return 0


if __name__ == "__main__":
    sys.exit(main())
