#!/usr/bin/env python3
"""
fuzzyselect - pick or rank items by fuzzy match from the command line
"""

import argparse
import logging
import sys
from pathlib import Path

from fuzzyselect.accessors import sequence_getter
from fuzzyselect.config.settings import Settings
from fuzzyselect.errors import ConfigError
from fuzzyselect.matching import MATCHERS, Matcher
from fuzzyselect.selection import TieBreak, select_all, select_best

# Word list from the combo box demo
DEMO_ITEMS = [
    "instruction",
    "Chemistry",
    "Beating Around the Bush",
    "Instantaneous Combustion",
    "Level 999999",
    "nasal problems",
    "On cloud nine",
    "break the iceberg",
    "lacircificane",
    "arm86",
    "chicanery",
    "A quick brown fox",
    "jumps over the lazy dog",
    "Budaphest Hotel",
    "Grand",
    "The",
    "1998204",
    "1-0-1-0-0-1xx",
    "end",
    "Alphabet",
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="fuzzyselect",
        description="Select the best fuzzy match for PATTERN, or rank all matches",
    )
    parser.add_argument("pattern", help="Query to match against the items")
    parser.add_argument(
        "items",
        nargs="*",
        help="Candidate items (default: read from --file, --demo or stdin)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=Path, help="Read candidates from a file, one per line")
    source.add_argument("--demo", action="store_true", help="Use the built-in demo word list")
    parser.add_argument("--all", action="store_true", help="Rank every match instead of picking one")
    parser.add_argument("--strategy", choices=sorted(MATCHERS), help="Scoring strategy")
    parser.add_argument(
        "--tie-break",
        choices=[p.value for p in TieBreak],
        help="How equal scores are resolved when picking one item",
    )
    parser.add_argument("--limit", type=int, help="Show at most N ranked matches (0 = all)")
    parser.add_argument(
        "--highlight", action="store_true", help="Wrap matched characters in brackets"
    )
    parser.add_argument("--config", type=Path, help="Settings file to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.items and (args.file is not None or args.demo):
        parser.error("candidate items cannot be combined with --file or --demo")
    return args


def highlight(text: str, offsets: tuple[int, ...]) -> str:
    """Wrap the characters at offsets in brackets."""
    marked = set(offsets)
    return "".join(f"[{c}]" if i in marked else c for i, c in enumerate(text))


def load_items(args: argparse.Namespace) -> list[str]:
    """Collect candidates from the command line, a file, the demo list or stdin."""
    if args.items:
        return list(args.items)
    if args.demo:
        return list(DEMO_ITEMS)
    if args.file is not None:
        return args.file.read_text(encoding="utf-8").splitlines()
    return sys.stdin.read().splitlines()


def _display(matcher: Matcher, pattern: str, text: str, with_highlight: bool) -> str:
    if not with_highlight:
        return text
    return highlight(text, matcher.match(pattern, text).offsets)


def run(args: argparse.Namespace) -> int:
    settings = Settings(args.config) if args.config else Settings()
    if args.tie_break:
        settings.set("matching.tie_break", args.tie_break)
    if args.limit is not None:
        settings.set("cli.limit", args.limit)

    matcher = settings.create_matcher(args.strategy)
    getter = sequence_getter(settings.get_placeholder())
    items = load_items(args)

    if args.all:
        results = select_all(items, args.pattern, getter, matcher)
        limit = settings.get_limit()
        if limit:
            results = results[:limit]
        for entry in results:
            text = _display(matcher, args.pattern, getter(items, entry.index), args.highlight)
            print(f"{entry.score}\t{entry.index}\t{text}")
        return 0 if results else 1

    best = select_best(items, args.pattern, getter, matcher, settings.get_tie_break())
    if best < 0:
        return 1
    print(_display(matcher, args.pattern, getter(items, best), args.highlight))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args)
    except (ConfigError, OSError) as e:
        print(f"fuzzyselect: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
