"""
autocomplete-matcher CLI

Search a JSON record store from the command line:

    autocomplete-matcher an --store fruits.json --key name
    autocomplete-matcher cfe --store cafes.json --key name --key city --mode loose
    autocomplete-matcher banan --store fruits.json --mode fuzzy --rank --highlight

The store file must hold a JSON array. Results are printed to stdout as a
JSON array; logs go to stderr.
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import get_settings
from .core.assembler import by_score
from .core.engine import SearchEngine
from .core.exceptions import MatcherError
from .logging_config import configure_logging, get_logger
from .models.config import MODES

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="autocomplete-matcher",
        description="Match a query against records in a JSON store",
    )
    parser.add_argument("query", help="Query text as typed")
    parser.add_argument("--store", required=True, help="Path to a JSON array of records")
    parser.add_argument(
        "--key", action="append", default=None,
        help="Record field to search (repeatable); omit to search whole records"
    )
    parser.add_argument("--mode", choices=MODES, default=None, help="Matching mode")
    parser.add_argument("--threshold", type=int, default=None, help="Minimum query length")
    parser.add_argument(
        "--keep-diacritics", action="store_true",
        help="Compare record text without folding diacritics"
    )
    parser.add_argument("--rank", action="store_true", help="Order results by match score")
    parser.add_argument("--highlight", action="store_true", help="Add highlighted text")
    parser.add_argument("--log-level", default=None, help="Log level (default from settings)")
    return parser


def load_store(path: str) -> list:
    """Read a record store from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        store = json.load(f)
    if not isinstance(store, list):
        raise ValueError(f"{path} must contain a JSON array")
    return store


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)
    settings = get_settings()

    try:
        store = load_store(args.store)
    except FileNotFoundError:
        print(f"error: store file not found: {args.store}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read store {args.store}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    options = {"data": {"store": store, "key": args.key}}
    if args.mode:
        options["mode"] = args.mode
    if args.threshold is not None:
        options["threshold"] = args.threshold
    if args.keep_diacritics:
        options["diacritics"] = False
    if args.rank:
        options["sort"] = by_score

    try:
        engine = SearchEngine(options)
    except MatcherError as e:
        print(f"error: {e}", file=sys.stderr)
        logger.error("Invalid configuration", **e.to_dict())
        return 1

    response = engine.search(args.query)
    logger.info(
        "Search finished",
        query=response.query,
        triggered=response.triggered,
        total_results=response.total_results,
        store_size=len(store)
    )

    highlight = (settings.highlight_open, settings.highlight_close) if args.highlight else None
    output = [entry.to_dict(highlight=highlight) for entry in response.results]
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
