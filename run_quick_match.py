#!/usr/bin/env python3
"""
Quick Match CLI - deterministic keyword matching

Scores a catalog snapshot against skills / location / sector and prints or
saves the top matches.

Usage:
    # Print the top 5 matches
    python run_quick_match.py --catalog data/internships.csv \\
        --skills "react, python" --location Bangalore --print-only

    # Apply the search page's substring prefilter first
    python run_quick_match.py --catalog data/internships.json \\
        --skills python --sector Technology --prefilter

    # Save to a custom file
    python run_quick_match.py --catalog data/internships.csv \\
        --skills "sql, excel" --output output/quick_match.json
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from internship_core import (
    ALL_SECTORS,
    DEFAULT_QUICK_MATCH_LIMIT,
    QuickProfile,
    load_catalog,
    save_json,
    scored_internships_to_dicts,
)
from internship_matcher import LocalMatcher, filter_catalog, print_scored_internships


DEFAULT_CATALOG = Path("data/internships.csv")
DEFAULT_OUTPUT = Path("output/quick_match/quick_match.json")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Quick Match - rank internships by skills, location and sector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=DEFAULT_CATALOG,
        help=f"Catalog CSV or JSON (default: {DEFAULT_CATALOG})",
    )
    parser.add_argument(
        "--skills",
        type=str,
        required=True,
        help="Comma-separated skills, e.g. \"react, python\"",
    )
    parser.add_argument("--location", type=str, default=None, help="Preferred location")
    parser.add_argument(
        "--sector",
        type=str,
        default=None,
        help=f"Preferred sector (\"{ALL_SECTORS}\" means any)",
    )
    parser.add_argument(
        "--prefilter",
        action="store_true",
        help="Filter the catalog by substring on skills/location/sector before scoring",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=DEFAULT_QUICK_MATCH_LIMIT,
        help=f"Maximum matches to return (default: {DEFAULT_QUICK_MATCH_LIMIT})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output JSON path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("--print-only", action="store_true", help="Print results, do not save")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.catalog.exists():
        print(f"Error: Catalog not found: {args.catalog}", file=sys.stderr)
        return 1

    try:
        catalog = load_catalog(args.catalog)
    except (OSError, ValueError) as e:
        print(f"Error loading catalog: {e}", file=sys.stderr)
        return 1

    sector = None if args.sector == ALL_SECTORS else args.sector

    if args.prefilter:
        catalog = filter_catalog(catalog, skills=args.skills, location=args.location, sector=sector)

    profile = QuickProfile(skills=args.skills, location=args.location, sector=sector)
    results = LocalMatcher(limit=args.top_k).score(profile, catalog)

    if args.print_only:
        print_scored_internships(results)
        return 0

    save_json(
        {
            "generated_at": datetime.now().isoformat(),
            "profile": {"skills": args.skills, "location": args.location, "sector": sector},
            "catalog_size": len(catalog),
            "results": scored_internships_to_dicts(results),
        },
        args.output,
    )
    print(f"Saved {len(results)} matches to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
