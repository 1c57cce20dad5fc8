#!/usr/bin/env python3
"""
AI Recommender CLI

Generates questionnaire-based internship recommendations with the
configured generative-text service (Gemini by default, or OpenRouter).
Falls back to generic catalog-order recommendations when the service
fails, so every profile gets a result.

Requires GEMINI_API_KEY (or LLM_PROVIDER=openrouter + OPENROUTER_API_KEY)
in the environment or a .env file, unless --fallback-only is given.

Usage:
    # One profile, print only
    python run_ai_recommender.py --catalog data/internships.csv \\
        --answers data/answers.json --print-only

    # Many profiles ({"profiles": [...]}) with rate limiting
    python run_ai_recommender.py --catalog data/internships.json \\
        --answers data/answers_batch.json --delay 1.0 \\
        --output-dir output/ai_recommendations

    # Offline run (no API calls)
    python run_ai_recommender.py --catalog data/internships.csv \\
        --answers data/answers.json --fallback-only
"""

import argparse
import logging
import sys
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from ai_recommender import (
    AIRecommender,
    ConfigurationError,
    RecommendationOutcome,
    create_client,
    load_settings,
)
from internship_core import (
    DEFAULT_PROMPT_CATALOG_LIMIT,
    DEFAULT_RECOMMENDATION_COUNT,
    Recommendation,
    load_catalog,
    load_questionnaire_profiles,
    recommendations_to_dicts,
    save_json,
)


DEFAULT_CATALOG = Path("data/internships.csv")
DEFAULT_OUTPUT_DIR = Path("output/ai_recommendations")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recommend internships from questionnaire answers using an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=DEFAULT_CATALOG,
        help=f"Catalog CSV or JSON (default: {DEFAULT_CATALOG})",
    )
    parser.add_argument(
        "--answers",
        type=Path,
        required=True,
        help="Questionnaire answers JSON (one object, a list, or {\"profiles\": [...]})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("--print-only", action="store_true", help="Print results, do not save")
    parser.add_argument(
        "--fallback-only",
        action="store_true",
        help="Skip the LLM and produce fallback recommendations only",
    )
    parser.add_argument("--model", type=str, default=None, help="Override the configured model")
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Override LLM_MAX_RETRIES for transport failures",
    )
    parser.add_argument(
        "--catalog-limit",
        type=int,
        default=DEFAULT_PROMPT_CATALOG_LIMIT,
        help=f"Catalog records included in the prompt (default: {DEFAULT_PROMPT_CATALOG_LIMIT})",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=DEFAULT_RECOMMENDATION_COUNT,
        help=f"Recommendations per profile (default: {DEFAULT_RECOMMENDATION_COUNT})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Delay between requests in seconds (default: 0)",
    )
    parser.add_argument("--quiet", action="store_true", help="Reduce output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def print_recommendations(index: int, recommendations: List[Recommendation]) -> None:
    print(f"\n{'=' * 60}")
    print(f"Profile {index}: {len(recommendations)} recommendations")
    print(f"{'=' * 60}")
    for i, rec in enumerate(recommendations, 1):
        print(f"\n{i}. {rec.title} @ {rec.organization}  [{rec.match_score}% match]")
        print(f"   {rec.reasoning}")
        print(f"   Benefits: {', '.join(rec.key_benefits)}")
        print(f"   Skills to gain: {', '.join(rec.skills_to_gain)}")
        print(f"   Career alignment: {rec.career_alignment}")


def main(argv=None) -> int:
    args = parse_args(argv)
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for path in (args.catalog, args.answers):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 1

    try:
        catalog = load_catalog(args.catalog)
        profiles = load_questionnaire_profiles(args.answers)
    except (OSError, ValueError) as e:
        print(f"Error loading input: {e}", file=sys.stderr)
        return 1

    if not profiles:
        print("No profiles to process!")
        return 0

    outcomes: List[RecommendationOutcome] = []
    client = None
    if not args.fallback_only:
        try:
            settings = load_settings(use_dotenv=False).with_overrides(
                model=args.model,
                max_retries=args.max_retries,
            )
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        client = create_client(settings)

    recommender = AIRecommender(
        client=client,
        catalog_limit=args.catalog_limit,
        top_n=args.top_n,
        on_outcome=outcomes.append,
    )

    if not args.quiet:
        print(f"Loaded {len(catalog)} internships and {len(profiles)} profile(s)")
        print(f"Provider: {recommender.provider or 'fallback only'}")

    start_time = datetime.now()
    results = recommender.recommend_batch(
        profiles,
        catalog,
        show_progress=not args.quiet and len(profiles) > 1,
        delay_seconds=args.delay,
    )
    end_time = datetime.now()

    if args.print_only:
        for i, recs in enumerate(results, 1):
            print_recommendations(i, recs)
    else:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        for i, (profile, recs, outcome) in enumerate(zip(profiles, results, outcomes), 1):
            save_json(
                {
                    "profile": profile.to_dict(),
                    "source": outcome.source,
                    "recommendations": recommendations_to_dicts(recs),
                },
                args.output_dir / f"recommendations_{i:03d}.json",
            )
        sources = Counter(o.source for o in outcomes)
        save_json(
            {
                "run_type": "ai_recommender",
                "start_time": start_time.isoformat(),
                "end_time": end_time.isoformat(),
                "duration_seconds": (end_time - start_time).total_seconds(),
                "provider": recommender.provider or None,
                "model": client.model if client else None,
                "catalog_size": len(catalog),
                "profiles": len(profiles),
                "sources": dict(sources),
            },
            args.output_dir / "run_metadata.json",
        )
        if not args.quiet:
            print(f"Saved {len(results)} result file(s) to: {args.output_dir}")

    if not args.quiet:
        sources = Counter(o.source for o in outcomes)
        print(f"\nAI: {sources.get('ai', 0)} | fallback: {sources.get('fallback', 0)} "
              f"| empty: {sources.get('empty', 0)} | "
              f"{(end_time - start_time).total_seconds():.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
