"""
Local Matcher - Deterministic keyword/attribute scoring for the quick search path

Scores catalog records against a Quick Profile (skills / location / sector)
without any I/O or external service:

1. Skill overlap: +3 per profile keyword that matches a record skill by
   bidirectional, case-insensitive substring containment
2. Location bonus: +2 if the record location contains the profile location
3. Sector bonus: +2 if the record sector contains the profile sector

Records scoring 0 are dropped; the rest are stably sorted by score
(descending) and truncated to the top 5.

Also provides ``filter_catalog``, the in-memory equivalent of the catalog
provider's substring filter used by the search page.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from internship_core import (
    ALL_SECTORS,
    DEFAULT_QUICK_MATCH_LIMIT,
    InternshipRecord,
    QuickProfile,
    ScoredInternship,
)
from internship_core.constants import (
    LOCATION_MATCH_POINTS,
    SECTOR_MATCH_POINTS,
    SKILL_MATCH_POINTS,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Normalization
# ============================================================================

def normalize_keywords(text: Optional[str]) -> List[str]:
    """Split comma-separated text into unique lowercase trimmed tokens.

    Order of first appearance is kept; empty tokens are dropped.
    """
    if not text:
        return []
    seen = set()
    keywords = []
    for token in text.lower().split(","):
        token = token.strip()
        if token and token not in seen:
            seen.add(token)
            keywords.append(token)
    return keywords


def _contains(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive substring test; False when either side is blank."""
    if not haystack or not needle:
        return False
    needle = needle.strip().lower()
    if not needle:
        return False
    return needle in haystack.lower()


# ============================================================================
# Scoring
# ============================================================================

def count_skill_matches(keywords: Sequence[str], record_skills: Sequence[str]) -> int:
    """Number of profile keywords matching at least one record skill.

    A keyword matches a record skill when either is a substring of the
    other ("react" ~ "react.js", "machine learning" ~ "learning").
    """
    return sum(
        1 for kw in keywords
        if any(kw in skill or skill in kw for skill in record_skills)
    )


def score_record(
    keywords: Sequence[str],
    record: InternshipRecord,
    location: Optional[str] = None,
    sector: Optional[str] = None,
) -> int:
    """Compute the integer relevance score of a single record."""
    score = 0

    record_skills = normalize_keywords(record.skills)
    if record_skills:
        score += SKILL_MATCH_POINTS * count_skill_matches(keywords, record_skills)

    if _contains(record.location, location):
        score += LOCATION_MATCH_POINTS

    if _contains(record.sector, sector):
        score += SECTOR_MATCH_POINTS

    return score


class LocalMatcher:
    """Deterministic keyword/attribute matcher.

    Pure and stateless apart from its result limit: the same profile and
    catalog always give the same ranked list.

    Example:
        matcher = LocalMatcher()
        results = matcher.score(QuickProfile(skills="react, python"), catalog)
        for r in results:
            print(r.record.title, r.match_score)
    """

    def __init__(self, limit: int = DEFAULT_QUICK_MATCH_LIMIT):
        self.limit = limit

    def score(
        self,
        profile: QuickProfile,
        catalog: Sequence[InternshipRecord],
    ) -> List[ScoredInternship]:
        """Rank catalog records for a Quick Profile.

        Returns an empty list when the profile has no skills or the
        catalog is empty.
        """
        keywords = normalize_keywords(profile.skills)
        if not keywords or not catalog:
            return []

        scored = []
        for record in catalog:
            match_score = score_record(
                keywords,
                record,
                location=profile.location,
                sector=profile.sector,
            )
            if match_score > 0:
                scored.append(ScoredInternship(record=record, match_score=match_score))

        # sorted() is stable, so ties keep catalog order
        scored = sorted(scored, key=lambda s: s.match_score, reverse=True)

        logger.debug(
            f"Scored {len(catalog)} records for keywords {keywords}: "
            f"{len(scored)} matched, returning top {self.limit}"
        )
        return scored[:self.limit]


def score_internships(
    profile: QuickProfile,
    catalog: Sequence[InternshipRecord],
    limit: int = DEFAULT_QUICK_MATCH_LIMIT,
) -> List[ScoredInternship]:
    """Convenience wrapper around ``LocalMatcher(limit).score``."""
    return LocalMatcher(limit=limit).score(profile, catalog)


# ============================================================================
# Catalog filter
# ============================================================================

def filter_catalog(
    catalog: Iterable[InternshipRecord],
    skills: Optional[str] = None,
    location: Optional[str] = None,
    sector: Optional[str] = None,
) -> List[InternshipRecord]:
    """Filter records the way the catalog provider's search query does.

    Each non-empty filter requires the record field to contain the filter
    text (case-insensitive, whole text, not split on commas). The sector
    value "All Sectors" disables the sector filter.
    """
    if sector and sector.strip() == ALL_SECTORS:
        sector = None

    results = []
    for record in catalog:
        if skills and skills.strip() and not _contains(record.skills, skills):
            continue
        if location and location.strip() and not _contains(record.location, location):
            continue
        if sector and sector.strip() and not _contains(record.sector, sector):
            continue
        results.append(record)
    return results


# ============================================================================
# Output helpers
# ============================================================================

def print_scored_internships(results: Sequence[ScoredInternship]) -> None:
    """Print a ranked list in a compact, human-readable form."""
    if not results:
        print("No matching internships found.")
        return

    print(f"\n{'=' * 60}")
    print(f"Top {len(results)} matching internships")
    print(f"{'=' * 60}")
    for i, item in enumerate(results, 1):
        r = item.record
        print(f"\n{i}. {r.title or 'Untitled'} @ {r.organization or 'Unknown'}  "
              f"[score: {item.match_score}]")
        print(f"   Location: {r.location or '-'} | Sector: {r.sector or '-'}")
        print(f"   Skills: {r.skills or '-'}")
