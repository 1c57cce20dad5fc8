"""
Core shared utilities for the internship recommendation engine.

This package provides the shared data models, constants, and I/O utilities
used by both the Local Matcher and the AI recommender.

Usage:
    from internship_core import InternshipRecord, QuickProfile
    from internship_core import load_catalog, load_questionnaire_profiles
    from internship_core import QUESTIONNAIRE, SECTORS
"""

from .models import (
    InternshipRecord,
    ScoredInternship,
    QuickProfile,
    QuestionnaireProfile,
    Recommendation,
    split_comma_list,
)
from .data_io import (
    load_catalog,
    load_catalog_from_csv,
    load_catalog_from_json,
    load_questionnaire_profiles,
    scored_internships_to_dicts,
    recommendations_to_dicts,
    save_json,
)
from .constants import (
    QUESTIONNAIRE,
    CATEGORICAL_QUESTIONS,
    SECTORS,
    ALL_SECTORS,
    DEFAULT_QUICK_MATCH_LIMIT,
    DEFAULT_PROMPT_CATALOG_LIMIT,
    DEFAULT_RECOMMENDATION_COUNT,
)

__all__ = [
    # Models
    "InternshipRecord",
    "ScoredInternship",
    "QuickProfile",
    "QuestionnaireProfile",
    "Recommendation",
    "split_comma_list",
    # Data I/O
    "load_catalog",
    "load_catalog_from_csv",
    "load_catalog_from_json",
    "load_questionnaire_profiles",
    "scored_internships_to_dicts",
    "recommendations_to_dicts",
    "save_json",
    # Constants
    "QUESTIONNAIRE",
    "CATEGORICAL_QUESTIONS",
    "SECTORS",
    "ALL_SECTORS",
    "DEFAULT_QUICK_MATCH_LIMIT",
    "DEFAULT_PROMPT_CATALOG_LIMIT",
    "DEFAULT_RECOMMENDATION_COUNT",
]
