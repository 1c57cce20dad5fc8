"""
Prompt Builder

Serializes a questionnaire profile and a bounded slice of the catalog into
the single instruction document sent to the generative-text service.

The output shape requested here (a JSON array of objects with title,
organization, matchScore, reasoning, keyBenefits, skillsToGain,
careerAlignment) is what ``response_validator`` enforces; change both
together.
"""

from typing import List, Sequence

from internship_core import InternshipRecord, QuestionnaireProfile, QUESTIONNAIRE
from internship_core.constants import (
    DEFAULT_PROMPT_CATALOG_LIMIT,
    DEFAULT_RECOMMENDATION_COUNT,
    NONE_SPECIFIED,
    NOT_SPECIFIED,
)


# Record fields listed for each internship, in display order
INTERNSHIP_PROMPT_FIELDS = [
    ("title", "Title"),
    ("organization", "Organization"),
    ("location", "Location"),
    ("duration", "Duration"),
    ("sector", "Sector"),
    ("skills", "Skills"),
    ("stipend", "Stipend"),
    ("perks", "Perks"),
]

SYSTEM_ROLE = (
    "As a professional career counselor and AI assistant, analyze the following "
    "student profile and available internships to provide personalized recommendations."
)

OUTPUT_FORMAT_EXAMPLE = """[
  {
    "title": "internship title",
    "organization": "organization name",
    "matchScore": 85,
    "reasoning": "This internship aligns perfectly with your goals because...",
    "keyBenefits": ["benefit 1", "benefit 2", "benefit 3"],
    "skillsToGain": ["skill 1", "skill 2", "skill 3"],
    "careerAlignment": "How this supports your career path..."
  }
]"""


def format_profile(profile: QuestionnaireProfile) -> str:
    """Render the ten answers as labeled bullet lines."""
    lines = []
    for name, question in QUESTIONNAIRE.items():
        answer = (getattr(profile, name, "") or "").strip()
        if not answer:
            answer = NOT_SPECIFIED if question["options"] else NONE_SPECIFIED
        lines.append(f"- {question['label']}: {answer}")
    return "\n".join(lines)


def format_internship(index: int, record: InternshipRecord) -> str:
    """Render one catalog record as an enumerated block."""
    lines = []
    for i, (attr, label) in enumerate(INTERNSHIP_PROMPT_FIELDS):
        value = getattr(record, attr) or NOT_SPECIFIED
        prefix = f"{index}. " if i == 0 else "   "
        lines.append(f"{prefix}{label}: {value}")
    return "\n".join(lines)


def format_catalog(
    catalog: Sequence[InternshipRecord],
    limit: int = DEFAULT_PROMPT_CATALOG_LIMIT,
) -> str:
    """Render at most ``limit`` records from the head of the catalog."""
    blocks: List[str] = [
        format_internship(i, record)
        for i, record in enumerate(list(catalog)[:limit], 1)
    ]
    return "\n\n".join(blocks)


def build_prompt(
    profile: QuestionnaireProfile,
    catalog: Sequence[InternshipRecord],
    catalog_limit: int = DEFAULT_PROMPT_CATALOG_LIMIT,
    top_n: int = DEFAULT_RECOMMENDATION_COUNT,
) -> str:
    """Build the full recommendation prompt.

    Args:
        profile: Questionnaire answers (empty answers render as placeholders)
        catalog: Catalog snapshot; only the first ``catalog_limit`` are listed
        catalog_limit: Maximum number of internships to include
        top_n: Number of recommendations to ask for

    Returns:
        Prompt text. Pure function: no I/O.
    """
    return f"""{SYSTEM_ROLE}

STUDENT PROFILE:
{format_profile(profile)}

AVAILABLE INTERNSHIPS:
{format_catalog(catalog, catalog_limit)}

TASK:
Analyze the student's profile and recommend the TOP {top_n} most suitable internships. For each recommendation, provide:

1. Match Score (0-100): How well the internship aligns with the student's profile
2. Detailed Reasoning: Why this internship is a good fit (2-3 sentences)
3. Key Benefits: 3-4 specific benefits this internship offers
4. Skills to Gain: 3-4 key skills the student will develop
5. Career Alignment: How this internship supports their career goals

Format your response as a JSON array with this structure:
{OUTPUT_FORMAT_EXAMPLE}

Ensure recommendations are professional, specific, and genuinely helpful for the student's career development.
"""
