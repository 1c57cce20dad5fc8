"""
Shared data models for the internship recommendation engine.

Catalog records and profiles are plain dataclasses. Records are frozen:
the engine reads the catalog snapshot it is handed and never mutates it.
"""

from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, List, Optional

from .constants import CATEGORICAL_QUESTIONS, QUESTIONNAIRE


def split_comma_list(text: Optional[str]) -> List[str]:
    """Split a comma-separated text list into trimmed, non-empty items."""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def _as_text(value: Any) -> Optional[str]:
    """Coerce a raw catalog value into optional text.

    Lists (as some catalog exports store skills/perks) are comma-joined;
    empty strings become None.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v).strip() for v in value if str(v).strip())
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class InternshipRecord:
    """One internship opportunity from the catalog snapshot.

    Every field is optional. A record with nothing populated is valid; it
    simply never scores in the Local Matcher.
    """
    title: Optional[str] = None
    organization: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    sector: Optional[str] = None
    skills: Optional[str] = None
    stipend: Optional[str] = None
    perks: Optional[str] = None
    source: Optional[str] = None
    start_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InternshipRecord":
        """Build a record from a catalog row, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key == "startDate":
                key = "start_date"
            if key in known:
                values[key] = _as_text(value)
        return cls(**values)

    def skill_list(self) -> List[str]:
        return split_comma_list(self.skills)

    def perk_list(self) -> List[str]:
        return split_comma_list(self.perks)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


@dataclass(frozen=True)
class ScoredInternship:
    """Catalog record with the Local Matcher's integer score attached."""
    record: InternshipRecord
    match_score: int

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = self.record.to_dict()
        data["matchScore"] = self.match_score
        return data


@dataclass
class QuickProfile:
    """Simple search inputs used by the deterministic path."""
    skills: str = ""
    location: Optional[str] = None
    sector: Optional[str] = None


@dataclass
class QuestionnaireProfile:
    """Answers to the ten-question AI career questionnaire.

    The nine categorical answers are single selections from the option sets
    in ``constants.QUESTIONNAIRE``; ``additional_info`` is free text.
    """
    career_goals: str = ""
    work_environment: str = ""
    learning_style: str = ""
    time_commitment: str = ""
    skill_development: str = ""
    industry_interest: str = ""
    work_mode: str = ""
    challenges: str = ""
    motivation: str = ""
    additional_info: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionnaireProfile":
        """Build a profile from camelCase or snake_case answer keys."""
        values = {}
        for name, question in QUESTIONNAIRE.items():
            raw = data.get(name)
            if raw is None:
                raw = data.get(question["key"])
            values[name] = "" if raw is None else str(raw).strip()
        return cls(**values)

    def missing_answers(self) -> List[str]:
        """Categorical questions that have not been answered."""
        return [
            name for name in CATEGORICAL_QUESTIONS
            if not (getattr(self, name) or "").strip()
        ]

    def is_complete(self) -> bool:
        return not self.missing_answers()

    def to_dict(self) -> Dict[str, str]:
        """Serialize with the questionnaire's camelCase keys."""
        return {
            question["key"]: getattr(self, name)
            for name, question in QUESTIONNAIRE.items()
        }


@dataclass
class Recommendation:
    """A ranked, explained internship suggestion.

    ``match_score`` is always within [0, 100].
    """
    title: str
    organization: str
    match_score: int
    reasoning: str
    key_benefits: List[str] = field(default_factory=list)
    skills_to_gain: List[str] = field(default_factory=list)
    career_alignment: str = ""

    def __post_init__(self):
        if not 0 <= self.match_score <= 100:
            raise ValueError(f"match_score out of range: {self.match_score}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase field names the prompt asks for."""
        return {
            "title": self.title,
            "organization": self.organization,
            "matchScore": self.match_score,
            "reasoning": self.reasoning,
            "keyBenefits": list(self.key_benefits),
            "skillsToGain": list(self.skills_to_gain),
            "careerAlignment": self.career_alignment,
        }
