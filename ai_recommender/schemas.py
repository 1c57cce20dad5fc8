"""Pydantic models for the structured reply expected from the generative service."""

from pydantic import BaseModel, Field

from internship_core import Recommendation


class RecommendationSchema(BaseModel):
    """One item of the JSON array the prompt asks the model to return."""

    title: str = Field(..., min_length=1, description="Internship title")
    organization: str = Field(..., description="Organization offering the internship")
    matchScore: int = Field(..., ge=0, le=100, description="Fit score, 0-100")
    reasoning: str = Field(..., min_length=1, description="Why this is a good fit")
    keyBenefits: list[str] = Field(..., description="3-4 short benefit phrases")
    skillsToGain: list[str] = Field(..., description="3-4 skills the student will develop")
    careerAlignment: str = Field(..., description="How it supports the career goals")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "title": "Frontend Developer Intern",
                "organization": "TechCorp",
                "matchScore": 85,
                "reasoning": "Hands-on React work matches your goal of building products.",
                "keyBenefits": ["Mentorship", "Real projects", "Flexible hours"],
                "skillsToGain": ["React", "TypeScript", "Code review"],
                "careerAlignment": "Builds a portfolio for full-time frontend roles.",
            }
        },
    }

    def to_recommendation(self) -> Recommendation:
        return Recommendation(
            title=self.title,
            organization=self.organization,
            match_score=self.matchScore,
            reasoning=self.reasoning,
            key_benefits=list(self.keyBenefits),
            skills_to_gain=list(self.skillsToGain),
            career_alignment=self.careerAlignment,
        )
