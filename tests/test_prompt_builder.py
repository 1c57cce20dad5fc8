"""Tests for prompt construction."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_recommender.prompt_builder import (
    build_prompt,
    format_catalog,
    format_internship,
    format_profile,
)
from internship_core import InternshipRecord, QuestionnaireProfile


@pytest.fixture
def profile():
    return QuestionnaireProfile(
        career_goals="Develop specific technical skills",
        work_environment="Fast-paced startup environment with lots of variety",
        learning_style="Hands-on practice and real projects",
        time_commitment="3-4 months (Semester break)",
        skill_development="Technical skills (programming, data analysis, design)",
        industry_interest="Technology and Software",
        work_mode="Hybrid (mix of remote and office)",
        challenges="Solving complex technical problems",
        motivation="Building products that people use and love",
    )


class TestFormatProfile:

    def test_all_labels_present(self, profile):
        text = format_profile(profile)
        assert "- Career Goals: Develop specific technical skills" in text
        assert "- Work Mode Preference: Hybrid (mix of remote and office)" in text
        assert "- Primary Motivation: Building products that people use and love" in text
        assert len(text.splitlines()) == 10

    def test_missing_additional_info_uses_none_specified(self, profile):
        assert "- Additional Requirements: None specified" in format_profile(profile)

    def test_empty_profile_does_not_crash(self):
        text = format_profile(QuestionnaireProfile())
        assert "- Career Goals: Not specified" in text
        assert "- Additional Requirements: None specified" in text


class TestFormatCatalog:

    def test_missing_fields_render_not_specified(self):
        block = format_internship(3, InternshipRecord(title="Data Intern"))
        lines = block.splitlines()
        assert lines[0] == "3. Title: Data Intern"
        assert "   Organization: Not specified" in lines
        assert "   Perks: Not specified" in lines

    def test_caps_at_twenty_records(self):
        catalog = [InternshipRecord(title=f"Intern {i}") for i in range(1, 26)]
        text = format_catalog(catalog)
        assert "20. Title: Intern 20" in text
        assert "Intern 21" not in text

    def test_custom_limit(self):
        catalog = [InternshipRecord(title=f"Intern {i}") for i in range(1, 6)]
        assert "Intern 3" not in format_catalog(catalog, limit=2)


class TestBuildPrompt:

    def test_contains_sections_and_output_shape(self, profile):
        prompt = build_prompt(profile, [InternshipRecord(title="Frontend Intern")])
        assert "STUDENT PROFILE:" in prompt
        assert "AVAILABLE INTERNSHIPS:" in prompt
        assert "1. Title: Frontend Intern" in prompt
        assert "recommend the TOP 5 most suitable internships" in prompt
        for key in ("title", "organization", "matchScore", "reasoning",
                    "keyBenefits", "skillsToGain", "careerAlignment"):
            assert f'"{key}"' in prompt

    def test_deterministic(self, profile):
        catalog = [InternshipRecord(title="A"), InternshipRecord(title="B")]
        assert build_prompt(profile, catalog) == build_prompt(profile, catalog)

    def test_empty_catalog(self, profile):
        prompt = build_prompt(profile, [])
        assert "AVAILABLE INTERNSHIPS:" in prompt
        assert "1. Title:" not in prompt
