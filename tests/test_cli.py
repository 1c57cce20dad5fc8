"""End-to-end tests for the command-line entry points."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

import run_ai_recommender
import run_quick_match


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "internships.json"
    path.write_text(json.dumps([
        {"title": "Frontend Intern", "organization": "TechCorp", "skills": "React, Node",
         "location": "Bangalore, India", "sector": "Technology"},
        {"title": "Accounts Intern", "organization": "FinCo", "skills": "Accounting",
         "location": "Mumbai", "sector": "Finance"},
    ]), encoding="utf-8")
    return path


@pytest.fixture
def answers_file(tmp_path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({
        "careerGoals": "Develop specific technical skills",
        "industryInterest": "Technology and Software",
    }), encoding="utf-8")
    return path


class TestQuickMatchCLI:

    def test_saves_scored_results(self, tmp_path, catalog_file):
        output = tmp_path / "out" / "quick.json"
        code = run_quick_match.main([
            "--catalog", str(catalog_file),
            "--skills", "react, python",
            "--location", "Bangalore",
            "--output", str(output),
        ])

        assert code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [r["matchScore"] for r in data["results"]] == [5]
        assert data["results"][0]["title"] == "Frontend Intern"

    def test_print_only(self, catalog_file, capsys):
        code = run_quick_match.main([
            "--catalog", str(catalog_file), "--skills", "accounting", "--print-only",
        ])
        assert code == 0
        assert "Accounts Intern" in capsys.readouterr().out

    def test_missing_catalog(self, tmp_path):
        code = run_quick_match.main([
            "--catalog", str(tmp_path / "missing.csv"), "--skills", "react",
        ])
        assert code == 1


class TestAIRecommenderCLI:

    def test_fallback_only_writes_results(self, tmp_path, catalog_file, answers_file):
        output_dir = tmp_path / "ai"
        code = run_ai_recommender.main([
            "--catalog", str(catalog_file),
            "--answers", str(answers_file),
            "--output-dir", str(output_dir),
            "--fallback-only",
            "--quiet",
        ])

        assert code == 0
        result = json.loads((output_dir / "recommendations_001.json").read_text(encoding="utf-8"))
        assert result["source"] == "fallback"
        assert [r["matchScore"] for r in result["recommendations"]] == [75, 70]
        metadata = json.loads((output_dir / "run_metadata.json").read_text(encoding="utf-8"))
        assert metadata["sources"] == {"fallback": 1}

    def test_missing_credential_exits_with_error(self, catalog_file, answers_file, capsys):
        with patch.dict("os.environ", {}, clear=True), \
                patch("run_ai_recommender.load_dotenv"):
            code = run_ai_recommender.main([
                "--catalog", str(catalog_file),
                "--answers", str(answers_file),
                "--print-only",
            ])
        assert code == 1
        assert "GEMINI_API_KEY" in capsys.readouterr().err

    def test_malformed_answers_exits_with_error(self, tmp_path, catalog_file, capsys):
        answers = tmp_path / "bad_answers.json"
        answers.write_text(json.dumps(["oops"]), encoding="utf-8")

        code = run_ai_recommender.main([
            "--catalog", str(catalog_file),
            "--answers", str(answers),
            "--fallback-only",
            "--print-only",
        ])

        assert code == 1
        assert "Error loading input" in capsys.readouterr().err
