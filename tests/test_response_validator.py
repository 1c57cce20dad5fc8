"""
Response Validator Test Suite

Tests for recovering and strictly validating the model's JSON array:
1. Bracket-span extraction tolerant of surrounding prose
2. Fenced ```json blocks
3. Rejection of missing / invalid arrays
4. Per-item schema enforcement (required fields, matchScore range)
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ai_recommender.errors import ParseError
from ai_recommender.response_validator import (
    UntrustedPayload,
    extract_json_array,
    parse_recommendations,
    validate_payload,
)


def make_item(**overrides):
    item = {
        "title": "A",
        "organization": "Org",
        "matchScore": 88,
        "reasoning": "Good fit for your goals.",
        "keyBenefits": ["Mentorship", "Real projects", "Networking"],
        "skillsToGain": ["Python", "SQL", "Communication"],
        "careerAlignment": "Supports a data career.",
    }
    item.update(overrides)
    return item


# =============================================================================
# Extraction
# =============================================================================


class TestExtractJsonArray:

    def test_array_wrapped_in_prose(self):
        text = f"Here you go: {json.dumps([make_item()])} thanks"
        assert len(extract_json_array(text)) == 1

    def test_no_brackets(self):
        with pytest.raises(ParseError):
            extract_json_array("Sorry, I cannot help with that.")

    def test_unterminated_array(self):
        with pytest.raises(ParseError):
            extract_json_array("[invalid json")

    def test_bracketed_but_invalid_json(self):
        with pytest.raises(ParseError):
            extract_json_array("[{title: A}]")

    def test_empty_text(self):
        with pytest.raises(ParseError):
            extract_json_array("")

    def test_fenced_block_preferred(self):
        text = (
            "Some notes [see below]\n```json\n"
            + json.dumps([make_item(title="Fenced")])
            + "\n```\nDone."
        )
        assert extract_json_array(text)[0]["title"] == "Fenced"

    def test_first_to_last_bracket_span(self):
        text = "[" + json.dumps(make_item()) + ", " + json.dumps(make_item(title="B")) + "]"
        assert [i["title"] for i in extract_json_array(text)] == ["A", "B"]


# =============================================================================
# Validation
# =============================================================================


class TestParseRecommendations:

    def test_valid_reply(self):
        text = f"Here you go: {json.dumps([make_item()])} thanks"
        recs = parse_recommendations(text)

        assert len(recs) == 1
        assert recs[0].title == "A"
        assert recs[0].match_score == 88
        assert recs[0].key_benefits == ["Mentorship", "Real projects", "Networking"]

    def test_order_is_preserved(self):
        items = [make_item(title="Low", matchScore=40), make_item(title="High", matchScore=95)]
        recs = parse_recommendations(json.dumps(items))
        assert [r.title for r in recs] == ["Low", "High"]

    def test_empty_array_is_valid(self):
        assert parse_recommendations("[]") == []

    @pytest.mark.parametrize("score", [-1, 101, "high"])
    def test_out_of_range_or_non_numeric_score(self, score):
        with pytest.raises(ParseError):
            parse_recommendations(json.dumps([make_item(matchScore=score)]))

    @pytest.mark.parametrize("missing", ["title", "matchScore", "reasoning", "keyBenefits",
                                         "skillsToGain", "careerAlignment", "organization"])
    def test_missing_field(self, missing):
        item = make_item()
        del item[missing]
        with pytest.raises(ParseError):
            parse_recommendations(json.dumps([item]))

    def test_wrong_list_type(self):
        with pytest.raises(ParseError):
            parse_recommendations(json.dumps([make_item(keyBenefits="Mentorship")]))

    def test_non_object_item(self):
        with pytest.raises(ParseError):
            parse_recommendations(json.dumps([make_item(), "oops"]))

    def test_extra_fields_ignored(self):
        recs = parse_recommendations(json.dumps([make_item(stipend="10000")]))
        assert recs[0].to_dict()["matchScore"] == 88
        assert "stipend" not in recs[0].to_dict()

    def test_one_bad_item_rejects_whole_reply(self):
        items = [make_item(), make_item(matchScore=150)]
        with pytest.raises(ParseError):
            parse_recommendations(json.dumps(items))

    def test_validate_payload(self):
        payload = UntrustedPayload(text=json.dumps([make_item()]), provider="gemini")
        assert validate_payload(payload)[0].organization == "Org"
