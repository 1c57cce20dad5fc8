"""
Catalog and profile I/O for the internship recommendation engine.

Loads catalog snapshots from CSV or JSON exports and questionnaire answers
from JSON, and saves results as JSON.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .models import (
    InternshipRecord,
    QuestionnaireProfile,
    Recommendation,
    ScoredInternship,
)


def load_catalog_from_csv(csv_path: Path) -> List[InternshipRecord]:
    """Load internship records from a CSV export.

    Args:
        csv_path: Path to CSV file with any of the columns:
                  title, organization, location, duration, sector, skills,
                  stipend, perks, source, start_date

    Returns:
        List of InternshipRecord objects in file order

    Example:
        catalog = load_catalog_from_csv(Path("data/internships.csv"))
        for r in catalog:
            print(f"{r.title}: {r.location}")
    """
    # utf-8-sig strips a BOM if the export has one
    with open(csv_path, "r", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        return [InternshipRecord.from_dict(row) for row in reader]


def load_catalog_from_json(json_path: Path) -> List[InternshipRecord]:
    """Load internship records from a JSON array (or {"internships": [...]})."""
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "internships" in data:
        data = data["internships"]
    if not isinstance(data, list):
        raise ValueError(
            f"Invalid catalog format in {json_path}: expected a list or a dict "
            f"with an 'internships' key"
        )
    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Invalid catalog entry {i} in {json_path}")
        records.append(InternshipRecord.from_dict(item))
    return records


def load_catalog(path: Path) -> List[InternshipRecord]:
    """Load a catalog snapshot, choosing the reader by file suffix."""
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return load_catalog_from_csv(path)
    if suffix == ".json":
        return load_catalog_from_json(path)
    raise ValueError(f"Unsupported catalog format: {path.suffix}")


def load_questionnaire_profiles(json_path: Path) -> List[QuestionnaireProfile]:
    """Load one or many questionnaire answer sets from JSON.

    Accepts a single answers object, a list of them, or
    {"profiles": [...]}.
    """
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "profiles" in data:
        data = data["profiles"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"Invalid questionnaire format in {json_path}")
    profiles = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Invalid questionnaire entry {i} in {json_path}")
        profiles.append(QuestionnaireProfile.from_dict(item))
    return profiles


def scored_internships_to_dicts(results: Sequence[ScoredInternship]) -> List[Dict[str, Any]]:
    return [r.to_dict() for r in results]


def recommendations_to_dicts(results: Sequence[Recommendation]) -> List[Dict[str, Any]]:
    return [r.to_dict() for r in results]


def save_json(data: Any, output_path: Path) -> None:
    """Write JSON with UTF-8 and indentation, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
