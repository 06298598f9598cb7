"""JSON Schema validation utilities."""

import json
from pathlib import Path
from typing import Any, cast

from jsonschema import Draft7Validator


CONCORDANCE_SCHEMA = "concordance.schema.json"


def load_schema(schema_path: Path) -> dict[str, Any]:
    """
    Load JSON schema from file.

    Args:
        schema_path: Path to schema file

    Returns:
        Parsed schema dict
    """
    with schema_path.open("r", encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def validate_against_schema(
    data: dict[str, Any],
    schema: dict[str, Any],
) -> list[str]:
    """
    Validate data against JSON schema.

    Args:
        data: Data to validate
        schema: JSON schema

    Returns:
        List of validation error messages (empty if valid)
    """
    validator = Draft7Validator(schema)
    errors = []

    for error in sorted(validator.iter_errors(data), key=str):
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")

    return errors


def check_entry_invariants(data: dict[str, Any]) -> list[str]:
    """
    Checks a schema cannot express: parallel lengths and unique words.

    Args:
        data: Concordance dict

    Returns:
        List of error messages (empty if consistent)
    """
    errors = []
    seen: set[str] = set()

    for idx, entry in enumerate(data.get("entries", [])):
        word = entry.get("word")
        if word in seen:
            errors.append(f"entries.{idx}: duplicate word {word!r}")
        seen.add(word)

        locations = entry.get("locations", [])
        snippets = entry.get("snippets", [])
        if len(locations) != len(snippets):
            errors.append(
                f"entries.{idx}: {len(locations)} locations but {len(snippets)} snippets"
            )
        if "count" in entry and entry["count"] != len(locations):
            errors.append(f"entries.{idx}: count {entry['count']} != {len(locations)} locations")

    return errors


def validate_concordance(data: dict[str, Any], schema_dir: Path) -> list[str]:
    """Validate a concordance dict against the schema and entry invariants."""
    schema = load_schema(schema_dir / CONCORDANCE_SCHEMA)
    errors = validate_against_schema(data, schema)
    if errors:
        return errors
    return check_entry_invariants(data)
