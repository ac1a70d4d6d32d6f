"""JSON schema for the duplicate-set JSONL interchange format."""

from typing import Any

from jsonschema import Draft202012Validator

__all__ = ["DUPLICATE_SET_SCHEMA", "duplicate_set_validator"]

DUPLICATE_SET_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "umidedupe duplicate set",
    "type": "object",
    "required": ["records"],
    "properties": {
        "set_id": {"type": ["string", "null"]},
        "records": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string"},
                    "attributes": {
                        "type": "object",
                        "additionalProperties": {"type": "string"},
                    },
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}


def duplicate_set_validator() -> Draft202012Validator:
    """Build a validator for one duplicate-set JSON object."""
    Draft202012Validator.check_schema(DUPLICATE_SET_SCHEMA)
    return Draft202012Validator(DUPLICATE_SET_SCHEMA)
