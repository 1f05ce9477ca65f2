"""Personality Validation — pure field checks on transfer objects before they reach the service.

Invariants:
    - Returns {} when valid, else {lowercase_field: message}
    - Exactly one message per field: the first failing rule wins
    - Update shape: bounds apply only to non-empty fields (omission allowed)
    - Lengths are counted in characters (code points), not bytes
    - No side effects, no IO

Design Decisions:
    - Rule table over per-field if-chains: create and update share bounds, differ only in `required`
    - Accepts any object with name/history attributes: works on schemas and plain dicts alike
"""

from dataclasses import dataclass
from typing import Any, Mapping

from personality_api.core.domain_types import (
    NAME_MIN_LENGTH, NAME_MAX_LENGTH, HISTORY_MIN_LENGTH, HISTORY_MAX_LENGTH,
)


@dataclass(frozen=True)
class FieldRule:
    """Constraints for a single string field."""
    name: str
    required: bool
    min_length: int
    max_length: int


CREATE_RULES = (
    FieldRule("name", True, NAME_MIN_LENGTH, NAME_MAX_LENGTH),
    FieldRule("history", True, HISTORY_MIN_LENGTH, HISTORY_MAX_LENGTH),
)

UPDATE_RULES = (
    FieldRule("name", False, NAME_MIN_LENGTH, NAME_MAX_LENGTH),
    FieldRule("history", False, HISTORY_MIN_LENGTH, HISTORY_MAX_LENGTH),
)


def validate_create(data: Any) -> dict[str, str]:
    """Validate a create payload."""
    return validate_fields(data, CREATE_RULES)


def validate_update(data: Any) -> dict[str, str]:
    """Validate a partial-update payload."""
    return validate_fields(data, UPDATE_RULES)


def validate_fields(data: Any, rules: tuple[FieldRule, ...]) -> dict[str, str]:
    """Apply rules to data, collecting at most one violation per field."""
    violations: dict[str, str] = {}
    for rule in rules:
        message = _check_field(_read_field(data, rule.name), rule)
        if message:
            violations[rule.name.lower()] = message
    return violations


def _check_field(value: str, rule: FieldRule) -> str | None:
    field_name = rule.name.lower()
    if not value:
        return f"{field_name} is required" if rule.required else None
    if len(value) < rule.min_length:
        return f"{field_name} must be at least {rule.min_length} characters"
    if len(value) > rule.max_length:
        return f"{field_name} must be at most {rule.max_length} characters"
    return None


def _read_field(data: Any, field_name: str) -> str:
    if isinstance(data, Mapping):
        value = data.get(field_name)
    else:
        value = getattr(data, field_name, None)
    return value or ""
