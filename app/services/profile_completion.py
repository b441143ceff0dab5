"""
Profile Completion Scorer

Weighted percentage of the candidate profile that is filled in.
Weights add up to exactly 100, so the score is the sum of the
weights of the fields that are present.

A field counts as present when:
- lists are non-empty
- strings are non-blank after strip()
- anything else is truthy
Nested fields use dotted paths ("address.city").
"""

from typing import Any, Dict, Optional


PROFILE_FIELD_WEIGHTS: Dict[str, int] = {
    "name": 15,
    "email": 10,
    "phone": 10,
    "birthDate": 8,
    "nationality": 5,
    "address.city": 8,
    "address.state": 8,
    "professionalInfo.summary": 12,
    "skills": 10,
    "education": 8,
    "languages": 6,
}

TOTAL_WEIGHT = sum(PROFILE_FIELD_WEIGHTS.values())


def resolve_path(record: dict, path: str) -> Any:
    """Walk a dotted path through nested dicts. Missing hops give None."""
    value: Any = record
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def is_field_present(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    if isinstance(value, str):
        return len(value.strip()) > 0
    return bool(value)


def calculate_profile_completion(user: Optional[dict]) -> int:
    """
    Profile completion as an integer 0-100.

    Returns 0 for a missing user instead of failing.
    """
    if not user:
        return 0

    score = sum(
        weight
        for path, weight in PROFILE_FIELD_WEIGHTS.items()
        if is_field_present(resolve_path(user, path))
    )
    return round(score / TOTAL_WEIGHT * 100)
