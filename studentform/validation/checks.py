"""Validation rules for a form draft.

Checks required fields, the percentage range and the subject
selection. All checks are pure; nothing here touches form state.
"""

import math
import re

from studentform.models import Draft, FieldKey, ValidationErrors

PERCENTAGE_MIN = 0.0
PERCENTAGE_MAX = 100.0

# Plain ASCII decimal text, optionally signed, with an optional exponent.
PERCENTAGE_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

NAME_REQUIRED = "Name is required"
CLASS_REQUIRED = "Class is required"
PERCENTAGE_REQUIRED = "Percentage is required"
PERCENTAGE_OUT_OF_RANGE = "Percentage must be between 0 and 100"
PERCENTAGE_NOT_A_NUMBER = "Percentage must be a number"
SUBJECTS_REQUIRED = "At least one subject must be selected"


def parse_percentage(raw: str) -> float | None:
    """Parse percentage text into a finite number.

    Args:
        raw: The percentage as entered.

    Returns:
        The parsed value, or None if the text is not a finite number.
    """
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not PERCENTAGE_PATTERN.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def check_percentage(raw: str) -> str | None:
    """Return the error message for a percentage value, or None if valid."""
    if raw == "":
        return PERCENTAGE_REQUIRED

    value = parse_percentage(raw)
    if value is None:
        return PERCENTAGE_NOT_A_NUMBER
    if value < PERCENTAGE_MIN or value > PERCENTAGE_MAX:
        return PERCENTAGE_OUT_OF_RANGE
    return None


def validate_draft(draft: Draft) -> ValidationErrors:
    """Validate a draft and return the errors for invalid fields only.

    Args:
        draft: The draft to validate.

    Returns:
        Mapping of field key to message. Empty if the draft is valid.
    """
    errors: ValidationErrors = {}

    if not draft.name.strip():
        errors[FieldKey.NAME.value] = NAME_REQUIRED

    if not draft.class_name.strip():
        errors[FieldKey.CLASS_NAME.value] = CLASS_REQUIRED

    percentage_error = check_percentage(draft.percentage)
    if percentage_error is not None:
        errors[FieldKey.PERCENTAGE.value] = percentage_error

    if len(draft.subjects) == 0:
        errors[FieldKey.SUBJECTS.value] = SUBJECTS_REQUIRED

    return errors


def is_valid(draft: Draft) -> bool:
    """Whether the draft passes every check."""
    return not validate_draft(draft)
