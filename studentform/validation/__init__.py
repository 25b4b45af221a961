"""Validation layer for form drafts."""

from studentform.validation.checks import (
    CLASS_REQUIRED,
    NAME_REQUIRED,
    PERCENTAGE_MAX,
    PERCENTAGE_MIN,
    PERCENTAGE_NOT_A_NUMBER,
    PERCENTAGE_OUT_OF_RANGE,
    PERCENTAGE_REQUIRED,
    SUBJECTS_REQUIRED,
    check_percentage,
    is_valid,
    parse_percentage,
    validate_draft,
)

__all__ = [
    "CLASS_REQUIRED",
    "NAME_REQUIRED",
    "PERCENTAGE_MAX",
    "PERCENTAGE_MIN",
    "PERCENTAGE_NOT_A_NUMBER",
    "PERCENTAGE_OUT_OF_RANGE",
    "PERCENTAGE_REQUIRED",
    "SUBJECTS_REQUIRED",
    "check_percentage",
    "is_valid",
    "parse_percentage",
    "validate_draft",
]
