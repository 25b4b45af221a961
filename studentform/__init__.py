"""studentform: Student information form state and validation."""

__version__ = "0.1.0"

# Imports must come after __version__; the CLI imports it from here.
from studentform.catalog import SUBJECT_CATALOG
from studentform.controller import FormController, UnknownFieldError
from studentform.models import (
    Draft,
    FieldKey,
    FormState,
    FormStatus,
    SubmitResult,
    SubmittedRecord,
    ValidationErrors,
)
from studentform.validation import validate_draft

__all__ = [
    "__version__",
    "SUBJECT_CATALOG",
    "Draft",
    "FieldKey",
    "FormController",
    "FormState",
    "FormStatus",
    "SubmitResult",
    "SubmittedRecord",
    "UnknownFieldError",
    "ValidationErrors",
    "validate_draft",
]
