"""Data models for the student information form.

Drafts, submitted records and form state snapshots are immutable
pydantic models; every state change produces a new instance.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from studentform.catalog import SUBJECT_CATALOG, order_subjects


class FieldKey(str, Enum):
    """Keys of the form fields, as the presentation layer names them."""

    NAME = "name"
    CLASS_NAME = "className"
    PERCENTAGE = "percentage"
    SUBJECTS = "subjects"


# Fields edited through update_field; subjects go through toggle_subject.
TEXT_FIELDS: tuple[FieldKey, ...] = (
    FieldKey.NAME,
    FieldKey.CLASS_NAME,
    FieldKey.PERCENTAGE,
)


class FormStatus(str, Enum):
    """Submission/display status of the form."""

    EDITING = "editing"  # Neutral, no banner shown
    SUBMITTED_SUCCESS = "submitted_success"  # Success banner, submit disabled
    SUBMITTED_ERROR = "submitted_error"  # Aggregate error banner


SUCCESS_MESSAGE = "Form submitted successfully!"
AGGREGATE_ERROR_MESSAGE = "Please fill all required fields"

# Field key -> message. A missing key means the field is valid.
ValidationErrors = dict[str, str]


class Draft(BaseModel):
    """The in-progress, editable form values.

    Percentage is kept as text until validation parses it. Subjects are
    stored in catalog order, so two drafts with the same selection
    compare equal regardless of the order boxes were ticked.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str = ""
    class_name: str = Field(default="", alias="className")
    percentage: str = ""
    subjects: tuple[str, ...] = ()

    @field_validator("percentage", mode="before")
    @classmethod
    def _percentage_as_text(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("percentage must be text or a number")
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("subjects", mode="before")
    @classmethod
    def _subjects_from_catalog(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("subjects must be a collection of subject labels")
        if value is None:
            return ()
        labels = list(value)
        unknown = [s for s in labels if s not in SUBJECT_CATALOG]
        if unknown:
            raise ValueError(f"Unknown subject(s): {', '.join(map(str, unknown))}")
        return order_subjects(labels)

    def get(self, key: FieldKey | str) -> Any:
        """Return the value of a field by its form key."""
        return self.model_dump(by_alias=True)[FieldKey(key).value]

    def update(self, key: FieldKey | str, value: Any) -> Draft:
        """Return a copy of this draft with one field replaced."""
        data = self.model_dump(by_alias=True)
        data[FieldKey(key).value] = value
        return Draft.model_validate(data)


class SubmittedRecord(Draft):
    """Frozen snapshot of a Draft taken at a successful submit."""

    @classmethod
    def from_draft(cls, draft: Draft) -> SubmittedRecord:
        return cls.model_validate(draft.model_dump(by_alias=True))

    def __eq__(self, other: object) -> bool:
        # A record equals the draft it was taken from.
        if isinstance(other, Draft):
            return self.model_dump() == other.model_dump()
        return NotImplemented

    __hash__ = Draft.__hash__


class FormState(BaseModel):
    """Complete snapshot of the form at one point in time.

    Banner text and submit availability are derived from ``status``
    rather than stored.
    """

    model_config = ConfigDict(frozen=True)

    draft: Draft = Field(default_factory=Draft)
    error_items: tuple[tuple[str, str], ...] = ()
    status: FormStatus = FormStatus.EDITING
    submitted: SubmittedRecord | None = None

    @model_validator(mode="before")
    @classmethod
    def _errors_as_items(cls, data: Any) -> Any:
        if isinstance(data, dict) and "errors" in data:
            data = dict(data)
            data["error_items"] = tuple(dict(data.pop("errors")).items())
        return data

    @property
    def errors(self) -> ValidationErrors:
        """Per-field messages from the last submit, as a fresh dict."""
        return dict(self.error_items)

    @property
    def banner(self) -> str | None:
        """The banner message to show, if any."""
        if self.status == FormStatus.SUBMITTED_SUCCESS:
            return SUCCESS_MESSAGE
        if self.status == FormStatus.SUBMITTED_ERROR:
            return AGGREGATE_ERROR_MESSAGE
        return None

    @property
    def submit_enabled(self) -> bool:
        """Whether the submit action should be offered."""
        return self.status != FormStatus.SUBMITTED_SUCCESS


class SubmitResult(BaseModel):
    """Outcome of a submit attempt.

    Exactly one of ``record`` (valid draft) or ``errors`` (invalid
    draft) is set.
    """

    record: SubmittedRecord | None = None
    errors: ValidationErrors | None = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_record_xor_errors(self) -> SubmitResult:
        """Ensure exactly one of record or errors is set."""
        has_record = self.record is not None
        has_errors = self.errors is not None

        if has_record and has_errors:
            raise ValueError("Cannot set both 'record' and 'errors'; use exactly one")
        if not has_record and not has_errors:
            raise ValueError("Must set exactly one of 'record' or 'errors'")
        if has_errors and not self.errors:
            raise ValueError("'errors' must not be empty for a failed submit")

        return self

    @property
    def ok(self) -> bool:
        """Whether the submit succeeded."""
        return self.record is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary, excluding the unset side."""
        if self.record is not None:
            return {
                "ok": True,
                "record": self.record.model_dump(by_alias=True, mode="json"),
            }
        return {
            "ok": False,
            "message": AGGREGATE_ERROR_MESSAGE,
            "errors": dict(self.errors or {}),
        }
