"""Render contract for the presentation layer.

Builds a plain view model from a FormState: what each input shows,
which fields are highlighted, which banner is visible, whether submit
is enabled and the read-only summary of the last submitted record.
"""

from pydantic import BaseModel, Field

from studentform.catalog import SUBJECT_CATALOG
from studentform.models import FieldKey, FormState, FormStatus, SubmittedRecord
from studentform.validation import PERCENTAGE_MAX, PERCENTAGE_MIN

FORM_TITLE = "Student Information"
PERCENTAGE_STEP = 0.01

FIELD_LABELS: dict[str, str] = {
    FieldKey.NAME.value: "Name",
    FieldKey.CLASS_NAME.value: "Class",
    FieldKey.PERCENTAGE.value: "Percentage",
    FieldKey.SUBJECTS.value: "Subjects",
}

FIELD_PLACEHOLDERS: dict[str, str] = {
    FieldKey.NAME.value: "Enter your full name",
    FieldKey.CLASS_NAME.value: "e.g. 10th Grade",
    FieldKey.PERCENTAGE.value: "e.g. 95.5",
}


class FieldView(BaseModel):
    """One text input as the presentation layer should render it."""

    key: str
    label: str
    value: str
    placeholder: str
    error: str | None = None

    @property
    def invalid(self) -> bool:
        return self.error is not None


class SubjectOption(BaseModel):
    """One checkbox in the subject list."""

    label: str
    checked: bool


class FormView(BaseModel):
    """Everything needed to draw the form for one state snapshot."""

    title: str = FORM_TITLE
    fields: list[FieldView]
    subjects: list[SubjectOption]
    subjects_error: str | None = None
    banner: str | None = None
    banner_is_error: bool = False
    submit_enabled: bool = True
    percentage_min: float = PERCENTAGE_MIN
    percentage_max: float = PERCENTAGE_MAX
    percentage_step: float = PERCENTAGE_STEP
    summary: list[tuple[str, str]] = Field(default_factory=list)

    def field(self, key: FieldKey | str) -> FieldView:
        """Return the view of one text field by key."""
        wanted = FieldKey(key).value
        for field in self.fields:
            if field.key == wanted:
                return field
        raise KeyError(wanted)


def summary_lines(record: SubmittedRecord) -> list[tuple[str, str]]:
    """Return (label, text) pairs describing a submitted record."""
    return [
        (FIELD_LABELS[FieldKey.NAME.value], record.name),
        (FIELD_LABELS[FieldKey.CLASS_NAME.value], record.class_name),
        (FIELD_LABELS[FieldKey.PERCENTAGE.value], f"{record.percentage}%"),
        (FIELD_LABELS[FieldKey.SUBJECTS.value], ", ".join(record.subjects)),
    ]


def build_view(state: FormState) -> FormView:
    """Build the view model for a state snapshot."""
    draft = state.draft
    fields = [
        FieldView(
            key=key,
            label=FIELD_LABELS[key],
            value=draft.get(key),
            placeholder=FIELD_PLACEHOLDERS[key],
            error=state.errors.get(key),
        )
        for key in (
            FieldKey.NAME.value,
            FieldKey.CLASS_NAME.value,
            FieldKey.PERCENTAGE.value,
        )
    ]
    subjects = [
        SubjectOption(label=label, checked=label in draft.subjects)
        for label in SUBJECT_CATALOG
    ]

    return FormView(
        fields=fields,
        subjects=subjects,
        subjects_error=state.errors.get(FieldKey.SUBJECTS.value),
        banner=state.banner,
        banner_is_error=state.status == FormStatus.SUBMITTED_ERROR,
        submit_enabled=state.submit_enabled,
        summary=summary_lines(state.submitted) if state.submitted is not None else [],
    )
