"""Pure state transitions for the form.

Each function takes the current FormState and returns a new one; none
of them mutate their input. FormController wraps these for callers that
want a stateful object.
"""

from typing import Any

from studentform.catalog import is_catalog_subject
from studentform.models import (
    TEXT_FIELDS,
    FieldKey,
    FormState,
    FormStatus,
    SubmitResult,
    SubmittedRecord,
)
from studentform.validation import validate_draft


class UnknownFieldError(KeyError):
    """Raised when update_field is given a key that is not a text field."""

    def __init__(self, key: Any) -> None:
        self.key = key
        allowed = ", ".join(f.value for f in TEXT_FIELDS)
        super().__init__(f"Unknown text field: {key!r} (expected one of: {allowed})")


def _text_field(key: FieldKey | str) -> FieldKey:
    try:
        field = FieldKey(key)
    except ValueError:
        raise UnknownFieldError(key) from None
    if field not in TEXT_FIELDS:
        raise UnknownFieldError(key)
    return field


def initial_state() -> FormState:
    """Return the state of a freshly opened form."""
    return FormState()


def update_field(state: FormState, key: FieldKey | str, value: Any) -> FormState:
    """Set one text field of the draft.

    Clears any banner by returning to EDITING. Per-field errors from the
    last submit are kept; no validation runs here.

    Raises:
        UnknownFieldError: If key is not name, className or percentage.
    """
    field = _text_field(key)
    return state.model_copy(
        update={
            "draft": state.draft.update(field, value),
            "status": FormStatus.EDITING,
        }
    )


def toggle_subject(state: FormState, subject: str, included: bool) -> FormState:
    """Include or exclude a subject in the draft.

    Subjects outside the catalog are ignored and the state is returned
    unchanged.
    """
    if not is_catalog_subject(subject):
        return state

    subjects = set(state.draft.subjects)
    if included:
        subjects.add(subject)
    else:
        subjects.discard(subject)

    return state.model_copy(
        update={
            "draft": state.draft.update(FieldKey.SUBJECTS, subjects),
            "status": FormStatus.EDITING,
        }
    )


def submit(state: FormState) -> tuple[FormState, SubmitResult]:
    """Validate the draft and move to a submitted status.

    On success the draft is snapshotted into a SubmittedRecord and
    cleared. On failure the draft is kept and the errors are stored.

    Returns:
        The new state and the outcome of the attempt.
    """
    errors = validate_draft(state.draft)

    if errors:
        new_state = state.model_copy(
            update={
                "error_items": tuple(errors.items()),
                "status": FormStatus.SUBMITTED_ERROR,
            }
        )
        return new_state, SubmitResult(errors=errors)

    record = SubmittedRecord.from_draft(state.draft)
    new_state = FormState(
        status=FormStatus.SUBMITTED_SUCCESS,
        submitted=record,
    )
    return new_state, SubmitResult(record=record)


def reset(state: FormState | None = None) -> FormState:
    """Clear the draft, the submitted record, errors and banners."""
    return initial_state()
