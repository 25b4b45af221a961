"""Stateful form controller.

Holds the current FormState, applies reducer transitions in the order
operations are called, and notifies subscribers with each new snapshot.
"""

import logging
from collections.abc import Callable
from typing import Any

from studentform.controller import reducer
from studentform.models import Draft, FieldKey, FormState, SubmitResult, ValidationErrors
from studentform.validation import validate_draft

logger = logging.getLogger(__name__)

Listener = Callable[[FormState], None]


class FormController:
    """Owns the form state and exposes the user-facing operations.

    The presentation layer forwards field edits, checkbox changes, submit
    and reset to this object, and renders from ``state`` (or from the
    snapshots passed to subscribers).
    """

    def __init__(self, state: FormState | None = None) -> None:
        """Initialize the controller.

        Args:
            state: Optional starting state. Defaults to a blank form.
        """
        self._state = state if state is not None else reducer.initial_state()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> FormState:
        """The current state snapshot."""
        return self._state

    @property
    def draft(self) -> Draft:
        return self._state.draft

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback invoked with every new state.

        Args:
            listener: Called with the new FormState after each change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update_field(self, key: FieldKey | str, value: Any) -> None:
        """Set a text field of the draft and clear any banner."""
        new_state = reducer.update_field(self._state, key, value)
        self._commit(new_state, f"update {FieldKey(key).value}")

    def toggle_subject(self, subject: str, included: bool) -> None:
        """Include or exclude a subject. Unknown subjects are ignored."""
        new_state = reducer.toggle_subject(self._state, subject, included)
        if new_state is self._state:
            logger.debug("Ignoring subject outside catalog: %r", subject)
            return
        self._commit(new_state, f"toggle {subject}={included}")

    def validate(self) -> ValidationErrors:
        """Validate the current draft without changing state."""
        return validate_draft(self._state.draft)

    def submit(self) -> SubmitResult:
        """Validate and submit the current draft.

        Returns:
            SubmitResult carrying either the submitted record or the
            per-field errors.
        """
        new_state, result = reducer.submit(self._state)
        if result.ok:
            logger.info(
                "Form submitted with %d subject(s)", len(new_state.submitted.subjects)
            )
        else:
            logger.info("Form submit rejected: %s", ", ".join(sorted(result.errors)))
        self._commit(new_state, "submit")
        return result

    def reset(self) -> None:
        """Return the form to its initial blank state."""
        self._commit(reducer.reset(self._state), "reset")

    def _commit(self, new_state: FormState, action: str) -> None:
        old_status = self._state.status
        self._state = new_state
        logger.debug("%s: %s -> %s", action, old_status.value, new_state.status.value)
        for listener in list(self._listeners):
            listener(new_state)
