"""Form state controller: pure reducer plus a stateful wrapper."""

from studentform.controller.reducer import (
    UnknownFieldError,
    initial_state,
    reset,
    submit,
    toggle_subject,
    update_field,
)
from studentform.controller.controller import FormController

__all__ = [
    "FormController",
    "UnknownFieldError",
    "initial_state",
    "reset",
    "submit",
    "toggle_subject",
    "update_field",
]
