"""Fixed catalog of selectable subjects.

Shared by the controller (membership checks) and the presentation
layer (checkbox options), so the list lives here only.
"""

from collections.abc import Iterable

SUBJECT_CATALOG: tuple[str, ...] = (
    "Hindi",
    "Science",
    "Maths",
    "English",
    "Computer Science",
    "Geography",
)


def is_catalog_subject(subject: str) -> bool:
    """Return True if the subject label is in the catalog."""
    return subject in SUBJECT_CATALOG


def order_subjects(subjects: Iterable[str]) -> tuple[str, ...]:
    """Return the given subjects in catalog order, without duplicates.

    Labels outside the catalog are dropped.
    """
    selected = set(subjects)
    return tuple(s for s in SUBJECT_CATALOG if s in selected)
