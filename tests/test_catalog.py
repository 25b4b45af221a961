"""Tests for the subject catalog."""

from studentform.catalog import SUBJECT_CATALOG, is_catalog_subject, order_subjects


class TestSubjectCatalog:
    """Tests for the catalog constant and helpers."""

    def test_catalog_labels(self) -> None:
        """Test the catalog holds the six offered subjects in display order."""
        assert SUBJECT_CATALOG == (
            "Hindi",
            "Science",
            "Maths",
            "English",
            "Computer Science",
            "Geography",
        )

    def test_is_catalog_subject(self) -> None:
        """Test membership is exact and case-sensitive."""
        assert is_catalog_subject("Computer Science")
        assert not is_catalog_subject("computer science")
        assert not is_catalog_subject("Physics")

    def test_order_subjects_follows_catalog(self) -> None:
        """Test subjects come back in catalog order whatever the input order."""
        assert order_subjects(["Geography", "Hindi", "Maths"]) == (
            "Hindi",
            "Maths",
            "Geography",
        )

    def test_order_subjects_drops_duplicates_and_unknown(self) -> None:
        """Test duplicates collapse and unknown labels are dropped."""
        assert order_subjects(["Maths", "Maths", "Physics"]) == ("Maths",)
