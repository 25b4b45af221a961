"""Tests for the stateful FormController."""

import logging

import pytest

from studentform.controller import FormController, UnknownFieldError
from studentform.models import Draft, FormState, FormStatus


class TestFormControllerOperations:
    """Tests for the controller's user-facing operations."""

    def test_starts_blank(self, controller: FormController) -> None:
        """Test a new controller holds the initial state."""
        assert controller.state == FormState()
        assert controller.draft == Draft()

    def test_starts_from_given_state(self, valid_draft: Draft) -> None:
        """Test a controller can resume from a snapshot."""
        controller = FormController(FormState(draft=valid_draft))

        assert controller.draft == valid_draft

    def test_fill_and_submit(self, filled_controller: FormController, valid_draft: Draft) -> None:
        """Test the Ada scenario end to end."""
        assert filled_controller.validate() == {}

        result = filled_controller.submit()

        assert result.ok
        assert result.record == valid_draft
        assert filled_controller.state.status == FormStatus.SUBMITTED_SUCCESS
        assert filled_controller.state.submitted == result.record
        assert filled_controller.draft == Draft()

    def test_submit_invalid_keeps_draft(self, controller: FormController) -> None:
        """Test a rejected submit keeps what the user typed."""
        controller.update_field("className", "10th")
        controller.update_field("percentage", "-5")
        draft_before = controller.draft

        result = controller.submit()

        assert not result.ok
        assert set(result.errors) == {"name", "percentage", "subjects"}
        assert controller.draft == draft_before
        assert controller.state.status == FormStatus.SUBMITTED_ERROR

    def test_validate_has_no_side_effects(self, controller: FormController) -> None:
        """Test validate does not store errors or change status."""
        errors = controller.validate()

        assert len(errors) == 4
        assert controller.state == FormState()

    def test_edit_after_error_clears_banner(self, controller: FormController) -> None:
        """Test any edit after a failed submit clears the banner."""
        controller.submit()
        controller.toggle_subject("Hindi", True)

        assert controller.state.status == FormStatus.EDITING
        assert controller.state.banner is None

    def test_unknown_subject_ignored(self, controller: FormController) -> None:
        """Test toggling a subject outside the catalog does nothing."""
        controller.submit()
        state_before = controller.state

        controller.toggle_subject("Physics", True)

        assert controller.state is state_before

    def test_unknown_field_raises(self, controller: FormController) -> None:
        """Test update_field rejects non-text keys."""
        with pytest.raises(UnknownFieldError):
            controller.update_field("subjects", ["Maths"])

    def test_reset_from_any_state(self, filled_controller: FormController) -> None:
        """Test reset returns everything to the initial values."""
        filled_controller.submit()
        filled_controller.update_field("name", "Grace")
        filled_controller.reset()

        assert filled_controller.state == FormState()


class TestFormControllerSubscribers:
    """Tests for state change notifications."""

    def test_listener_receives_each_state(self, controller: FormController) -> None:
        """Test listeners are called in operation order."""
        seen: list[FormState] = []
        controller.subscribe(seen.append)

        controller.update_field("name", "Ada")
        controller.toggle_subject("Maths", True)
        controller.submit()
        controller.reset()

        assert [s.status for s in seen] == [
            FormStatus.EDITING,
            FormStatus.EDITING,
            FormStatus.SUBMITTED_ERROR,
            FormStatus.EDITING,
        ]
        assert seen[-1] is controller.state

    def test_listener_snapshot_errors_unchanged(self, controller: FormController) -> None:
        """Test changing state errors after notification leaves the listener's copy intact."""
        seen: list[FormState] = []
        controller.subscribe(seen.append)

        controller.submit()
        controller.state.errors.clear()
        controller.state.errors["name"] = "changed"

        assert seen[-1].errors["name"] == "Name is required"
        assert len(seen[-1].errors) == 4

    def test_unsubscribe(self, controller: FormController) -> None:
        """Test an unsubscribed listener is not called again."""
        seen: list[FormState] = []
        unsubscribe = controller.subscribe(seen.append)

        controller.update_field("name", "Ada")
        unsubscribe()
        controller.update_field("name", "Grace")
        unsubscribe()

        assert len(seen) == 1

    def test_noop_toggle_does_not_notify(self, controller: FormController) -> None:
        """Test ignored toggles produce no notification."""
        seen: list[FormState] = []
        controller.subscribe(seen.append)

        controller.toggle_subject("Physics", True)

        assert seen == []


class TestFormControllerLogging:
    """Tests for controller log output."""

    def test_logs_submit_outcomes(
        self, filled_controller: FormController, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test accepted and rejected submits are logged at INFO."""
        caplog.set_level(logging.INFO, logger="studentform")

        filled_controller.submit()
        filled_controller.submit()

        messages = [r.getMessage() for r in caplog.records]
        assert "Form submitted with 2 subject(s)" in messages
        assert "Form submit rejected: className, name, percentage, subjects" in messages
