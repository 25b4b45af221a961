"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest

from studentform.controller import FormController
from studentform.models import Draft


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def studentform_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config home at a temp dir so tests never read user config."""
    home = tmp_path / "studentform-home"
    monkeypatch.setenv("STUDENT_FORM_HOME", str(home))
    monkeypatch.delenv("STUDENT_FORM_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def valid_draft() -> Draft:
    """A draft that passes every check."""
    return Draft(
        name="Ada",
        className="10th",
        percentage="95.5",
        subjects=["Maths", "Science"],
    )


@pytest.fixture
def invalid_draft() -> Draft:
    """A draft with a blank name, negative percentage and no subjects."""
    return Draft(name="", className="10th", percentage="-5", subjects=[])


@pytest.fixture
def controller() -> FormController:
    """A controller on a blank form."""
    return FormController()


@pytest.fixture
def filled_controller(valid_draft: Draft) -> FormController:
    """A controller whose draft was filled in through its operations."""
    controller = FormController()
    controller.update_field("name", valid_draft.name)
    controller.update_field("className", valid_draft.class_name)
    controller.update_field("percentage", valid_draft.percentage)
    for subject in valid_draft.subjects:
        controller.toggle_subject(subject, True)
    return controller


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI or setup_logging attached during a test."""
    yield
    logger = logging.getLogger("studentform")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
