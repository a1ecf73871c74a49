"""TaskInputValidator: required fields, enumerations, sanitization."""

from datetime import date

import pytest

from taskmanager.application.services.task_input_validator import (
    MISSING_REQUIRED_FIELDS,
    TaskInputValidator,
)
from taskmanager.domain.enums import TaskPriority
from taskmanager.domain.exceptions import ValidationException


@pytest.fixture
def validator() -> TaskInputValidator:
    return TaskInputValidator()


def test_valid_payload(validator: TaskInputValidator) -> None:
    data = validator.validate(
        {
            "title": "  Ship release  ",
            "description": "Tag and publish",
            "priority": "high",
            "dueDate": "2026-03-15",
            "assignedTo": ["u1", "u2"],
        }
    )
    assert data.title == "Ship release"
    assert data.description == "Tag and publish"
    assert data.priority is TaskPriority.HIGH
    assert data.due_date == date(2026, 3, 15)
    assert data.assigned_to == ["u1", "u2"]


def test_duplicates_are_kept_for_the_resolver(validator: TaskInputValidator) -> None:
    data = validator.validate({"title": "T", "assignedTo": ["u1", "u1"]})
    assert data.assigned_to == ["u1", "u1"]


@pytest.mark.parametrize(
    "payload",
    [
        {"assignedTo": ["u1"]},
        {"title": "", "assignedTo": ["u1"]},
        {"title": "   ", "assignedTo": ["u1"]},
        {"title": "T"},
        {"title": "T", "assignedTo": []},
        {"title": "T", "assignedTo": None},
    ],
)
def test_missing_required_fields(validator: TaskInputValidator, payload: dict) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate(payload)
    assert exc_info.value.message == MISSING_REQUIRED_FIELDS


def test_non_mapping_payload(validator: TaskInputValidator) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate(None)
    assert exc_info.value.message == "Invalid request body"


@pytest.mark.parametrize("assigned_to", ["u1", ["u1", 7], ["u1", "  "], {"id": "u1"}])
def test_malformed_assignees(validator: TaskInputValidator, assigned_to) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate({"title": "T", "assignedTo": assigned_to})
    assert exc_info.value.details == {"field": "assignedTo"}


def test_priority_defaults_to_configured_value() -> None:
    data = TaskInputValidator(default_priority=TaskPriority.LOW).validate(
        {"title": "T", "assignedTo": ["u1"]}
    )
    assert data.priority is TaskPriority.LOW


@pytest.mark.parametrize("priority", ["critical", "URGENT", 3])
def test_invalid_priority(validator: TaskInputValidator, priority) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate({"title": "T", "priority": priority, "assignedTo": ["u1"]})
    assert exc_info.value.message == "Invalid priority"


def test_invalid_due_date(validator: TaskInputValidator) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate({"title": "T", "dueDate": "next friday", "assignedTo": ["u1"]})
    assert exc_info.value.details == {"field": "dueDate"}


def test_due_date_accepts_datetime_string(validator: TaskInputValidator) -> None:
    data = validator.validate(
        {"title": "T", "dueDate": "2026-03-15T09:00:00Z", "assignedTo": ["u1"]}
    )
    assert data.due_date == date(2026, 3, 15)


def test_markup_stripped_from_text_fields(validator: TaskInputValidator) -> None:
    data = validator.validate(
        {
            "title": "<script>steal()</script>Review PR",
            "description": "<img src=x onerror=alert(1)>Check <b>tests</b>",
            "assignedTo": ["u1"],
        }
    )
    assert data.title == "Review PR"
    assert data.description == "Check tests"


def test_markup_only_description_becomes_none(validator: TaskInputValidator) -> None:
    data = validator.validate({"title": "T", "description": "<p></p>", "assignedTo": ["u1"]})
    assert data.description is None


def test_non_string_title(validator: TaskInputValidator) -> None:
    with pytest.raises(ValidationException) as exc_info:
        validator.validate({"title": 42, "assignedTo": ["u1"]})
    assert exc_info.value.message == "Invalid title"
