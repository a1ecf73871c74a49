"""Task input validator: required fields, enumerated values, and free-text sanitization."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from taskmanager.application.dtos.task import TaskCreate
from taskmanager.domain.enums import TaskPriority
from taskmanager.domain.exceptions import ValidationException
from taskmanager.shared.utils.datetime import parse_iso_date
from taskmanager.shared.utils.sanitization import sanitize_text, validate_identifier

MISSING_REQUIRED_FIELDS = "Missing required fields"


class TaskInputValidator:
    """Validates a raw task-creation payload and returns a sanitized TaskCreate.

    title and description are sanitized (markup stripped) before they are
    checked, so a title consisting only of markup counts as missing.
    """

    def __init__(self, default_priority: TaskPriority = TaskPriority.NORMAL) -> None:
        self._default_priority = default_priority

    def validate(self, payload: Any) -> TaskCreate:
        """Validate and sanitize the payload.

        Args:
            payload: Decoded JSON request body.

        Returns:
            TaskCreate with sanitized text, resolved priority, and parsed due date.

        Raises:
            ValidationException: Naming the missing or invalid field.
        """
        if not isinstance(payload, Mapping):
            raise ValidationException("Invalid request body")

        title = self._title(payload.get("title"))
        assigned_to = self._assigned_to(payload.get("assignedTo"))
        return TaskCreate(
            title=title,
            priority=self._priority(payload.get("priority")),
            assigned_to=assigned_to,
            description=self._description(payload.get("description")),
            due_date=self._due_date(payload.get("dueDate")),
        )

    @staticmethod
    def _title(raw: Any) -> str:
        if raw is None:
            raise ValidationException(MISSING_REQUIRED_FIELDS, field="title")
        if not isinstance(raw, str):
            raise ValidationException("Invalid title", field="title")
        title = sanitize_text(raw)
        if not title:
            raise ValidationException(MISSING_REQUIRED_FIELDS, field="title")
        return title

    @staticmethod
    def _assigned_to(raw: Any) -> list[str]:
        if raw is None or raw == [] or raw == "":
            raise ValidationException(MISSING_REQUIRED_FIELDS, field="assignedTo")
        if not isinstance(raw, list):
            raise ValidationException("Invalid assignees format", field="assignedTo")
        user_ids: list[str] = []
        for item in raw:
            if not isinstance(item, str):
                raise ValidationException("Invalid assignees format", field="assignedTo")
            try:
                user_ids.append(validate_identifier(item))
            except ValueError as e:
                raise ValidationException("Invalid assignees format", field="assignedTo") from e
        return user_ids

    def _priority(self, raw: Any) -> TaskPriority:
        if raw is None:
            return self._default_priority
        if not isinstance(raw, str) or raw not in TaskPriority.values():
            raise ValidationException("Invalid priority", field="priority")
        return TaskPriority(raw)

    @staticmethod
    def _description(raw: Any) -> str | None:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise ValidationException("Invalid description", field="description")
        return sanitize_text(raw) or None

    @staticmethod
    def _due_date(raw: Any) -> date | None:
        if raw is None or raw == "":
            return None
        if not isinstance(raw, str):
            raise ValidationException("Invalid dueDate", field="dueDate")
        try:
            return parse_iso_date(raw)
        except ValueError as e:
            raise ValidationException("Invalid dueDate", field="dueDate") from e
