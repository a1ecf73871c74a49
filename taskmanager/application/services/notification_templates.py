"""Assignment notification templates: task priority -> subject/body (Jinja)."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined, Template

from taskmanager.domain.enums import TaskPriority

_BODY = (
    "Hello {{ assignee.name or 'there' }},\n\n"
    "{% if task.priority == 'urgent' %}"
    "An URGENT task has been assigned to you and needs your immediate attention.\n\n"
    "{% else %}"
    "A new task has been assigned to you.\n\n"
    "{% endif %}"
    "Title: {{ task.title }}\n"
    "{% if task.description %}Description: {{ task.description }}\n{% endif %}"
    "Priority: {{ task.priority | capitalize }}\n"
    "{% if task.due_date %}Due date: {{ task.due_date }}\n{% endif %}"
    "Assigned by: {{ assigned_by }}\n"
    "{% if app_url %}\nView the task: {{ app_url }}/tasks/{{ task.id }}\n{% endif %}"
)

# In-repo template definitions: priority -> (subject_template, body_template)
# Context: task (TaskEntity fields), assignee (ResolvedAssignee), assigned_by, app_url
_DEFAULT_TEMPLATES: dict[str, tuple[str, str]] = {
    TaskPriority.URGENT.value: ("🚨 Urgent Task Assigned: {{ task.title }}", _BODY),
    TaskPriority.HIGH.value: ("High Priority Task Assigned: {{ task.title }}", _BODY),
    TaskPriority.NORMAL.value: ("New Task Assigned: {{ task.title }}", _BODY),
    TaskPriority.LOW.value: ("New Task Assigned: {{ task.title }}", _BODY),
}


class TaskNotificationRenderer:
    """Renders subject and body of an assignment email from the task priority."""

    def __init__(
        self,
        templates: dict[str, tuple[str, str]] | None = None,
    ) -> None:
        """Initialize with optional template dict; falls back to _DEFAULT_TEMPLATES."""
        self._templates = templates or _DEFAULT_TEMPLATES
        # Plain-text emails; free text is already sanitized before persistence.
        self._env = Environment(autoescape=False, undefined=StrictUndefined)
        self._compiled: dict[str, tuple[Template, Template]] = {}
        for key, (sub_str, body_str) in self._templates.items():
            self._compiled[key] = (
                self._env.from_string(sub_str),
                self._env.from_string(body_str),
            )

    def render(self, priority: str, context: dict[str, Any]) -> tuple[str, str]:
        """Render subject and body for the priority. Raises KeyError if priority unknown."""
        if priority not in self._compiled:
            raise KeyError(f"No notification template for priority: {priority}")
        subject_tpl, body_tpl = self._compiled[priority]
        return subject_tpl.render(**context), body_tpl.render(**context)
