"""
Task form state.

A single form is reused for both creating and editing. `editing` tells which
of the two a submit means; `task_id` is only meaningful while editing.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from core.domain.services.status import derive_status

TITLE_REQUIRED = "Please enter a title."
DUE_DATE_REQUIRED = "Please enter a due date."


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


@dataclass
class TaskForm:
    title: str = ""
    description: str = ""
    due_date: str = ""
    task_id: int | None = None
    editing: bool = False
    errors: dict[str, str] = field(default_factory=dict)

    def load(self, task: dict[str, Any]) -> None:
        """Copies a task into the form and switches to edit mode."""
        self.title = task.get("title") or ""
        self.description = task.get("description") or ""
        self.due_date = task.get("dueDate") or ""
        self.task_id = task.get("id")
        self.editing = True
        self.errors.clear()

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.due_date = ""
        self.task_id = None
        self.editing = False
        self.errors.clear()

    def set_title(self, value: str) -> None:
        self.title = value
        self._check("title", value, TITLE_REQUIRED)

    def set_description(self, value: str) -> None:
        self.description = value

    def set_due_date(self, value: str) -> None:
        self.due_date = value
        self._check("due_date", value, DUE_DATE_REQUIRED)

    def validate(self) -> bool:
        self._check("title", self.title, TITLE_REQUIRED)
        self._check("due_date", self.due_date, DUE_DATE_REQUIRED)
        return not self.errors

    def to_payload(self, today: date) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "status": derive_status(self.due_date, today).value,
            "dueDate": self.due_date,
        }

    def _check(self, name: str, value: Any, message: str) -> None:
        if _is_blank(value):
            self.errors[name] = message
        else:
            self.errors.pop(name, None)
