from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.application.create_task import CreateTaskCommand
from core.application.update_task import UpdateTaskCommand
from core.domain.models.task import Task


class TaskPayload(BaseModel):
    """Request body for POST/PUT. Every field is optional and kept as sent."""

    model_config = ConfigDict(populate_by_name=True)

    title: Any = None
    description: Any = None
    status: Any = None
    due_date: Any = Field(default=None, alias="dueDate")

    def to_create_command(self) -> CreateTaskCommand:
        return CreateTaskCommand(
            title=self.title,
            description=self.description,
            status=self.status,
            due_date=self.due_date,
        )

    def to_update_command(self) -> UpdateTaskCommand:
        return UpdateTaskCommand(
            title=self.title,
            description=self.description,
            status=self.status,
            due_date=self.due_date,
        )


class TaskResponse(TaskPayload):
    id: int

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            due_date=task.due_date,
        )
