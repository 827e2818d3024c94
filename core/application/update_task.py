import logging
from dataclasses import dataclass
from typing import Any

from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: Any = None
    description: Any = None
    status: Any = None
    due_date: Any = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        task = self._repository.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        # All four fields are overwritten, missing ones included.
        task.title = cmd.title
        task.description = cmd.description
        task.status = cmd.status
        task.due_date = cmd.due_date

        self._repository.save(task)
        logger.info(f"Task {task_id} updated")
        return task
