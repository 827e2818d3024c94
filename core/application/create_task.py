import logging
from dataclasses import dataclass
from typing import Any

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: Any = None
    description: Any = None
    status: Any = None
    due_date: Any = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        # Fields are stored as given; presence checks belong to the client.
        task = Task(
            id=self._repository.next_id(),
            title=cmd.title,
            description=cmd.description,
            status=cmd.status,
            due_date=cmd.due_date,
        )
        self._repository.save(task)
        logger.info(f"Task {task.id} created")
        return task
