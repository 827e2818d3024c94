import itertools
import logging

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    Process-lifetime task store backed by a plain list.

    Ids come from a counter that starts at 1 and never goes back, so an id
    is never handed out twice, even after the task that held it is deleted.
    There is no locking: concurrent writers may lose updates.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)

    def list(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def next_id(self) -> int:
        return next(self._ids)

    def save(self, task: Task) -> None:
        for index, existing in enumerate(self._tasks):
            if existing.id == task.id:
                self._tasks[index] = task
                logger.debug(f"Replaced task {task.id}")
                return
        self._tasks.append(task)
        logger.debug(f"Stored task {task.id} ({len(self._tasks)} in store)")

    def delete(self, task_id: int) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.debug(f"Delete {task_id}: removed {before - len(self._tasks)}")
