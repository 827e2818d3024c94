import logging
from datetime import date
from typing import Any, Callable

import httpx

from core.domain.services.status import derive_status
from frontend_cli.api.client import TasksApiClient
from frontend_cli.form import TaskForm

logger = logging.getLogger(__name__)


class TaskBoard:
    """
    Client-side view of the task collection.

    The local list only changes after the server has answered successfully,
    so a failed request leaves nothing to roll back. Each failure is logged
    and queued in `notifications` for the UI to show once.

    Statuses are always recomputed from the due date, on fetch and on
    submit; the value stored by the server is ignored.
    """

    def __init__(
        self,
        api: TasksApiClient,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.api = api
        self.form = TaskForm()
        self.tasks: list[dict[str, Any]] = []
        self.notifications: list[str] = []
        self._today = today

    def refresh(self) -> bool:
        try:
            fetched = self.api.list_tasks()
        except httpx.HTTPError as e:
            self._report("Error fetching tasks", e)
            return False
        self.tasks = [self._with_status(t) for t in fetched]
        return True

    def edit(self, task_id: int) -> bool:
        task = self.find(task_id)
        if task is None:
            return False
        self.form.load(task)
        return True

    def submit(self) -> bool:
        if not self.form.validate():
            return False

        payload = self.form.to_payload(self._today())
        if self.form.editing:
            task_id = self.form.task_id
            try:
                updated = self.api.update_task(task_id, payload)
            except httpx.HTTPError as e:
                self._report("Error updating task", e)
                return False
            updated = self._with_status(updated)
            self.tasks = [updated if t.get("id") == task_id else t for t in self.tasks]
            self.notifications.append("Task updated.")
        else:
            try:
                created = self.api.create_task(payload)
            except httpx.HTTPError as e:
                self._report("Error creating task", e)
                return False
            self.tasks.append(self._with_status(created))
            self.notifications.append("Task created.")

        self.form.reset()
        return True

    def delete(self, task_id: int) -> bool:
        try:
            self.api.delete_task(task_id)
        except httpx.HTTPError as e:
            self._report("Error deleting task", e)
            return False
        self.tasks = [t for t in self.tasks if t.get("id") != task_id]
        self.notifications.append("Task deleted.")
        return True

    def find(self, task_id: int) -> dict[str, Any] | None:
        return next((t for t in self.tasks if t.get("id") == task_id), None)

    def drain_notifications(self) -> list[str]:
        pending, self.notifications = self.notifications, []
        return pending

    def _with_status(self, task: dict[str, Any]) -> dict[str, Any]:
        status = derive_status(task.get("dueDate"), self._today())
        return {**task, "status": status.value}

    def _report(self, message: str, error: httpx.HTTPError) -> None:
        logger.exception(f"{message}: {error}")
        self.notifications.append(f"{message}.")
