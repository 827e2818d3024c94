import unittest

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _create(self, **fields) -> Task:
        return CreateTaskUseCase(self.repo).execute(CreateTaskCommand(**fields))

    def test_create_task_assigns_next_id_and_stores(self) -> None:
        task = self._create(
            title="Design architecture",
            description="Hexagonal",
            status="pending",
            due_date="2099-01-01",
        )

        self.assertEqual(task.id, 1)
        self.assertEqual(task.title, "Design architecture")
        self.assertEqual(task.due_date, "2099-01-01")
        self.assertEqual(self.repo.get(task.id), task)

    def test_create_task_keeps_missing_fields_empty(self) -> None:
        task = self._create(title="Only a title")

        self.assertIsNone(task.description)
        self.assertIsNone(task.status)
        self.assertIsNone(task.due_date)

    def test_create_task_stores_fields_as_given(self) -> None:
        task = self._create(title=42, status="whatever", due_date="not a date")

        loaded = GetTaskUseCase(self.repo).execute(task.id)
        self.assertEqual(loaded.title, 42)
        self.assertEqual(loaded.status, "whatever")
        self.assertEqual(loaded.due_date, "not a date")

    def test_list_tasks_keeps_insertion_order(self) -> None:
        for title in ("a", "b", "c"):
            self._create(title=title)

        titles = [t.title for t in ListTasksUseCase(self.repo).execute()]

        self.assertEqual(titles, ["a", "b", "c"])

    def test_get_missing_task_raises(self) -> None:
        with self.assertRaises(TaskNotFoundError) as ctx:
            GetTaskUseCase(self.repo).execute(99)
        self.assertEqual(ctx.exception.task_id, 99)

    def test_update_task_overwrites_all_fields(self) -> None:
        original = self._create(
            title="Initial", description="d1", status="pending", due_date="2099-01-01"
        )

        updated = UpdateTaskUseCase(self.repo).execute(
            original.id,
            UpdateTaskCommand(title="Updated", due_date="2000-01-01", status="completed"),
        )

        self.assertEqual(updated.id, original.id)
        self.assertEqual(updated.title, "Updated")
        self.assertIsNone(updated.description)
        self.assertEqual(updated.status, "completed")
        self.assertEqual(updated.due_date, "2000-01-01")
        self.assertEqual(self.repo.get(original.id), updated)
        self.assertEqual(len(self.repo.list()), 1)

    def test_update_missing_task_raises(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            UpdateTaskUseCase(self.repo).execute(7, UpdateTaskCommand(title="x"))

    def test_delete_task_removes_it(self) -> None:
        task = self._create(title="Delete me")

        DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=task.id))

        self.assertIsNone(self.repo.get(task.id))

    def test_delete_missing_task_is_a_no_op(self) -> None:
        task = self._create(title="Keep me")

        DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=task.id + 10))

        self.assertEqual(self.repo.list(), [task])


if __name__ == "__main__":
    unittest.main()
