import os

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

# Single store per process, created on first use.
_repository: TaskRepository | None = None


def _build_task_repository() -> TaskRepository:
    store = os.getenv("TASK_STORE", "memory").lower()

    if store == "memory":
        return InMemoryTaskRepository()
    raise ValueError(f"Unknown TASK_STORE: {store!r}")


def get_task_repository() -> TaskRepository:
    global _repository
    if _repository is None:
        _repository = _build_task_repository()
    return _repository


def _or_global(repository: TaskRepository | None) -> TaskRepository:
    return repository if repository is not None else get_task_repository()


def get_list_tasks_use_case(repository: TaskRepository | None = None) -> ListTasksUseCase:
    return ListTasksUseCase(repository=_or_global(repository))


def get_get_task_use_case(repository: TaskRepository | None = None) -> GetTaskUseCase:
    return GetTaskUseCase(repository=_or_global(repository))


def get_create_task_use_case(repository: TaskRepository | None = None) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=_or_global(repository))


def get_update_task_use_case(repository: TaskRepository | None = None) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=_or_global(repository))


def get_delete_task_use_case(repository: TaskRepository | None = None) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=_or_global(repository))
