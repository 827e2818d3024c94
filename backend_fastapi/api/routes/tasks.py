from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import TaskPayload, TaskResponse
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.errors import TaskNotFoundError

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="List all tasks",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskResponse]:
    """
    Returns every stored task in insertion order.
    """
    return [TaskResponse.from_domain(task) for task in use_case.execute()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task",
)
def get_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    try:
        return TaskResponse.from_domain(use_case.execute(task_id))
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(
    payload: TaskPayload | None = None,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Creates a task and assigns it the next id.

    - **title**: Task title.
    - **description**: Free text.
    - **status**: Status label, stored as sent.
    - **dueDate**: Due date (`YYYY-MM-DD`).
    """
    # A request without a body creates a task with every field empty.
    payload = payload if payload is not None else TaskPayload()
    return TaskResponse.from_domain(use_case.execute(payload.to_create_command()))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a task",
)
def update_task(
    task_id: int,
    payload: TaskPayload | None = None,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Overwrites the four fields of an existing task. Fields left out of the
    body are cleared.

    - **task_id**: Id of the task to update.
    """
    payload = payload if payload is not None else TaskPayload()
    try:
        task = use_case.execute(task_id, payload.to_update_command())
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskResponse.from_domain(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> None:
    """
    Removes a task. Answers 204 whether or not the id existed.
    """
    use_case.execute(DeleteTaskCommand(id=task_id))
