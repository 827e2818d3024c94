from dataclasses import dataclass
from enum import Enum
from typing import Any


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    title: Any = None
    description: Any = None
    status: Any = None
    due_date: Any = None
