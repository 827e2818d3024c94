import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class TasksApiClient:
    """
    Thin HTTP client for the task API.

    Args:
        base_url: Root URL of the server, e.g. "http://localhost:3000/".
        http:     Ready-made httpx client. Takes precedence over `base_url`;
                  a FastAPI TestClient works here too.

    Every method raises `httpx.HTTPStatusError` for non-2xx answers and
    `httpx.TransportError` when the server cannot be reached. Nothing is
    retried.
    """

    def __init__(self, base_url: str | None = None, http: httpx.Client | None = None) -> None:
        if http is None:
            if not base_url:
                raise ValueError("base_url or http is required")
            http = httpx.Client(base_url=base_url)
        self._http = http

    def list_tasks(self) -> list[dict[str, Any]]:
        return self._send("GET", "/tasks").json()

    def get_task(self, task_id: int) -> dict[str, Any]:
        return self._send("GET", f"/tasks/{task_id}").json()

    def create_task(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._send("POST", "/tasks", json=payload).json()

    def update_task(self, task_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        return self._send("PUT", f"/tasks/{task_id}", json=payload).json()

    def delete_task(self, task_id: int) -> None:
        self._send("DELETE", f"/tasks/{task_id}")

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TasksApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {path}")
        response = self._http.request(method, path, **kwargs)
        response.raise_for_status()
        return response
