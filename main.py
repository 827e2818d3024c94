import logging
import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("task_tracker")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "3000"))
    reload = _as_bool(os.getenv("RELOAD", "false"))
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server running on http://{host}:{port} (reload: {reload})")

    # The task store lives in this process; with reload on, every restart
    # starts from an empty list.
    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run()
