import os
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.routes.tasks import router as tasks_router

# Load environment variables from .env file
load_dotenv()


def _split_env(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title="Task Tracker API")

    # Any origin by default; the method/header lists mirror what the client sends.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_env("CORS_ORIGINS", "*"),
        allow_methods=_split_env("CORS_ALLOW_METHODS", "GET,POST,PUT,DELETE"),
        allow_headers=_split_env("CORS_ALLOW_HEADERS", "Content-Type,Authorization"),
    )

    app.include_router(tasks_router)

    @app.get("/health", include_in_schema=False)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
