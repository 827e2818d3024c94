import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "http://localhost:3000/"


@dataclass(slots=True)
class ClientSettings:
    api_url: str = DEFAULT_API_URL
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ClientSettings":
        api_url = os.getenv("TASKS_API_URL", "").strip() or DEFAULT_API_URL
        return cls(
            api_url=api_url,
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )
