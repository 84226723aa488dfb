from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


@dataclass(frozen=True)
class Settings:
    env: str
    log_level: str
    cors_origins: Tuple[str, ...]
    port: int

    @property
    def is_testing(self) -> bool:
        return self.env == "test"


def load_settings() -> Settings:
    """
    Loads settings from environment variables (and a .env file if present).
    """
    load_dotenv()  # loads .env into env vars

    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        env=os.getenv("GROWTHSIM_ENV", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=tuple(origin.strip() for origin in origins.split(",") if origin.strip()),
        port=int(os.getenv("PORT", "5000")),
    )
