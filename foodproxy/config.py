from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv

from .oauth import ConsumerCredentials

# Variables already present in the environment win over .env entries.
load_dotenv()


class Settings:
    """Centralized configuration for the FatSecret proxy."""

    def __init__(self) -> None:
        self.fatsecret_base_url: str = os.environ.get(
            "FATSECRET_BASE_URL", "https://platform.fatsecret.com/rest/server.api"
        )
        # Missing credentials are reported on the first signed call, not at startup.
        self.fatsecret_key: str = os.environ.get("FATSECRET_KEY") or ""
        self.fatsecret_secret: str = os.environ.get("FATSECRET_SECRET") or ""
        self.fatsecret_search_method: str = os.environ.get(
            "FATSECRET_SEARCH_METHOD", "foods.search"
        )
        self.fatsecret_food_method: str = os.environ.get(
            "FATSECRET_FOOD_METHOD", "food.get.v3"
        )
        self.fatsecret_timeout: float = float(os.environ.get("FATSECRET_TIMEOUT") or "10")

        self.host: str = os.environ.get("FOODPROXY_HOST") or os.environ.get("HOST") or "127.0.0.1"
        self.port_raw: str = os.environ.get("FOODPROXY_PORT") or os.environ.get("PORT") or "4000"
        self.log_level: str = (os.environ.get("FOODPROXY_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("FOODPROXY_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]

    @property
    def credentials(self) -> ConsumerCredentials:
        return ConsumerCredentials(key=self.fatsecret_key, secret=self.fatsecret_secret)

    @property
    def port(self) -> int:
        try:
            return int(self.port_raw)
        except ValueError:
            return 4000


settings = Settings()
