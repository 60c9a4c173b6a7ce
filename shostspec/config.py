# /shostspec/config.py
from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    LOG_LEVEL: str = os.getenv("SHOSTSPEC_LOG_LEVEL", "WARNING").upper()

    # Error policy
    FAIL_FAST: bool = os.getenv("SHOSTSPEC_FAIL_FAST", "false").lower() == "true"
    REQUIRE_NUMBER: bool = os.getenv("SHOSTSPEC_REQUIRE_NUMBER", "false").lower() == "true"

    # Limits
    MAX_HOSTS: int = int(os.getenv("SHOSTSPEC_MAX_HOSTS", "0"))  # per expression, 0 = off


settings = Settings()
