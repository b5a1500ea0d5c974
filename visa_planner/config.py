"""Application configuration helpers."""

from dataclasses import dataclass, field
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://localhost:3000",
    "https://127.0.0.1:3000",
]


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    simulated_delay_seconds: float = 0.5
    visa_data_path: Optional[str] = None
    app_name: str = "VisaMarker"
    share_base_url: str = "https://api.whatsapp.com/send?text="
    share_preview_chars: int = 200
    max_plans: int = 1000
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}.")
    return value


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {raw!r}.")
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    origins = os.getenv("VISA_PLANNER_CORS_ORIGINS")
    cors_origins = (
        [o.strip() for o in origins.split(",") if o.strip()] if origins else list(DEFAULT_CORS_ORIGINS)
    )

    return Settings(
        simulated_delay_seconds=_env_float("VISA_PLANNER_DELAY_SECONDS", 0.5),
        visa_data_path=os.getenv("VISA_PLANNER_DATA_PATH") or None,
        app_name=os.getenv("VISA_PLANNER_APP_NAME", "VisaMarker"),
        share_base_url=os.getenv("VISA_PLANNER_SHARE_URL", "https://api.whatsapp.com/send?text="),
        share_preview_chars=_env_int("VISA_PLANNER_SHARE_PREVIEW_CHARS", 200),
        max_plans=_env_int("VISA_PLANNER_MAX_PLANS", 1000, minimum=1),
        cors_origins=cors_origins,
        log_level=os.getenv("VISA_PLANNER_LOG_LEVEL", "INFO").upper(),
    )
