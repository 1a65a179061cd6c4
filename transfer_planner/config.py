from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

from dotenv import load_dotenv

# -----------------------------------------------------------------------------
# Bounds for scheduling settings
# -----------------------------------------------------------------------------
TERM_COUNT_MIN, TERM_COUNT_MAX = 1, 20
MAX_PER_TERM_MIN, MAX_PER_TERM_MAX = 1, 8


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def _env_int(name: str, default: int, lo: int, hi: int) -> int:
    raw = os.environ.get(name, "")
    try:
        return clamp(int(raw), lo, hi)
    except (TypeError, ValueError):
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name, "")
    items = [s.strip() for s in raw.split(",") if s.strip()]
    return items or default


@dataclass(frozen=True)
class Settings:
    default_start_term: str = "Term 1"
    default_term_count: int = 6
    default_max_per_term: int = 5
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        default_start_term=os.environ.get("PLANNER_DEFAULT_START_TERM", "").strip() or "Term 1",
        default_term_count=_env_int("PLANNER_DEFAULT_TERM_COUNT", 6, TERM_COUNT_MIN, TERM_COUNT_MAX),
        default_max_per_term=_env_int("PLANNER_DEFAULT_MAX_PER_TERM", 5, MAX_PER_TERM_MIN, MAX_PER_TERM_MAX),
        cors_origins=tuple(_env_list("PLANNER_CORS_ORIGINS", ["*"])),
        log_level=os.environ.get("PLANNER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        host=os.environ.get("PLANNER_HOST", "").strip() or "127.0.0.1",
        port=_env_int("PLANNER_PORT", 8000, 1, 65535),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
