import pytest

from transfer_planner.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (
        "PLANNER_DEFAULT_START_TERM",
        "PLANNER_DEFAULT_TERM_COUNT",
        "PLANNER_DEFAULT_MAX_PER_TERM",
        "PLANNER_CORS_ORIGINS",
        "PLANNER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
