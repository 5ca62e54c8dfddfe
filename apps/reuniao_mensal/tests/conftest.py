from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from reuniao_mensal.api.app import create_app
from reuniao_mensal.core.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_TIMEZONE="America/Sao_Paulo",
        DEFAULT_ORDINAL=3,
        DEFAULT_WEEKDAY="wednesday",
        DEFAULT_TIME_OF_DAY="12:00",
        MAX_OCCURRENCES=12,
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
