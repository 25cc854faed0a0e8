from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import httpx
import pytest

from trendbanner.adapters.http_resilience import ResilienceConfig, ResilientClient

if TYPE_CHECKING:
    from pathlib import Path

Handler = Callable[[httpx.Request], httpx.Response]
ClientFactory = Callable[[ResilienceConfig], ResilientClient]

_CONFIG_VARS = (
    "TMDB_API_KEY",
    "TMDB_TIME_WINDOW",
    "JELLYFIN_URL",
    "JELLYFIN_API_KEY",
    "JELLYFIN_WEB_PATH",
    "TRENDBANNER_TOP_COUNT",
    "TRENDBANNER_REFRESH_INTERVAL_HOURS",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TRENDBANNER_DATA_DIR", str(tmp_path / "data"))


def mock_client_factory(handler: Handler) -> ClientFactory:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory


@pytest.fixture
def make_client_factory() -> Callable[[Handler], ClientFactory]:
    return mock_client_factory


@pytest.fixture
def offline_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="test", base_url="https://api.example.test/3", cache=None)
