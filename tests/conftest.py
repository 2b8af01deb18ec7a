from __future__ import annotations

from typing import Callable

import httpx
import pytest
import structlog

from itunes_list_cli.clients.itunes import ItunesSearchClient
from itunes_list_cli.config import Settings
from itunes_list_cli.services.fetcher import Fetcher

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI 命令会全局配置 structlog，每个用例结束后恢复默认。"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


def make_fetcher(settings: Settings, handler: Handler, requests: list[httpx.Request] | None = None) -> Fetcher:
    """构造一个底层使用 `httpx.MockTransport` 的 Fetcher，可选记录发出的请求。"""

    def _handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return handler(request)

    client = ItunesSearchClient(settings, transport=httpx.MockTransport(_handler))
    return Fetcher(settings, client=client)


@pytest.fixture
def fetcher_factory(settings: Settings) -> Callable[..., Fetcher]:
    def _factory(handler: Handler, requests: list[httpx.Request] | None = None) -> Fetcher:
        return make_fetcher(settings, handler, requests)

    return _factory
