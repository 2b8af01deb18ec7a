"""Fetcher：一次请求、解码、交付的完整流程。

所有失败（URL 构造、网络、解码）都只记录一条诊断日志并返回空结果，
不向调用方抛出，也不重试。
"""

from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Optional, Union

import httpx

from ..clients.itunes import InvalidSearchURL, ItunesSearchClient, SearchDecodeError
from ..config import Settings
from ..log import get_logger
from ..types import UNKNOWN_ERROR, FetchError, FetchErrorKind, FetchResult, FetchState, SearchResultItem

Deliver = Callable[[list[SearchResultItem]], Union[None, Awaitable[None]]]


class Fetcher:
    """iTunes 检索结果的抓取器。

    重叠调用之间互不协调，各自独立发起请求。
    """

    def __init__(self, settings: Settings, client: Optional[ItunesSearchClient] = None):
        self.settings = settings
        self.client = client or ItunesSearchClient(settings)

    async def fetch(self, term: Optional[str] = None) -> FetchResult:
        """执行一次抓取。

        状态按 IDLE -> REQUESTING -> DECODED 推进；任一步失败则进入
        FAILED，记录诊断日志后停在 LOGGED。

        Args:
            term: 检索词，缺省取配置中的 `search_term`。

        Returns:
            `FetchResult`：成功时状态为 DECODED 并带有按服务端顺序排列的条目；
            失败时状态为 LOGGED，`items` 为空，`error` 描述失败原因。
        """
        term = self.settings.search_term if term is None else term
        log = get_logger("fetcher").bind(term=term)
        result = FetchResult(state=FetchState.IDLE)

        try:
            url = self.client.build_search_url(term)
        except InvalidSearchURL as exc:
            return self._fail(log, result, FetchErrorKind.INVALID_URL, exc)

        log = log.bind(url=str(url))
        result.state = FetchState.REQUESTING
        log.debug("fetch_started", state=result.state.value)
        try:
            response = await self.client.search(url)
        except httpx.HTTPError as exc:
            return self._fail(log, result, FetchErrorKind.NETWORK_FAILURE, exc)
        except SearchDecodeError as exc:
            return self._fail(log, result, FetchErrorKind.DECODE_FAILURE, exc)

        result.items = list(response.results)
        result.state = FetchState.DECODED
        log.info("fetch_decoded", count=len(result.items), state=result.state.value)
        return result

    async def load(self, deliver: Deliver, term: Optional[str] = None) -> FetchResult:
        """抓取并在成功时把条目交给 `deliver`。

        `deliver` 在调用方所在的事件循环中执行；若其返回 awaitable 则等待完成。
        失败时不会调用 `deliver`。
        """
        result = await self.fetch(term)
        if not result.ok:
            return result
        outcome = deliver(result.items)
        if inspect.isawaitable(outcome):
            await outcome
        result.state = FetchState.DELIVERED
        get_logger("fetcher").debug("fetch_delivered", count=len(result.items))
        return result

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @staticmethod
    def _fail(log, result: FetchResult, kind: FetchErrorKind, exc: Optional[BaseException]) -> FetchResult:
        description = _describe(exc)
        result.items = []
        result.error = FetchError(kind=kind, description=description)
        result.state = FetchState.FAILED
        log.warning(
            "fetch_failed",
            kind=kind.value,
            error=description,
            message=str(result.error),
            state=result.state.value,
        )
        result.state = FetchState.LOGGED
        return result


def _describe(exc: Optional[BaseException]) -> str:
    """返回异常的可读描述；没有可用描述时退回 "Unknown error"。"""
    if exc is None:
        return UNKNOWN_ERROR
    text = str(exc).strip()
    return text or UNKNOWN_ERROR
