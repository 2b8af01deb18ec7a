"""iTunes Search API 客户端封装。"""

from __future__ import annotations

import json
from typing import Any, Optional
from urllib.parse import quote_plus

import httpx

from ..config import Settings
from ..types import SearchResponse, SearchResultItem


class InvalidSearchURL(ValueError):
    """检索 URL 无法构造（检索词为空或端点不合法）。"""


class SearchDecodeError(ValueError):
    """响应体不是合法 JSON，或与预期结构不符。"""


class ItunesSearchClient:
    """iTunes Search 数据客户端。

    只负责拼接检索 URL 并发起单次 GET，不做重试、缓存或分页。
    超时沿用 httpx 默认值。
    """

    def __init__(
        self,
        settings: Settings,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.base_url = base_url or settings.itunes_base_url
        # 3xx 跳转自动跟随，不计为失败
        self._http = httpx.AsyncClient(transport=transport, follow_redirects=True)

    def build_search_url(self, term: str, entity: Optional[str] = None) -> httpx.URL:
        """按客户端的端点与配置的实体类型构造检索 URL，见 `build_search_url`。"""
        return build_search_url(self.base_url, term, entity or self.settings.search_entity)

    async def search(self, url: httpx.URL) -> SearchResponse:
        """对已构造的 URL 发起一次 GET 并解析响应。

        Raises:
            httpx.HTTPError: 网络错误或非 2xx 状态码。
            SearchDecodeError: 响应体无法解析为预期结构。
        """
        resp = await self._http.get(url)
        resp.raise_for_status()
        return decode_search_response(resp.content)

    async def close(self) -> None:
        """关闭底层 HTTP 客户端。"""
        await self._http.aclose()


def build_search_url(base_url: str, term: str, entity: str) -> httpx.URL:
    """将检索词嵌入固定模板，生成请求 URL。

    模板为 ``{base_url}/search?term={term}&enity={entity}``，其中 `enity`
    与线上接口约定保持一致，不做更正。

    Args:
        base_url: 端点根地址，末尾的 ``/`` 会被去掉。
        term: 检索词，按表单规则编码（空格变为 ``+``）。
        entity: 实体类型。

    Returns:
        构造好的 `httpx.URL`。

    Raises:
        InvalidSearchURL: 检索词为空或端点不是合法的 http(s) 地址。
    """
    if not term or not term.strip():
        raise InvalidSearchURL("Invalid URL: empty search term")
    raw = f"{base_url.rstrip('/')}/search?term={quote_plus(term.strip())}&enity={quote_plus(entity)}"
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise InvalidSearchURL(f"Invalid URL: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidSearchURL(f"Invalid URL: {raw}")
    return url


def decode_search_response(body: bytes | str) -> SearchResponse:
    """把响应体解码为 `SearchResponse`，保持 `results` 原始顺序。

    任意一条记录不符合结构都会让整体解码失败。

    Raises:
        SearchDecodeError: 非法 JSON（含超长整数、嵌套过深）或结构不符。
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError 与 UnicodeDecodeError 都是 ValueError 的子类
        raise SearchDecodeError(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise SearchDecodeError("Expected a JSON object at the top level")
    results_raw = payload.get("results")
    if not isinstance(results_raw, list):
        raise SearchDecodeError("Missing or non-array 'results' field")

    return SearchResponse(results=[_to_item(entry, index) for index, entry in enumerate(results_raw)])


def _to_item(entry: Any, index: int) -> SearchResultItem:
    """将单条原始记录转换为 `SearchResultItem`。"""
    if not isinstance(entry, dict):
        raise SearchDecodeError(f"results[{index}] is not an object")

    track_id = entry.get("trackId")
    # bool 是 int 的子类，需要单独排除
    if isinstance(track_id, float) and track_id.is_integer():
        track_id = int(track_id)
    if isinstance(track_id, bool) or not isinstance(track_id, int):
        raise SearchDecodeError(f"results[{index}].trackId must be an integer")

    track_name = entry.get("trackName")
    collection_name = entry.get("collectionName")
    if not isinstance(track_name, str):
        raise SearchDecodeError(f"results[{index}].trackName must be a string")
    if not isinstance(collection_name, str):
        raise SearchDecodeError(f"results[{index}].collectionName must be a string")

    return SearchResultItem(track_id=track_id, track_name=track_name, collection_name=collection_name)
