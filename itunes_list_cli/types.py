from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class SearchResultItem:
    """iTunes Search 返回的单条曲目记录。

    Attributes:
        track_id: 曲目唯一 ID（JSON `trackId`），列表渲染时作为 key。
        track_name: 曲目名称（JSON `trackName`）。
        collection_name: 所属专辑名称（JSON `collectionName`）。
    """

    track_id: int
    track_name: str
    collection_name: str

    def to_dict(self) -> dict[str, object]:
        """按接口原始字段名导出。"""
        return {
            "trackId": self.track_id,
            "trackName": self.track_name,
            "collectionName": self.collection_name,
        }


@dataclass
class SearchResponse:
    results: list[SearchResultItem]


class FetchErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    NETWORK_FAILURE = "network_failure"
    DECODE_FAILURE = "decode_failure"


class FetchState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    DECODED = "decoded"
    DELIVERED = "delivered"
    FAILED = "failed"
    LOGGED = "logged"


@dataclass
class FetchError:
    kind: FetchErrorKind
    description: str = UNKNOWN_ERROR

    def __str__(self) -> str:
        return f"Fetch failed: {self.description}"


@dataclass
class FetchResult:
    """一次抓取的结果：成功时带条目列表，失败时带错误且列表为空。"""

    items: list[SearchResultItem] = field(default_factory=list)
    error: Optional[FetchError] = None
    state: FetchState = FetchState.IDLE

    @property
    def ok(self) -> bool:
        return self.error is None
