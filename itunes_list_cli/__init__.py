"""Fetch iTunes search results and present them as a list."""

from .services.fetcher import Fetcher
from .types import FetchError, FetchErrorKind, FetchResult, FetchState, SearchResultItem

__all__ = ["Fetcher", "FetchError", "FetchErrorKind", "FetchResult", "FetchState", "SearchResultItem"]
