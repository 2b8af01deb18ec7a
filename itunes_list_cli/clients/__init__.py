"""Client wrappers for external endpoints."""

from .itunes import (
    InvalidSearchURL,
    ItunesSearchClient,
    SearchDecodeError,
    build_search_url,
    decode_search_response,
)

__all__ = [
    "ItunesSearchClient",
    "InvalidSearchURL",
    "SearchDecodeError",
    "build_search_url",
    "decode_search_response",
]
