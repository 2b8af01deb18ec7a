"""Business logic services: fetch, decode and deliver search results."""

from .fetcher import Fetcher

__all__ = ["Fetcher"]
