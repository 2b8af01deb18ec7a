"""检索相关 CLI 子命令。

包含：

- 拉取检索结果并以表格或 JSON 输出；
- 打印将要请求的检索 URL。
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import click
from rich.text import Text

from ..clients.itunes import InvalidSearchURL, build_search_url
from ..config import Settings
from ..services.fetcher import Fetcher
from ..types import FetchResult
from . import main
from .common import console, print_tracks, term_option


@main.command("search")
@term_option
@click.option("--json", "as_json", is_flag=True, default=False, help="以 JSON 数组输出条目。")
def search(term: Optional[str], as_json: bool) -> None:
    """拉取 iTunes 检索结果并按返回顺序列出。"""
    settings = Settings.load()

    async def _run() -> FetchResult:
        async with Fetcher(settings) as fetcher:
            return await fetcher.fetch(term)

    result = asyncio.run(_run())
    if not result.ok:
        console.print(Text(str(result.error), style="red"))
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps([item.to_dict() for item in result.items], ensure_ascii=False, indent=2))
    else:
        print_tracks(result.items, title=f"iTunes: {settings.search_term if term is None else term}")


@main.command("url")
@term_option
def show_url(term: Optional[str]) -> None:
    """打印检索将使用的请求 URL（不发起请求）。"""
    settings = Settings.load()
    try:
        url = build_search_url(
            settings.itunes_base_url,
            settings.search_term if term is None else term,
            settings.search_entity,
        )
    except InvalidSearchURL as exc:
        console.print(Text(str(exc), style="red"))
        raise SystemExit(1)
    click.echo(str(url))


__all__ = ["search", "show_url"]
