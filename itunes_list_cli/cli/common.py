"""CLI 通用工具与共享对象。

本模块提供统一的 Rich `console` 实例、检索词选项以及曲目表格渲染函数。
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..types import SearchResultItem

console = Console()

term_option = click.option(
    "--term",
    default=None,
    type=str,
    help="检索词，缺省取配置中的 SEARCH_TERM。",
)


def print_tracks(items: list[SearchResultItem], title: str = "Tracks") -> None:
    """以 Rich 表格形式渲染曲目列表，顺序与接口返回一致。

    Args:
        items: 曲目列表。
        title: 表格标题。
    """
    if not items:
        console.print("[yellow]No tracks returned.[/yellow]")
        return
    table = Table(
        title=title,
        header_style="bold cyan",
        show_lines=False,
        row_styles=["dim", ""],
    )
    table.add_column("Track ID", justify="right")
    table.add_column("Track", style="bold", overflow="fold")
    table.add_column("Collection", overflow="fold")
    for item in items:
        table.add_row(str(item.track_id), Text(item.track_name), Text(item.collection_name))
    console.print(table)


__all__ = ["console", "term_option", "print_tracks"]
