"""iTunes 检索 CLI 顶层入口。

本模块仅负责定义 Click 命令组并导入各子命令模块，
实际业务逻辑拆分在 `itunes_list_cli.cli.*` 子模块中。
"""

from __future__ import annotations

import click

from ..config import Settings
from ..log import setup_logging


@click.group()
def main() -> None:
    """Fetch iTunes search results and list them."""
    setup_logging(Settings.load())


# 导入子模块以注册子命令（装饰器在导入时执行）
from . import search as _search  # noqa: F401,E402
from . import tui as _tui  # noqa: F401,E402


__all__ = ["main"]
