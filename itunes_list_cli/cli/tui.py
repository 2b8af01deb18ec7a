"""TUI 相关 CLI 子命令。"""

from __future__ import annotations

from typing import Optional

from ..config import Settings
from ..ui.track_list import run_track_list
from . import main
from .common import term_option


@main.command("tui")
@term_option
def tui(term: Optional[str]) -> None:
    """启动基于 Textual 的曲目列表。"""
    settings = Settings.load()
    run_track_list(settings=settings, term=term)


__all__ = ["tui"]
