from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Label, ListItem, ListView, Static

from ..config import Settings
from ..log import setup_logging
from ..services.fetcher import Fetcher
from ..types import SearchResultItem


class TrackListApp(App):
    """Textual TUI showing iTunes search results as a scrollable list."""

    CSS = """
    ListItem Label.headline {
        text-style: bold;
    }
    """

    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, settings: Settings, term: Optional[str] = None, fetcher: Optional[Fetcher] = None):
        super().__init__()
        self.settings = settings
        self.term = term
        self.fetcher = fetcher or Fetcher(settings)
        self.list_view: Optional[ListView] = None
        self.status_text: Optional[Static] = None
        self.status_message = "Loading..."

    def compose(self) -> ComposeResult:
        self.list_view = ListView()
        self.status_text = Static(self.status_message, classes="status")
        yield Header()
        yield self.list_view
        yield self.status_text
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self._load_data(), exclusive=True)

    async def on_unmount(self) -> None:
        await self.fetcher.close()

    async def _load_data(self) -> None:
        result = await self.fetcher.load(self.show_results, term=self.term)
        if not result.ok and self.status_text is not None:
            self.status_message = str(result.error)
            self.status_text.update(Text(self.status_message, style="red"))

    async def show_results(self, items: list[SearchResultItem]) -> None:
        if self.list_view is None:
            return
        await self.list_view.clear()
        await self.list_view.extend(TrackListItem(item) for item in items)
        if self.status_text is not None:
            self.status_message = f"{len(items)} tracks"
            self.status_text.update(self.status_message)


class TrackListItem(ListItem):
    """列表中的一行：曲目名为标题，专辑名在下方，以 trackId 作为 name。"""

    def __init__(self, item: SearchResultItem):
        super().__init__(
            Label(item.track_name, markup=False, classes="headline"),
            Label(item.collection_name, markup=False),
            name=str(item.track_id),
        )
        self.item = item


def build_track_list_app(
    settings: Settings, term: Optional[str] = None, fetcher: Optional[Fetcher] = None
) -> TrackListApp:
    """构造曲目列表 App，并把日志改写到 App.log（Textual 占用终端期间不能写 stderr）。"""
    app = TrackListApp(settings=settings, term=term, fetcher=fetcher)
    setup_logging(settings, app=app)
    return app


def run_track_list(settings: Settings, term: Optional[str] = None) -> None:
    build_track_list_app(settings, term=term).run()
