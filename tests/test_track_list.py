"""Textual 曲目列表的交付与渲染测试。"""

from __future__ import annotations

import httpx
import pytest
import structlog

from itunes_list_cli.log import setup_logging
from itunes_list_cli.ui.track_list import TrackListApp, TrackListItem, build_track_list_app

PAYLOAD = {
    "results": [
        {"trackId": 11, "trackName": "Love Story", "collectionName": "Fearless"},
        {"trackId": 12, "trackName": "Fifteen [Live]", "collectionName": "Fearless"},
    ]
}


@pytest.mark.asyncio
async def test_track_list_renders_delivered_items(settings, fetcher_factory) -> None:
    fetcher = fetcher_factory(lambda request: httpx.Response(200, json=PAYLOAD))
    app = TrackListApp(settings=settings, fetcher=fetcher)

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        rows = list(app.query(TrackListItem))
        assert [row.name for row in rows] == ["11", "12"]
        assert [row.item.track_name for row in rows] == ["Love Story", "Fifteen [Live]"]
        assert app.status_message == "2 tracks"


@pytest.mark.asyncio
async def test_track_list_shows_failure_and_no_rows(settings, fetcher_factory) -> None:
    fetcher = fetcher_factory(lambda request: httpx.Response(200, content=b"oops"))
    app = TrackListApp(settings=settings, fetcher=fetcher)

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert len(app.query(TrackListItem)) == 0
        assert app.status_message.startswith("Fetch failed:")


@pytest.mark.asyncio
async def test_track_list_logs_stay_off_the_terminal(settings, fetcher_factory, capsys) -> None:
    """Textual 运行期间的抓取日志不应写到 stdout/stderr。"""
    fetcher = fetcher_factory(lambda request: httpx.Response(200, content=b"oops"))
    app = build_track_list_app(settings, fetcher=fetcher)

    async with app.run_test() as pilot:
        await app.workers.wait_for_complete()
        await pilot.pause()

    captured = capsys.readouterr()
    assert "fetch_failed" not in captured.out
    assert "fetch_failed" not in captured.err
    assert app.status_message.startswith("Fetch failed:")


def test_app_logger_forwards_rendered_lines(settings, capsys) -> None:
    class _RecordingApp:
        def __init__(self) -> None:
            self.lines: list[str] = []

        def log(self, message: str) -> None:
            self.lines.append(message)

    app = _RecordingApp()
    setup_logging(settings, app=app)
    structlog.get_logger().warning("fetch_failed", kind="decode_failure")

    assert len(app.lines) == 1
    assert "fetch_failed" in app.lines[0]
    assert "fetch_failed" not in capsys.readouterr().err
