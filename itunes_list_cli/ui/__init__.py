"""Terminal presentation layer."""

from .track_list import TrackListApp, TrackListItem, build_track_list_app, run_track_list

__all__ = ["TrackListApp", "TrackListItem", "build_track_list_app", "run_track_list"]
