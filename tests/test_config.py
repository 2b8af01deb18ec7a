from __future__ import annotations

from pathlib import Path

from itunes_list_cli.config import Settings


def test_defaults_match_public_endpoint(settings: Settings) -> None:
    assert settings.itunes_base_url == "https://itunes.apple.com"
    assert settings.search_term == "taylor swift"
    assert settings.search_entity == "song"
    assert settings.log_format == "console"


def test_load_reads_env_file_and_overrides(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SEARCH_TERM=phoebe bridgers\nLOG_LEVEL=DEBUG\n", encoding="utf-8")

    settings = Settings.load(env_file=env_file, overrides={"log_format": "json"})

    assert settings.search_term == "phoebe bridgers"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
