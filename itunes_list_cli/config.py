from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """运行时配置模型，从环境变量或 .env 加载。

    集中管理 iTunes Search 端点、默认检索词以及日志输出方式。
    """

    itunes_base_url: str = "https://itunes.apple.com"

    # 检索参数；`enity` 参数名按线上行为原样保留，这里只配置取值
    search_term: str = "taylor swift"
    search_entity: str = "song"

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", extra="ignore")

    @classmethod
    def load(cls, env_file: Optional[str | Path] = None, overrides: Optional[dict[str, Any]] = None) -> "Settings":
        """Load settings, allowing an optional .env override and programmatic overrides."""
        kwargs: dict[str, Any] = {}
        if env_file:
            kwargs["_env_file"] = env_file
        if overrides:
            kwargs.update(overrides)
        return cls(**kwargs)
