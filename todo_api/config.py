"""
全局配置模块：通过 pydantic-settings 读取环境变量 / .env
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """应用全局配置，环境变量优先，其次 .env 文件"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── 应用 ──
    APP_NAME: str = "todo-api"
    APP_HOST: str = "0.0.0.0"
    PORT: int = 8000  # 未配置时监听 8000
    ENV: str = "development"  # development | production

    # ── 日志 ──
    LOG_LEVEL: str = "INFO"

    # ── Todo 存储 ──
    TODO_UNIQUE_IDS: bool = True  # 创建时拒绝重复 id（409）
    TODO_SEED_ENABLED: bool = True  # 启动时写入两条种子数据

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL 不合法: {v}，可选 {sorted(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()
