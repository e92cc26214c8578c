"""折扣编辑器 - 统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口,避免散落在各模块中重复解析.
- 远程客户端、日志与表单控制器只消费 Settings,不再直接读取环境变量.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- 生产环境更严格: 缺失远程服务地址会直接抛出 ValueError.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from discount_editor.constants.system_constants import LogLevel

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
APP_NAME = "折扣编辑器"
APP_VERSION = "0.1.0"

DEFAULT_API_BASE_URL = "http://localhost:8081"
DEFAULT_API_TIMEOUT_SECONDS = 10.0

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CURRENCY_CODE = "USD"
DEFAULT_TIMEZONE_ABBREVIATION = "EST"

_VALID_LOG_LEVELS = {level.value for level in LogLevel}


class Settings(BaseSettings):
    """运行时设置集合."""

    model_config = SettingsConfigDict(
        env_file=DOTENV_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="ENVIRONMENT")
    app_name: str = Field(default=APP_NAME, validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    api_base_url: str = Field(default="", validation_alias="DISCOUNT_API_BASE_URL")
    api_access_token: str | None = Field(default=None, validation_alias="DISCOUNT_API_ACCESS_TOKEN")
    api_timeout_seconds: float = Field(default=DEFAULT_API_TIMEOUT_SECONDS, validation_alias="DISCOUNT_API_TIMEOUT")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    currency_code: str = Field(default=DEFAULT_CURRENCY_CODE, validation_alias="CURRENCY_CODE")
    timezone_abbreviation: str = Field(
        default=DEFAULT_TIMEZONE_ABBREVIATION,
        validation_alias="TIMEZONE_ABBREVIATION",
    )

    @field_validator("log_level", "currency_code")
    @classmethod
    def _normalize_upper(cls, value: str) -> str:
        return value.upper()

    @field_validator("api_access_token", mode="before")
    @classmethod
    def _strip_blank_to_none(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        """当前是否为生产环境."""
        return self.environment.strip().lower() == "production"

    @model_validator(mode="after")
    def _apply_defaults_and_validate(self) -> Settings:
        self._ensure_api_base_url()
        self._validate()
        return self

    def _ensure_api_base_url(self) -> None:
        if self.api_base_url:
            return
        if self.is_production:
            raise ValueError("DISCOUNT_API_BASE_URL environment variable must be set in production")
        object.__setattr__(self, "api_base_url", DEFAULT_API_BASE_URL)
        logger.warning("⚠️  未设置 DISCOUNT_API_BASE_URL,非 production 环境回退到 %s", DEFAULT_API_BASE_URL)

    def _validate(self) -> None:
        """执行跨字段校验,统一抛出可读的 ValueError."""
        errors: list[str] = []
        checks: list[tuple[str, bool]] = [
            ("DISCOUNT_API_TIMEOUT 必须为正数(秒)", self.api_timeout_seconds <= 0),
            (
                "DISCOUNT_API_BASE_URL 必须以 http:// 或 https:// 开头",
                not self.api_base_url.startswith(("http://", "https://")),
            ),
            ("LOG_LEVEL 仅支持 DEBUG/INFO/WARNING/ERROR/CRITICAL", self.log_level not in _VALID_LOG_LEVELS),
            ("CURRENCY_CODE 必须为 3 位货币代码", len(self.currency_code) != 3),
        ]
        for message, condition in checks:
            if condition:
                errors.append(message)

        if errors:
            joined = "; ".join(errors)
            raise ValueError(f"配置校验失败: {joined}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """加载并缓存 Settings 单例."""
    return Settings()


__all__ = ["APP_NAME", "APP_VERSION", "Settings", "get_settings"]
