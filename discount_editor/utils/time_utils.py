"""统一时间处理工具模块.

基于 zoneinfo 提供一致的时间解析与转换,表单内的时间值统一为带时区的 UTC datetime.
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from discount_editor.utils.structlog_config import get_logger

UTC_TZ = ZoneInfo("UTC")


class TimeUtils:
    """统一时间处理工具类."""

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间.

        Returns:
            带 UTC 时区信息的当前时间.

        """
        return datetime.now(UTC)

    @staticmethod
    def to_utc(dt: str | date | datetime | None) -> datetime | None:
        """将时间转换为 UTC 时区.

        Args:
            dt: 待转换的时间,可以是 ISO 字符串、date 或 datetime 对象.

        Returns:
            转换后的 UTC 时区时间,转换失败时返回 None.

        """
        if not dt:
            return None

        try:
            if isinstance(dt, str):
                if dt.endswith("Z"):
                    dt = dt[:-1] + "+00:00"
                dt = datetime.fromisoformat(dt)
            elif isinstance(dt, date) and not isinstance(dt, datetime):
                dt = datetime.combine(dt, datetime.min.time())

            if dt.tzinfo is None:
                # 无时区信息时按 UTC 处理
                dt = dt.replace(tzinfo=UTC_TZ)

            return dt.astimezone(UTC_TZ)
        except (ValueError, TypeError) as e:
            get_logger("system").warning(f"时间转换错误: {e}")
            return None


time_utils = TimeUtils()

__all__ = ["UTC_TZ", "TimeUtils", "time_utils"]
