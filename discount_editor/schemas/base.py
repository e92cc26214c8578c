"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PayloadSchema(BaseModel):
    """写路径 payload 的基础 schema.

    约定:
    - 字段使用 snake_case 命名, 序列化到远程接口时统一输出 camelCase.
    - 实例不可变, 构建完成后即为一次提交的快照.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_wire(self) -> dict[str, object]:
        """转换为远程接口所需的 JSON 兼容字典."""
        return self.model_dump(mode="json", by_alias=True)


class RecordSchema(BaseModel):
    """读路径记录的基础 schema.

    约定:
    - 默认忽略未知字段, 以兼容远程服务的扩展字段.
    - 同时接受 camelCase 与 snake_case 键.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
