"""
Todo 数据模型

Todo 是 HTTP 层 → 校验层 → 内存存储 之间唯一的数据契约：
id / todo 两个字段均为必填字符串，不做类型强转，不接受多余字段。
id 不能为空或纯空白：查询时会 trim 并丢弃空串，这样的记录永远查不到、删不掉。
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, field_validator


class Todo(BaseModel):
    """单个 Todo 条目"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: StrictStr = Field(..., description="调用方提供的标识")
    todo: StrictStr = Field(..., description="自由文本内容")

    @field_validator("id")
    @classmethod
    def _reject_blank_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id 不能为空")
        return v


TodoList = TypeAdapter(list[Todo])


class ValidationIssue(BaseModel):
    """单个字段级校验问题"""

    field: str  # 出错字段路径，如 "todo"；整体类型错误时为 "<root>"
    type: str  # pydantic 错误类型，如 missing / string_type / extra_forbidden
    message: str
