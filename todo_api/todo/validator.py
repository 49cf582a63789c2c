"""
Todo 校验层：所有外部输入、以及存储中查出的记录，返回前都过一遍 Schema

流程：
1. Pydantic Schema 校验（strict，拒绝多余字段）
2. 失败 → 转换为字段级 ValidationIssue 列表，由调用方决定 400 还是 404
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from todo_api.todo.schemas import Todo, TodoList, ValidationIssue


@dataclass
class ValidationResult:
    """校验结果"""

    ok: bool
    todo: Todo | None = None
    issues: list[ValidationIssue] = field(default_factory=list)


@dataclass
class ListValidationResult:
    """批量校验结果"""

    ok: bool
    todos: list[Todo] = field(default_factory=list)
    issues: list[ValidationIssue] = field(default_factory=list)


def _issues_from(error: ValidationError) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        issues.append(
            ValidationIssue(field=loc or "<root>", type=err["type"], message=err["msg"])
        )
    return issues


def validate(candidate: Any) -> ValidationResult:
    """
    校验单个 Todo。

    candidate 可以是 dict（请求体）或已有的 Todo 实例（存储中查出的记录，
    重新按字段校验一遍）。
    """
    if isinstance(candidate, Todo):
        candidate = candidate.model_dump()
    try:
        todo = Todo.model_validate(candidate)
    except ValidationError as e:
        return ValidationResult(ok=False, issues=_issues_from(e))
    return ValidationResult(ok=True, todo=todo)


def validate_many(candidates: Any) -> ListValidationResult:
    """校验 Todo 序列，任一条失败即整体失败"""
    if isinstance(candidates, list):
        candidates = [c.model_dump() if isinstance(c, Todo) else c for c in candidates]
    try:
        todos = TodoList.validate_python(candidates)
    except ValidationError as e:
        return ListValidationResult(ok=False, issues=_issues_from(e))
    return ListValidationResult(ok=True, todos=todos)
