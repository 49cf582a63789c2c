"""
/todos 接口：内存 Todo 列表的增删查

端点：
- GET    /todos            — 全量列表
- GET    /todos?id=a,b     — 按 id 批量查询（逗号分隔，可重复传参）
- GET    /todos/{todo_id}  — 按 id 查询（同样支持逗号分隔）
- POST   /todos            — 创建，原样回显
- DELETE /todos/{todo_id}  — 按 id 精确删除

查询结果：命中 1 条返回对象，命中多条返回数组，0 条 404。
id 参数存在但解析不出任何 id（如 "?id=" 或 "?id=,,"）返回 400。
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Query, Response, status

from todo_api.observability.metrics import OPERATION_TOTAL
from todo_api.todo.errors import (
    DuplicateTodoError,
    MalformedIdError,
    TodoNotFoundError,
    TodoValidationError,
)
from todo_api.todo.schemas import Todo
from todo_api.todo.store import TodoStore, get_todo_store
from todo_api.todo.validator import validate, validate_many

router = APIRouter(tags=["todos"])
log = structlog.get_logger()


def parse_ids(raw_values: list[str]) -> set[str]:
    """按逗号拆分、去空白、去空串；一个有效 id 都没有时视为参数畸形"""
    ids = {piece.strip() for raw in raw_values for piece in raw.split(",")}
    ids.discard("")
    if not ids:
        raise MalformedIdError(",".join(raw_values))
    return ids


def _lookup(raw_values: list[str], store: TodoStore) -> Todo | list[Todo]:
    try:
        ids = parse_ids(raw_values)
    except MalformedIdError:
        OPERATION_TOTAL.labels(operation="lookup", outcome="malformed").inc()
        log.warning("id 参数无法解析", raw=raw_values)
        raise

    matches = store.find_by_ids(ids)
    if not matches:
        OPERATION_TOTAL.labels(operation="lookup", outcome="not_found").inc()
        log.warning("Todo 不存在", ids=sorted(ids))
        raise TodoNotFoundError(sorted(ids))

    # 查出的记录返回前重新校验，校验失败按 not found 处理
    if len(matches) == 1:
        result = validate(matches[0])
        issues, found = result.issues, result.todo
    else:
        many = validate_many(matches)
        issues, found = many.issues, many.todos

    if issues:
        OPERATION_TOTAL.labels(operation="lookup", outcome="invalid_record").inc()
        log.error(
            "存储中的 Todo 未通过校验，按 not found 返回",
            ids=sorted(ids),
            issues=[i.model_dump() for i in issues],
        )
        raise TodoNotFoundError(sorted(ids))

    OPERATION_TOTAL.labels(operation="lookup", outcome="found").inc()
    return found


@router.get("/todos")
async def list_todos(
    ids: list[str] | None = Query(None, alias="id", description="逗号分隔的 id 列表"),
    store: TodoStore = Depends(get_todo_store),
) -> Todo | list[Todo]:
    """不带 id 参数返回全量列表；带 id 参数走批量查询"""
    if ids is not None:
        return _lookup(ids, store)

    OPERATION_TOTAL.labels(operation="list", outcome="ok").inc()
    return store.list()


@router.get("/todos/{todo_id}")
async def get_todo(
    todo_id: str,
    store: TodoStore = Depends(get_todo_store),
) -> Todo | list[Todo]:
    return _lookup([todo_id], store)


_CREATE_BODY_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Todo"}}},
    }
}


@router.post("/todos", openapi_extra=_CREATE_BODY_SCHEMA)
async def create_todo(
    payload: Any = Body(None, examples=[{"id": "3", "todo": "New todo item"}]),
    store: TodoStore = Depends(get_todo_store),
) -> Todo:
    """
    校验请求体 → 追加到末尾 → 原样回显

    请求体按任意 JSON 接收，统一交给 validate() 校验，
    以便字段级问题写进日志；非法 JSON 由 main.py 的 RequestValidationError 处理器转为 400。
    """
    result = validate(payload)
    if not result.ok:
        OPERATION_TOTAL.labels(operation="create", outcome="invalid").inc()
        log.warning("Todo 校验失败", issues=[i.model_dump() for i in result.issues])
        raise TodoValidationError(result.issues)

    try:
        store.append(result.todo)
    except DuplicateTodoError:
        OPERATION_TOTAL.labels(operation="create", outcome="conflict").inc()
        log.warning("Todo id 重复", todo_id=result.todo.id)
        raise

    OPERATION_TOTAL.labels(operation="create", outcome="created").inc()
    log.info("Todo 已创建", todo_id=result.todo.id, size=len(store))
    return result.todo


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: str,
    store: TodoStore = Depends(get_todo_store),
) -> Response:
    """精确匹配 id（不 trim、不拆分逗号），命中则删除并返回 204 空响应"""
    found = store.find_by_id(todo_id)
    if found is None:
        OPERATION_TOTAL.labels(operation="delete", outcome="not_found").inc()
        log.warning("待删除的 Todo 不存在", todo_id=todo_id)
        raise TodoNotFoundError(todo_id)

    result = validate(found)
    if not result.ok:
        OPERATION_TOTAL.labels(operation="delete", outcome="invalid_record").inc()
        log.error(
            "存储中的 Todo 未通过校验，按 not found 返回",
            todo_id=todo_id,
            issues=[i.model_dump() for i in result.issues],
        )
        raise TodoNotFoundError(todo_id)

    store.remove_by_id(todo_id)
    OPERATION_TOTAL.labels(operation="delete", outcome="deleted").inc()
    log.info("Todo 已删除", todo_id=todo_id, size=len(store))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
