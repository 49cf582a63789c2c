"""
健康检查接口：探活 + 内存存储条目数
"""

from fastapi import APIRouter, Depends

from todo_api.todo.store import TodoStore, get_todo_store

router = APIRouter(tags=["健康检查"])


@router.get("/health")
async def health_check(store: TodoStore = Depends(get_todo_store)):
    """无外部依赖，进程能响应即为健康"""
    return {"status": "ok", "todos": len(store)}
