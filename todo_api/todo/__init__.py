"""
Todo 模块：进程内 Todo 列表管理

提供 Todo schema、校验函数和内存 TodoStore，
供 /todos 路由处理器使用。
"""

from todo_api.todo.schemas import Todo, ValidationIssue
from todo_api.todo.store import TodoStore, get_todo_store, todo_store
from todo_api.todo.validator import validate, validate_many

__all__ = [
    "Todo",
    "TodoStore",
    "ValidationIssue",
    "get_todo_store",
    "todo_store",
    "validate",
    "validate_many",
]
