"""
Todo 内存存储层

进程级单例，持有一个有序 list[Todo]，进程退出即丢失。
对外只暴露 list / find / append / remove 接口，处理器不直接碰底层列表，
后续换成真实持久化时只需替换本模块。

并发：FastAPI 可能在线程池中执行同步依赖，写操作统一加锁。
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

import structlog

from todo_api.observability.metrics import STORE_SIZE
from todo_api.todo.errors import DuplicateTodoError
from todo_api.todo.schemas import Todo

log = structlog.get_logger()

SEED_TODOS: tuple[Todo, ...] = (
    Todo(id="1", todo="Todo list item 1"),
    Todo(id="2", todo="Todo list item 2"),
)


class TodoStore:
    """有序内存 Todo 列表"""

    def __init__(self, initial: Iterable[Todo] = (), unique_ids: bool = True) -> None:
        self._lock = threading.Lock()
        self._items: list[Todo] = list(initial)
        self.unique_ids = unique_ids
        STORE_SIZE.set(len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[Todo]:
        """全部记录，保持插入顺序（返回副本）"""
        with self._lock:
            return list(self._items)

    def find_by_id(self, todo_id: str) -> Todo | None:
        """第一条 id 完全相等的记录，不做 trim"""
        with self._lock:
            return next((t for t in self._items if t.id == todo_id), None)

    def find_by_ids(self, ids: set[str]) -> list[Todo]:
        """id（trim 后）落在集合中的全部记录，顺序为存储顺序而非入参顺序"""
        with self._lock:
            return [t for t in self._items if t.id.strip() in ids]

    def append(self, todo: Todo) -> Todo:
        """
        追加到末尾。

        unique_ids=True 时已存在相同 id（trim 后比较，与 find_by_ids 一致）
        抛 DuplicateTodoError，存储不变；
        unique_ids=False 时保持宽松行为，重复 id 直接追加。
        """
        with self._lock:
            if self.unique_ids and any(t.id.strip() == todo.id.strip() for t in self._items):
                raise DuplicateTodoError(todo.id)
            self._items.append(todo)
            STORE_SIZE.set(len(self._items))
        return todo

    def remove_by_id(self, todo_id: str) -> bool:
        """删除第一条匹配记录，返回是否删除"""
        with self._lock:
            for idx, t in enumerate(self._items):
                if t.id == todo_id:
                    del self._items[idx]
                    STORE_SIZE.set(len(self._items))
                    return True
            return False

    def reset(self, seed: Iterable[Todo] = SEED_TODOS) -> None:
        """恢复为种子数据（启动时和测试用）"""
        with self._lock:
            self._items = list(seed)
            STORE_SIZE.set(len(self._items))
        log.info("Todo 存储已重置", size=len(self._items))


todo_store = TodoStore(SEED_TODOS)


def get_todo_store() -> TodoStore:
    """FastAPI 依赖注入：返回进程级单例，测试中可通过 dependency_overrides 替换"""
    return todo_store
