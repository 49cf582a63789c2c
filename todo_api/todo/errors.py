"""
Todo 业务异常

每种异常自带 HTTP 状态码和纯文本响应体，由 main.py 中统一的异常处理器渲染。
"""

from todo_api.todo.schemas import ValidationIssue


class TodoError(Exception):
    """Todo 业务异常基类"""

    status_code: int = 500
    detail: str = "Internal Server Error"


class TodoValidationError(TodoError):
    """请求体不符合 Todo Schema"""

    status_code = 400
    detail = "Bad Request"

    def __init__(self, issues: list[ValidationIssue] | None = None):
        self.issues = issues or []
        super().__init__(self.detail)


class MalformedIdError(TodoError):
    """id 参数存在但解析不出任何有效 id"""

    status_code = 400
    detail = "Bad Request"

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(self.detail)


class TodoNotFoundError(TodoError):
    """没有匹配的记录（或匹配到的记录未通过校验）"""

    status_code = 404
    detail = "Not Found"

    def __init__(self, ids: list[str] | str):
        self.ids = [ids] if isinstance(ids, str) else list(ids)
        super().__init__(self.detail)


class DuplicateTodoError(TodoError):
    """启用 id 唯一约束时，创建了已存在的 id"""

    status_code = 409
    detail = "Conflict"

    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__(self.detail)
