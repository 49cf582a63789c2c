"""
FastAPI 应用主入口
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from prometheus_client import make_asgi_app

from todo_api.config import get_settings
from todo_api.observability.logging_config import setup_logging
from todo_api.observability.metrics_middleware import MetricsMiddleware
from todo_api.observability.request_logger import RequestLoggerMiddleware
from todo_api.todo.errors import TodoError
from todo_api.todo.store import SEED_TODOS, todo_store

settings = get_settings()

# 初始化日志（在 import 时就生效）
setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)
log = structlog.get_logger()


@asynccontextmanager
async def lifespan(application: FastAPI):
    """应用生命周期：启动时写入种子数据，关闭时记录剩余条目"""
    todo_store.unique_ids = settings.TODO_UNIQUE_IDS
    todo_store.reset(SEED_TODOS if settings.TODO_SEED_ENABLED else ())
    log.info(
        "应用启动",
        env=settings.ENV,
        app=settings.APP_NAME,
        port=settings.PORT,
        unique_ids=settings.TODO_UNIQUE_IDS,
    )

    yield

    log.info("应用关闭，内存数据丢弃", size=len(todo_store))


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# ── 业务异常 → 纯文本响应 ──

@app.exception_handler(TodoError)
async def todo_error_handler(request: Request, exc: TodoError) -> PlainTextResponse:
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """框架层解析失败（如请求体不是合法 JSON）同样按 400 纯文本返回"""
    log.warning(
        "请求解析失败",
        method=request.method,
        path=request.url.path,
        errors=[{"loc": list(e.get("loc", ())), "type": e.get("type")} for e in exc.errors()],
    )
    return PlainTextResponse("Bad Request", status_code=400)


# ── 中间件（执行顺序：从下往上注册，从上往下执行） ──
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestLoggerMiddleware)

# ── Prometheus 指标端点 ──
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# ── 路由注册 ──
from todo_api.api.health import router as health_router
from todo_api.api.todos import router as todos_router

app.include_router(health_router)
app.include_router(todos_router)


def run() -> None:
    import uvicorn

    log.info("服务启动", url=f"http://localhost:{settings.PORT}")
    # log_config=None：沿用 setup_logging 的配置，不让 uvicorn 覆盖
    uvicorn.run("todo_api.main:app", host=settings.APP_HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
