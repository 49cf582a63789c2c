"""
结构化日志配置：structlog 为主，标准库 logging（uvicorn 等）经 ProcessorFormatter 统一渲染

- 开发环境：彩色文本输出；不缓存 logger，测试中 capture_logs 可以拦截模块级 log
- 生产环境：JSON 输出（便于 Loki/ELK 解析），首次使用后缓存 logger
"""

import logging
import sys

import structlog


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _renderer(production: bool):
    if production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(env: str = "development", level: str = "INFO") -> None:
    """初始化结构化日志，可重复调用（后一次覆盖前一次）"""
    production = env == "production"
    log_level = _resolve_level(level)
    renderer = _renderer(production)

    # structlog 与标准库日志共用的前置处理器
    pre_chain: list = [
        structlog.contextvars.merge_contextvars,  # trace_id 等上下文
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    processors = [*pre_chain, structlog.processors.StackInfoRenderer()]
    if production:
        processors.append(structlog.processors.format_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=production,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    # uvicorn 自带 handler，交给 root 统一输出
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
