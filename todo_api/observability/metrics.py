"""
Prometheus 指标定义

所有指标统一在此文件定义，中间件和业务代码按需引用。
"""

from prometheus_client import Counter, Gauge, Histogram

# ── 请求级指标 ──

REQUEST_TOTAL = Counter(
    "todo_request_total",
    "HTTP 请求总数",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "todo_request_duration_ms",
    "HTTP 请求耗时（毫秒）",
    ["method", "endpoint"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

# ── 存储指标 ──

STORE_SIZE = Gauge(
    "todo_store_size",
    "内存中 Todo 条目数",
)

OPERATION_TOTAL = Counter(
    "todo_operation_total",
    "Todo 操作结果总数",
    ["operation", "outcome"],  # operation: list/lookup/create/delete
)
