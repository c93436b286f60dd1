# intellifoods/core/request_context.py
from __future__ import annotations

import contextvars
from typing import Dict, Optional

# Set by RequestLoggingMiddleware for the lifetime of one inbound request
request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()


def set_request_id(value: Optional[str]) -> None:
    request_id_ctx.set(value)


def forward_headers(cookie: Optional[str] = None) -> Dict[str, str]:
    """Headers every upstream call carries: the caller's cookie and the current request id."""
    headers: Dict[str, str] = {}
    if cookie:
        headers["Cookie"] = cookie
    request_id = get_request_id()
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers
