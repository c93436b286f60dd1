from __future__ import annotations

import time
from typing import Any, Dict, Optional

from intellifoods.clients.backend import BackendClient
from intellifoods.core import config
from intellifoods.services.exceptions import BackendError, NonSuccessStatus


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


async def check_backend(client: BackendClient) -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        # session status is the cheapest endpoint the backend has
        await client.get_session()
        return _check_result("ok", _ms_since(start))
    except NonSuccessStatus as e:
        # it answered, so it is up; an auth-walled session endpoint is fine
        status = "ok" if e.status_code < 500 else "fail"
        return _check_result(status, _ms_since(start), str(e))
    except BackendError as e:
        return _check_result("fail", _ms_since(start), str(e))


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
