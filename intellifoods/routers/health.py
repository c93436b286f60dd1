# intellifoods/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from intellifoods.clients.backend import BackendClient
from intellifoods.routers.deps import get_client
from intellifoods.services.health import check_backend, version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
async def ready(response: Response, client: BackendClient = Depends(get_client)):
    backend = await check_backend(client)

    # Nothing works without the backend
    if backend["status"] != "ok":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        overall = "fail"
    else:
        overall = "ok"

    return {
        "status": overall,
        "checks": {"backend": backend},
        **version_payload(),
    }


@router.get("/version")
def version():
    return version_payload()
