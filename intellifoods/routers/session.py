from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from intellifoods.clients.backend import BackendClient
from intellifoods.core import config
from intellifoods.routers.deps import get_client, get_registry, get_session
from intellifoods.services.kitchen import KitchenRegistry
from intellifoods.services.session import SessionContext

router = APIRouter(prefix="/session", tags=["session"])


@router.get("")
async def session_status(session: SessionContext = Depends(get_session)) -> dict[str, Any]:
    return {"isLoggedIn": session.is_logged_in}


@router.post("/signout")
async def signout(
    session: SessionContext = Depends(get_session),
    client: BackendClient = Depends(get_client),
    registry: KitchenRegistry = Depends(get_registry),
) -> dict[str, Any]:
    # Logged-out users just get sent to the sign-in page
    if session.is_logged_in:
        await client.sign_out(session.cookie)
        registry.evict(session)
    return {"ok": True, "isLoggedIn": False, "redirect": config.SIGNIN_REDIRECT}
