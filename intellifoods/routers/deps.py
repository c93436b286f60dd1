from __future__ import annotations

from fastapi import Depends, Request

from intellifoods.clients.backend import BackendClient
from intellifoods.services.kitchen import Kitchen, KitchenRegistry
from intellifoods.services.session import SessionContext, check_session


def get_client(request: Request) -> BackendClient:
    return request.app.state.kitchens.client


def get_registry(request: Request) -> KitchenRegistry:
    return request.app.state.kitchens


async def get_session(request: Request) -> SessionContext:
    return await check_session(get_client(request), request.headers.get("cookie"))


def get_kitchen(
    session: SessionContext = Depends(get_session),
    registry: KitchenRegistry = Depends(get_registry),
) -> Kitchen:
    # Raises AuthRequired for anonymous callers; kitchen state is per session
    return registry.for_session(session)
