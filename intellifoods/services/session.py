from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from intellifoods.clients.backend import BackendClient
from intellifoods.services.exceptions import AuthRequired, BackendError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Authorization context passed explicitly into every action that needs it."""

    is_logged_in: bool
    cookie: Optional[str] = None


ANONYMOUS = SessionContext(is_logged_in=False)


async def check_session(client: BackendClient, cookie: Optional[str]) -> SessionContext:
    # A failing session endpoint means "not logged in", same as a non-ok response
    try:
        logged_in = await client.get_session(cookie)
    except BackendError as e:
        log.warning("session check failed: %s", e)
        logged_in = False
    return SessionContext(is_logged_in=logged_in, cookie=cookie)


def require_session(session: SessionContext) -> SessionContext:
    if not session.is_logged_in:
        raise AuthRequired("Sign in required")
    return session
