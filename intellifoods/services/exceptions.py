from __future__ import annotations

from typing import Optional


class KitchenError(RuntimeError):
    """Base class for service-layer errors."""


class InputValidationError(KitchenError):
    """Input rejected before any network call (blank name, bad index, unknown ingredient)."""


class AuthRequired(KitchenError):
    """Action needs an established session; the caller should redirect to sign-in."""


class BackendError(KitchenError):
    """Errors talking to the external session/inventory/recipe services."""


class NetworkError(BackendError):
    """Transport failure or timeout."""


class NonSuccessStatus(BackendError):
    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        super().__init__(detail or f"Upstream returned HTTP {status_code}")
