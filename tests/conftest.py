from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from intellifoods.clients.backend import BackendClient
from intellifoods.core import config


class FakeBackend:
    """In-process stand-in for the session/inventory/recipe web backend."""

    def __init__(self) -> None:
        self.logged_in = True
        # cookie -> fridge payload; when set, only these cookies are signed in
        self.accounts: Optional[Dict[str, Dict[str, Any]]] = None
        self.fridge: Dict[str, Any] = {
            "shelf": [{"name": "Flour", "quantity": "1 kg"}],
            "fridge": [],
            "freezer": [],
            "uniqueIngredients": ["Flour", "Fish"],
        }
        self.recipe_body: Any = {
            "data": {
                "title": "Flatbread",
                "ingredients": ["flour", "water"],
                "steps": ["Mix", "Bake"],
                "image_url": "http://img.test/flatbread.png",
            }
        }
        # (method, path) -> status code or exception to raise
        self.failures: Dict[Tuple[str, str], Any] = {}
        self.calls: List[Tuple[str, str, Any]] = []
        self.headers: List[httpx.Headers] = []

    def fail(self, method: str, path: str, outcome: Any) -> None:
        self.failures[(method, path)] = outcome

    def calls_to(self, method: str, path: Optional[str] = None) -> List[Tuple[str, str, Any]]:
        return [c for c in self.calls if c[0] == method and (path is None or c[1] == path)]

    def _signed_in(self, request: httpx.Request) -> bool:
        if self.accounts is not None:
            return request.headers.get("cookie") in self.accounts
        return self.logged_in

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        key = (request.method, request.url.path)
        self.calls.append((request.method, request.url.path, body))
        self.headers.append(request.headers)

        outcome = self.failures.get(key)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return httpx.Response(outcome, json={"error": "nope"})

        path = request.url.path
        if path == config.SESSION_PATH:
            return httpx.Response(200, json={"isLoggedIn": self._signed_in(request)})
        if path == config.SIGNOUT_PATH:
            return httpx.Response(200, json={"ok": True})
        if path == config.FRIDGE_DATA_PATH:
            if self.accounts is not None:
                return httpx.Response(200, json=self.accounts[request.headers.get("cookie")])
            return httpx.Response(200, json=self.fridge)
        if path == config.RECIPES_PATH:
            return httpx.Response(200, json=self.recipe_body)
        if path.startswith("/api/home/"):
            return httpx.Response(200, json={"ok": True})
        return httpx.Response(404)

    def client(self) -> BackendClient:
        return BackendClient(base_url="http://backend.test", transport=httpx.MockTransport(self.handler))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
