from __future__ import annotations

from typing import Dict, List, Optional

from intellifoods.clients.backend import BackendClient
from intellifoods.models.inventory import IngredientCandidate
from intellifoods.models.recipe import RecipeStatus
from intellifoods.services.exceptions import InputValidationError
from intellifoods.services.inventory import InventoryStore
from intellifoods.services.matcher import match_ingredients
from intellifoods.services.pantry import build_pantry_context
from intellifoods.services.recipes_generate import RecipeOrchestrator
from intellifoods.services.session import SessionContext, require_session


class Kitchen:
    """
    Bridge-side state for one client: the inventory snapshot, the chosen main
    ingredient, the substitution flag and the recipe request cycle.
    """

    def __init__(self, client: BackendClient):
        self.client = client
        self.inventory = InventoryStore(client)
        self.recipes = RecipeOrchestrator(client)
        self.main_ingredient: Optional[str] = None
        self.suggest_substitution = False

    async def suggest(self, session: SessionContext, text: str) -> List[IngredientCandidate]:
        snapshot = await self.inventory.ensure_loaded(session)
        return match_ingredients(text, snapshot)

    async def select_main(self, session: SessionContext, name: str) -> str:
        # Only names offered by the dropdown (i.e. vocabulary entries) can be selected
        snapshot = await self.inventory.ensure_loaded(session)
        if name not in snapshot.vocabulary:
            raise InputValidationError(f"Unknown ingredient: {name!r}")
        self.main_ingredient = name
        return name

    def pantry_context(self) -> List[str]:
        # derived on every read, so it tracks both selection and snapshot changes
        if not self.main_ingredient or self.inventory.snapshot is None:
            return []
        return build_pantry_context(self.main_ingredient, self.inventory.snapshot)

    async def generate(
        self,
        session: SessionContext,
        suggest_substitution: Optional[bool] = None,
        wait: bool = False,
    ) -> RecipeStatus:
        require_session(session)
        if suggest_substitution is not None:
            self.suggest_substitution = suggest_substitution

        args = (self.main_ingredient, self.pantry_context(), self.suggest_substitution)
        if wait:
            await self.recipes.generate(*args, cookie=session.cookie)
        else:
            self.recipes.start(*args, cookie=session.cookie)
        return self.recipes.status()


class KitchenRegistry:
    """
    One Kitchen per signed-in client, keyed by the session cookie the
    backend recognized. Anonymous callers never get one.
    """

    def __init__(self, client: BackendClient):
        self.client = client
        self._kitchens: Dict[str, Kitchen] = {}

    def __len__(self) -> int:
        return len(self._kitchens)

    def for_session(self, session: SessionContext) -> Kitchen:
        require_session(session)
        key = session.cookie or ""
        kitchen = self._kitchens.get(key)
        if kitchen is None:
            kitchen = self._kitchens[key] = Kitchen(self.client)
        return kitchen

    def evict(self, session: SessionContext) -> None:
        self._kitchens.pop(session.cookie or "", None)
