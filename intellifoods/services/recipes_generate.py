# intellifoods/services/recipes_generate.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, List, Optional, Set

from intellifoods.clients.backend import BackendClient
from intellifoods.models.recipe import UNTITLED_RECIPE, Recipe, RecipeRequest, RecipeStatus, RequestState
from intellifoods.services.exceptions import BackendError

log = logging.getLogger(__name__)


def build_recipe_request(
    main: Optional[str],
    pantry: Iterable[str],
    suggest_substitution: bool,
) -> RecipeRequest:
    # No main ingredient means no pantry context either
    if not main:
        return RecipeRequest(main_ingredients=[], pantry_ingredients=[], suggest_substitution=suggest_substitution)
    return RecipeRequest(
        main_ingredients=[main],
        pantry_ingredients=list(pantry),
        suggest_substitution=suggest_substitution,
    )


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def recipe_from_response(body: Any) -> Recipe:
    """
    Normalize `{"data": {...}}` from the recipe service into a Recipe.
    Missing, empty or wrongly typed fields fall back to the Recipe defaults.
    """
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, dict):
        data = {}

    title = data.get("title")
    image_url = data.get("image_url")
    return Recipe(
        title=title if isinstance(title, str) and title else UNTITLED_RECIPE,
        ingredients=_str_list(data.get("ingredients")),
        steps=_str_list(data.get("steps")),
        image_url=image_url if isinstance(image_url, str) else "",
    )


class RecipeOrchestrator:
    """
    One recipe generation at a time, latest call wins.

    Every call takes a ticket from a generation counter and moves the state to
    loading. When a response (or failure) comes back it is applied only if its
    ticket is still the latest one issued; older results are dropped. Nothing
    is cancelled on the network side.
    """

    def __init__(self, client: BackendClient):
        self._client = client
        self._generation = 0
        self.state = RequestState.idle
        self.recipe: Optional[Recipe] = None
        self._tasks: Set[asyncio.Task] = set()

    @property
    def generation(self) -> int:
        return self._generation

    def status(self) -> RecipeStatus:
        return RecipeStatus(state=self.state, recipe=self.recipe, generation=self._generation)

    def _issue(self) -> int:
        self._generation += 1
        self.state = RequestState.loading
        return self._generation

    async def generate(
        self,
        main: Optional[str],
        pantry: Iterable[str],
        suggest_substitution: bool,
        *,
        cookie: Optional[str] = None,
    ) -> Optional[Recipe]:
        """Returns the Recipe, or None when the call failed or was superseded."""
        ticket = self._issue()
        request = build_recipe_request(main, pantry, suggest_substitution)
        return await self._run(ticket, request, cookie)

    def start(
        self,
        main: Optional[str],
        pantry: Iterable[str],
        suggest_substitution: bool,
        *,
        cookie: Optional[str] = None,
    ) -> int:
        """Fire-and-forget variant of generate(); returns the ticket."""
        ticket = self._issue()
        request = build_recipe_request(main, pantry, suggest_substitution)
        task = asyncio.create_task(self._run(ticket, request, cookie))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return ticket

    async def _run(self, ticket: int, request: RecipeRequest, cookie: Optional[str]) -> Optional[Recipe]:
        try:
            body = await self._client.generate_recipe(request.model_dump(), cookie)
        except asyncio.CancelledError:
            # a cancelled latest request resolves as failed, never stays loading
            if ticket == self._generation:
                log.warning("recipe generation %d cancelled", ticket)
                self.state = RequestState.failed
                self.recipe = None
            raise
        except BackendError as e:
            if ticket != self._generation:
                log.debug("dropping failure of superseded generation %d: %s", ticket, e)
                return None
            log.warning("Failed to generate recipe (generation %d): %s", ticket, e)
            self.state = RequestState.failed
            self.recipe = None
            return None

        recipe = recipe_from_response(body)
        if ticket != self._generation:
            log.debug("dropping result of superseded generation %d (latest is %d)", ticket, self._generation)
            return None

        self.state = RequestState.succeeded
        self.recipe = recipe
        return recipe
