from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends

from intellifoods.models.inventory import IngredientCandidate
from intellifoods.models.requests import SelectIngredientReq
from intellifoods.routers.deps import get_kitchen, get_session
from intellifoods.services.kitchen import Kitchen
from intellifoods.services.session import SessionContext

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("/suggest", response_model=List[IngredientCandidate])
async def suggest(
    q: str = "",
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> List[IngredientCandidate]:
    return await kitchen.suggest(session, q)


@router.post("/select")
async def select_main(
    req: SelectIngredientReq,
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> dict[str, Any]:
    main = await kitchen.select_main(session, req.name)
    return {"main_ingredient": main, "pantry_ingredients": kitchen.pantry_context()}


@router.get("/pantry")
def pantry(kitchen: Kitchen = Depends(get_kitchen)) -> dict[str, Any]:
    return {"main_ingredient": kitchen.main_ingredient, "pantry_ingredients": kitchen.pantry_context()}
