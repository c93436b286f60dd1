# intellifoods/routers/recipes.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from intellifoods.models.recipe import GenerateReq, RecipeOptions, RecipeStatus
from intellifoods.routers.deps import get_kitchen, get_session
from intellifoods.services.kitchen import Kitchen
from intellifoods.services.session import SessionContext

router = APIRouter(prefix="/recipe", tags=["recipe"])


@router.get("", response_model=RecipeStatus)
def recipe_status(kitchen: Kitchen = Depends(get_kitchen)) -> RecipeStatus:
    return kitchen.recipes.status()


@router.put("/options", response_model=RecipeOptions)
def set_options(req: RecipeOptions, kitchen: Kitchen = Depends(get_kitchen)) -> RecipeOptions:
    kitchen.suggest_substitution = req.suggest_substitution
    return RecipeOptions(suggest_substitution=kitchen.suggest_substitution)


@router.post("/generate", response_model=RecipeStatus)
async def generate(
    req: Optional[GenerateReq] = None,
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> RecipeStatus:
    req = req or GenerateReq()
    return await kitchen.generate(session, suggest_substitution=req.suggest_substitution, wait=req.wait)
