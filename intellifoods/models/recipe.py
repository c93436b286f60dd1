# intellifoods/models/recipe.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

UNTITLED_RECIPE = "Untitled Recipe"


class Recipe(BaseModel):
    title: str = UNTITLED_RECIPE
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    image_url: str = ""


class RecipeRequest(BaseModel):
    main_ingredients: List[str] = Field(default_factory=list)
    pantry_ingredients: List[str] = Field(default_factory=list)
    suggest_substitution: bool = False


class RequestState(str, Enum):
    idle = "idle"
    loading = "loading"
    succeeded = "succeeded"
    failed = "failed"


class RecipeStatus(BaseModel):
    state: RequestState
    recipe: Optional[Recipe] = None
    generation: int = 0


class GenerateReq(BaseModel):
    suggest_substitution: Optional[bool] = None
    # False: fire-and-forget, poll GET /recipe
    wait: bool = False


class RecipeOptions(BaseModel):
    suggest_substitution: bool
