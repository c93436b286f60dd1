from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from intellifoods.models.inventory import Food


class EditFoodReq(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    updated_item: Food = Field(alias="updatedItem")


class DeleteFoodReq(BaseModel):
    index: int


class SelectIngredientReq(BaseModel):
    name: str
