# intellifoods/models/inventory.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field

from intellifoods.core.text import fold


class StorageLocation(str, Enum):
    shelf = "shelf"
    fridge = "fridge"
    freezer = "freezer"


class Food(BaseModel):
    # quantity / expiry / whatever the inventory service stores rides along untouched
    model_config = ConfigDict(extra="allow")

    name: str


class InventorySnapshot(BaseModel):
    """
    Everything the user holds across the three storage locations plus the
    known-ingredient vocabulary.

    Patched in place after each confirmed add/edit/delete so it stays in step
    with the inventory service without a full reload. The apply_* methods do
    no validation; callers check names and indices first.
    """

    shelf: List[Food] = Field(default_factory=list)
    fridge: List[Food] = Field(default_factory=list)
    freezer: List[Food] = Field(default_factory=list)
    # wire name on the inventory service is "uniqueIngredients"
    vocabulary: List[str] = Field(default_factory=list)

    def items(self, location: StorageLocation) -> List[Food]:
        return getattr(self, StorageLocation(location).value)

    def all_items(self) -> List[Food]:
        return [*self.shelf, *self.fridge, *self.freezer]

    def owned_names(self) -> Set[str]:
        return {fold(f.name) for f in self.all_items()}

    def apply_add(self, location: StorageLocation, item: Food) -> None:
        self.items(location).append(item)

    def apply_edit(self, location: StorageLocation, index: int, item: Food) -> None:
        self.items(location)[index] = item

    def apply_delete(self, location: StorageLocation, index: int) -> None:
        del self.items(location)[index]

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "InventorySnapshot":
        data = data if isinstance(data, dict) else {}
        vocab: List[str] = []
        seen: Set[str] = set()
        for name in data.get("uniqueIngredients") or []:
            if not isinstance(name, str) or name in seen:
                continue
            seen.add(name)
            vocab.append(name)

        return cls(
            shelf=data.get("shelf") or [],
            fridge=data.get("fridge") or [],
            freezer=data.get("freezer") or [],
            vocabulary=vocab,
        )


class IngredientCandidate(BaseModel):
    name: str
    owned: bool


class StorageView(BaseModel):
    location: StorageLocation
    items: List[Food]
    busy: bool = False
