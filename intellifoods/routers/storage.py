# intellifoods/routers/storage.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from intellifoods.models.inventory import Food, InventorySnapshot, StorageLocation, StorageView
from intellifoods.models.requests import DeleteFoodReq, EditFoodReq
from intellifoods.routers.deps import get_kitchen, get_session
from intellifoods.services.kitchen import Kitchen
from intellifoods.services.session import SessionContext

router = APIRouter(tags=["storage"])


@router.get("/inventory", response_model=InventorySnapshot)
async def get_inventory(
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> InventorySnapshot:
    return await kitchen.inventory.ensure_loaded(session)


@router.post("/inventory/reload", response_model=InventorySnapshot)
async def reload_inventory(
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> InventorySnapshot:
    return await kitchen.inventory.reload(session)


@router.get("/storage/{location}", response_model=StorageView)
async def list_items(
    location: StorageLocation,
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> StorageView:
    return await kitchen.inventory.view(session, location)


@router.post("/storage/{location}", response_model=StorageView)
async def add_item(
    location: StorageLocation,
    item: Food,
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> StorageView:
    """
    Add a food item. Example payload:
      {"name": "Milk", "quantity": "1 l"}
    """
    return await kitchen.inventory.add(session, location, item)


@router.put("/storage/{location}", response_model=StorageView)
async def edit_item(
    location: StorageLocation,
    req: EditFoodReq,
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> StorageView:
    """
    Replace the item at a position. Example:
      {"index": 0, "updatedItem": {"name": "Oat milk"}}
    """
    return await kitchen.inventory.edit(session, location, req.index, req.updated_item)


@router.delete("/storage/{location}", response_model=StorageView)
async def delete_item(
    location: StorageLocation,
    req: DeleteFoodReq,
    session: SessionContext = Depends(get_session),
    kitchen: Kitchen = Depends(get_kitchen),
) -> StorageView:
    return await kitchen.inventory.delete(session, location, req.index)
