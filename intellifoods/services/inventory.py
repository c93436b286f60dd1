# intellifoods/services/inventory.py
from __future__ import annotations

import asyncio
import logging
from contextlib import AsyncExitStack, asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Dict, Optional

from pydantic import ValidationError

from intellifoods.clients.backend import BackendClient
from intellifoods.core.text import is_blank
from intellifoods.models.inventory import Food, InventorySnapshot, StorageLocation, StorageView
from intellifoods.services.exceptions import BackendError, InputValidationError
from intellifoods.services.session import SessionContext, require_session

log = logging.getLogger(__name__)


async def load_snapshot(client: BackendClient, session: SessionContext) -> InventorySnapshot:
    data = await client.fetch_fridge_data(session.cookie)
    try:
        return InventorySnapshot.from_payload(data)
    except ValidationError as e:
        raise BackendError(f"Malformed inventory payload: {e}") from e


@dataclass
class PendingMutation:
    op: str  # add | edit | delete
    index: Optional[int] = None
    item: Optional[Food] = None


def _check_name(item: Food) -> None:
    if is_blank(item.name):
        raise InputValidationError("Please fill in the food name")


def _check_index(snapshot: InventorySnapshot, location: StorageLocation, index: int) -> None:
    size = len(snapshot.items(location))
    if not 0 <= index < size:
        raise InputValidationError(f"No item at index {index} in {location.value} ({size} items)")


class InventoryStore:
    """
    Owns the InventorySnapshot and the add/edit/delete flow against the
    inventory service.

    A mutation is proposed (recorded as pending for its location), confirmed by
    the service, and only then applied to the snapshot. On any failure the
    pending entry is dropped and the snapshot is left as it was. Mutations on
    the same location are serialized so positional indices are checked against
    the list they will be applied to.
    """

    def __init__(self, client: BackendClient):
        self._client = client
        self.snapshot: Optional[InventorySnapshot] = None
        self.pending: Dict[StorageLocation, PendingMutation] = {}
        self._locks: Dict[StorageLocation, asyncio.Lock] = {loc: asyncio.Lock() for loc in StorageLocation}
        self._load_lock = asyncio.Lock()

    async def ensure_loaded(self, session: SessionContext) -> InventorySnapshot:
        async with self._load_lock:
            if self.snapshot is None:
                self.snapshot = await load_snapshot(self._client, session)
                log.info("inventory loaded: %d items, %d known ingredients",
                         len(self.snapshot.all_items()), len(self.snapshot.vocabulary))
            return self.snapshot

    async def reload(self, session: SessionContext) -> InventorySnapshot:
        # Take every location lock so no in-flight mutation lands on a discarded snapshot.
        # The exit stack releases whatever was taken if we are cancelled half-way.
        async with AsyncExitStack() as stack:
            for loc in StorageLocation:
                await stack.enter_async_context(self._locks[loc])
            async with self._load_lock:
                self.snapshot = await load_snapshot(self._client, session)
                return self.snapshot

    async def view(self, session: SessionContext, location: StorageLocation) -> StorageView:
        snapshot = await self.ensure_loaded(session)
        return StorageView(
            location=location,
            items=list(snapshot.items(location)),
            busy=self._locks[location].locked(),
        )

    @asynccontextmanager
    async def _propose(self, location: StorageLocation, mutation: PendingMutation) -> AsyncIterator[None]:
        async with self._locks[location]:
            self.pending[location] = mutation
            try:
                yield
            except BackendError as e:
                log.warning("%s on %s rejected, local inventory unchanged: %s", mutation.op, location.value, e)
                raise
            finally:
                self.pending.pop(location, None)

    async def add(self, session: SessionContext, location: StorageLocation, item: Food) -> StorageView:
        require_session(session)
        _check_name(item)

        async with self._propose(location, PendingMutation("add", item=item)):
            snapshot = await self.ensure_loaded(session)
            await self._client.add_food(location, item.model_dump(), session.cookie)
            snapshot.apply_add(location, item)
            log.info("added %r to %s", item.name, location.value)

        return await self.view(session, location)

    async def edit(self, session: SessionContext, location: StorageLocation, index: int, item: Food) -> StorageView:
        require_session(session)
        _check_name(item)

        async with self._propose(location, PendingMutation("edit", index=index, item=item)):
            snapshot = await self.ensure_loaded(session)
            _check_index(snapshot, location, index)
            await self._client.edit_food(location, index, item.model_dump(), session.cookie)
            snapshot.apply_edit(location, index, item)
            log.info("edited %s[%d] -> %r", location.value, index, item.name)

        return await self.view(session, location)

    async def delete(self, session: SessionContext, location: StorageLocation, index: int) -> StorageView:
        require_session(session)

        async with self._propose(location, PendingMutation("delete", index=index)):
            snapshot = await self.ensure_loaded(session)
            _check_index(snapshot, location, index)
            await self._client.delete_food(location, index, session.cookie)
            snapshot.apply_delete(location, index)
            log.info("deleted %s[%d]", location.value, index)

        return await self.view(session, location)
