from __future__ import annotations

from typing import List

from intellifoods.core.text import fold, uniq
from intellifoods.models.inventory import InventorySnapshot


def build_pantry_context(main: str, snapshot: InventorySnapshot) -> List[str]:
    """
    Everything owned across shelf, fridge and freezer (lowercased, deduplicated,
    first-seen order) minus the main ingredient.
    """
    excluded = fold(main)
    names = (fold(item.name) for item in snapshot.all_items())
    return [name for name in uniq(names) if name != excluded]
