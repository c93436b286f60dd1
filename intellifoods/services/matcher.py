from __future__ import annotations

from typing import List

from intellifoods.core.text import fold
from intellifoods.models.inventory import IngredientCandidate, InventorySnapshot


def match_ingredients(text: str, snapshot: InventorySnapshot) -> List[IngredientCandidate]:
    """
    Prefix-match the vocabulary against `text`, owned ingredients first.

    - Comparison is case-insensitive; prefix only (no substring, no fuzzy).
    - Within the owned and not-owned groups, vocabulary order is kept.
    - No input, no suggestions: empty `text` returns [].
    - Vocabulary duplicates are passed through as-is.
    """
    if not text:
        return []

    prefix = fold(text)
    owned = snapshot.owned_names()

    hits = [name for name in snapshot.vocabulary if fold(name).startswith(prefix)]

    # sorted() is stable, so equal keys keep vocabulary order
    ranked = sorted(hits, key=lambda name: fold(name) not in owned)
    return [IngredientCandidate(name=name, owned=fold(name) in owned) for name in ranked]
