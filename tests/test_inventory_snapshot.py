from __future__ import annotations

from intellifoods.models.inventory import Food, InventorySnapshot, StorageLocation


def test_from_payload_defaults_missing_lists():
    snap = InventorySnapshot.from_payload({"fridge": [{"name": "Milk"}]})
    assert snap.shelf == []
    assert [f.name for f in snap.fridge] == ["Milk"]
    assert snap.freezer == []
    assert snap.vocabulary == []


def test_from_payload_dedupes_vocabulary_keeping_first():
    snap = InventorySnapshot.from_payload({"uniqueIngredients": ["Egg", "Milk", "Egg", "egg"]})
    assert snap.vocabulary == ["Egg", "Milk", "egg"]


def test_food_keeps_opaque_attributes():
    snap = InventorySnapshot.from_payload({"shelf": [{"name": "Rice", "quantity": "2 kg", "expires": "2027-01-01"}]})
    assert snap.shelf[0].model_dump() == {"name": "Rice", "quantity": "2 kg", "expires": "2027-01-01"}


def test_patches_touch_only_named_location():
    snap = InventorySnapshot(
        shelf=[Food(name="Flour")],
        fridge=[Food(name="Milk"), Food(name="Eggs"), Food(name="Butter")],
        vocabulary=["Flour", "Milk"],
    )

    snap.apply_add(StorageLocation.fridge, Food(name="Cheese"))
    snap.apply_edit(StorageLocation.fridge, 1, Food(name="Yogurt"))
    snap.apply_delete(StorageLocation.fridge, 0)

    assert [f.name for f in snap.fridge] == ["Yogurt", "Butter", "Cheese"]
    assert [f.name for f in snap.shelf] == ["Flour"]
    assert snap.freezer == []
    assert snap.vocabulary == ["Flour", "Milk"]


def test_owned_names_are_lowercase_across_locations():
    snap = InventorySnapshot(shelf=[Food(name="Flour")], freezer=[Food(name="PEAS")])
    assert snap.owned_names() == {"flour", "peas"}
