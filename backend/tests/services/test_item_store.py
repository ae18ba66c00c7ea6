"""Item Store: CRUD, stock decrement and import flags against a real session.

Invariants:
    - create/update reject invalid fields before anything is flushed
    - get/update/delete raise NotFoundError for unknown or malformed ids
    - decrement_stock never takes quantity below zero
"""

import asyncio
from uuid import uuid4

import pytest

from artisan.core.errors import NotFoundError, OutOfStockError, ValidationError
from artisan.infrastructure.database import transaction
from artisan.services.item_store import ItemStore


async def test_create_sets_defaults(make_item):
    item = await make_item()
    assert item.id is not None
    assert item.description == ""
    assert item.color == ""
    assert item.next_import is False
    assert item.date_added is not None


async def test_create_rejects_unknown_category(test_db):
    with pytest.raises(ValidationError):
        await ItemStore(test_db).create(
            name="Ring", category="rings", price=10, quantity=1,
        )


async def test_get_unknown_id_raises_not_found(test_db):
    with pytest.raises(NotFoundError):
        await ItemStore(test_db).get(uuid4())


async def test_get_malformed_id_raises_not_found(test_db):
    with pytest.raises(NotFoundError) as exc:
        await ItemStore(test_db).get("definitely-not-a-uuid")
    assert exc.value.http_status == 404


async def test_update_replaces_all_mutable_fields(test_db, make_item):
    item = await make_item(description="old", color="silver", next_import=True)
    async with transaction(test_db):
        updated = await ItemStore(test_db).update(
            item.id, name="Gold Earrings", category="earrings",
            price=30, quantity=5,
        )
    assert updated.name == "Gold Earrings"
    assert updated.price == 30.0
    assert updated.quantity == 5
    # omitted optional fields fall back to defaults (full replace)
    assert updated.description == ""
    assert updated.color == ""
    assert updated.next_import is False


async def test_update_rejects_negative_quantity_and_keeps_record(test_db, make_item):
    item = await make_item(quantity=3)
    item_id = item.id
    with pytest.raises(ValidationError):
        async with transaction(test_db):
            await ItemStore(test_db).update(
                item_id, name="Silver Earrings", category="earrings",
                price=25, quantity=-1,
            )
    reloaded = await ItemStore(test_db).get(item_id, refresh=True)
    assert reloaded.quantity == 3


async def test_delete_then_get_raises_not_found(test_db, make_item):
    item = await make_item()
    async with transaction(test_db):
        await ItemStore(test_db).delete(item.id)
    with pytest.raises(NotFoundError):
        await ItemStore(test_db).get(item.id)


async def test_list_is_newest_first(test_db, make_item):
    first = await make_item(name="First")
    await asyncio.sleep(0.01)
    second = await make_item(name="Second")
    items = await ItemStore(test_db).list_items()
    assert [i.id for i in items] == [second.id, first.id]


async def test_list_filters_by_search_and_category(test_db, make_item):
    await make_item(name="Silver Flower Earrings", category="earrings")
    await make_item(
        name="Colorful Necklace", category="necklaces",
        description="Natural stones and beads",
    )
    store = ItemStore(test_db)

    assert [i.name for i in await store.list_items(search="FLOWER")] == [
        "Silver Flower Earrings",
    ]
    assert [i.name for i in await store.list_items(search="stones")] == [
        "Colorful Necklace",
    ]
    assert [i.name for i in await store.list_items(category="necklaces")] == [
        "Colorful Necklace",
    ]
    assert await store.list_items(search="silver", category="necklaces") == []


async def test_search_matches_wildcard_characters_literally(test_db, make_item):
    await make_item(name="Silver Earrings")
    await make_item(name="Pearl_Drop 50% Off")
    store = ItemStore(test_db)

    assert [i.name for i in await store.list_items(search="_")] == ["Pearl_Drop 50% Off"]
    assert [i.name for i in await store.list_items(search="%")] == ["Pearl_Drop 50% Off"]
    assert await store.list_items(search="s_lver") == []


async def test_decrement_stock_takes_exactly_one(test_db, make_item):
    item = await make_item(quantity=2)
    async with transaction(test_db):
        updated = await ItemStore(test_db).decrement_stock(item.id)
    assert updated.quantity == 1


async def test_decrement_stock_at_zero_raises_and_keeps_zero(test_db, make_item):
    item = await make_item(quantity=0)
    item_id = item.id
    with pytest.raises(OutOfStockError):
        async with transaction(test_db):
            await ItemStore(test_db).decrement_stock(item_id)
    reloaded = await ItemStore(test_db).get(item_id, refresh=True)
    assert reloaded.quantity == 0


async def test_clear_import_flags_reports_count(test_db, make_item):
    await make_item(name="A", next_import=True)
    await make_item(name="B", next_import=True)
    await make_item(name="C", next_import=False)
    store = ItemStore(test_db)

    assert len(await store.list_flagged_for_import()) == 2
    async with transaction(test_db):
        cleared = await store.clear_import_flags()
    assert cleared == 2
    assert await store.list_flagged_for_import() == []


async def test_clear_import_flags_with_nothing_flagged_is_zero(test_db, make_item):
    await make_item(next_import=False)
    async with transaction(test_db):
        cleared = await ItemStore(test_db).clear_import_flags()
    assert cleared == 0
