"""Item Routes: HTTP contract for /api/items.

Invariants:
    - 201 on create, 404 on unknown id, 400 on validation or out-of-stock
    - Every error body is {"error": <message>}
    - Wire format is camelCase (nextImport, dateAdded, remainingQuantity)
"""

from uuid import uuid4

import pytest

SILVER = {
    "name": "Silver Earrings",
    "category": "earrings",
    "description": "Handmade silver with blue stone accents",
    "color": "silver/blue",
    "price": 25,
    "quantity": 2,
}


async def _create_item(client, **overrides) -> dict:
    res = await client.post("/api/items", json={**SILVER, **overrides})
    assert res.status_code == 201, res.text
    return res.json()


async def _create_fair(client, **overrides) -> dict:
    body = {
        "name": "Spring Craft Fair", "city": "Porto",
        "startDate": "2026-05-01", "endDate": "2026-05-03",
    }
    res = await client.post("/api/fairs", json={**body, **overrides})
    assert res.status_code == 201, res.text
    return res.json()


# ─── CRUD ────────────────────────────────────────────────────────

async def test_create_returns_201_with_camel_case_body(client):
    item = await _create_item(client, nextImport=True)
    assert item["name"] == "Silver Earrings"
    assert item["nextImport"] is True
    assert "dateAdded" in item
    assert "next_import" not in item


async def test_create_accepts_snake_case_fields(client):
    item = await _create_item(client, next_import=True)
    assert item["nextImport"] is True


async def test_create_with_unknown_category_returns_400(client):
    res = await client.post("/api/items", json={**SILVER, "category": "rings"})
    assert res.status_code == 400
    assert "category" in res.json()["error"]


async def test_create_with_negative_price_returns_400(client):
    res = await client.post("/api/items", json={**SILVER, "price": -1})
    assert res.status_code == 400
    assert set(res.json()) == {"error"}


@pytest.mark.parametrize("price", ["1e999", "NaN", "Infinity", "-Infinity"])
async def test_create_with_non_finite_price_returns_400(client, price):
    body = (
        '{"name": "Silver Earrings", "category": "earrings", '
        f'"price": {price}, "quantity": 2}}'
    )
    res = await client.post(
        "/api/items", content=body, headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert set(res.json()) == {"error"}
    assert (await client.get("/api/items")).json() == []


async def test_update_with_non_finite_price_returns_400(client):
    created = await _create_item(client)
    res = await client.put(
        f"/api/items/{created['id']}",
        content='{"name": "Silver Earrings", "category": "earrings", "price": NaN, "quantity": 2}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    res = await client.get(f"/api/items/{created['id']}")
    assert res.json()["price"] == 25


async def test_create_with_missing_field_returns_400(client):
    body = {k: v for k, v in SILVER.items() if k != "quantity"}
    res = await client.post("/api/items", json=body)
    assert res.status_code == 400
    assert "quantity" in res.json()["error"]


async def test_create_with_blank_name_returns_400(client):
    res = await client.post("/api/items", json={**SILVER, "name": "   "})
    assert res.status_code == 400


async def test_get_item(client):
    created = await _create_item(client)
    res = await client.get(f"/api/items/{created['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]
    assert res.json()["quantity"] == 2


async def test_get_unknown_item_returns_404(client):
    res = await client.get(f"/api/items/{uuid4()}")
    assert res.status_code == 404
    assert "not found" in res.json()["error"]


async def test_get_malformed_id_returns_404(client):
    res = await client.get("/api/items/12345")
    assert res.status_code == 404


async def test_list_items_newest_first_with_filters(client):
    await _create_item(client, name="Silver Flower Earrings")
    await _create_item(client, name="Beaded Necklace", category="necklaces")

    res = await client.get("/api/items")
    assert [i["name"] for i in res.json()] == [
        "Beaded Necklace", "Silver Flower Earrings",
    ]

    res = await client.get("/api/items", params={"category": "earrings"})
    assert [i["name"] for i in res.json()] == ["Silver Flower Earrings"]

    res = await client.get("/api/items", params={"search": "bead"})
    assert [i["name"] for i in res.json()] == ["Beaded Necklace"]


async def test_list_items_with_unknown_category_returns_400(client):
    res = await client.get("/api/items", params={"category": "rings"})
    assert res.status_code == 400


async def test_update_is_full_replace(client):
    created = await _create_item(client, nextImport=True)
    res = await client.put(
        f"/api/items/{created['id']}",
        json={"name": "Gold Earrings", "category": "earrings", "price": 30, "quantity": 4},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Gold Earrings"
    assert body["quantity"] == 4
    assert body["description"] == ""
    assert body["nextImport"] is False


async def test_update_unknown_item_returns_404(client):
    res = await client.put(f"/api/items/{uuid4()}", json=SILVER)
    assert res.status_code == 404


async def test_update_with_negative_quantity_returns_400(client):
    created = await _create_item(client)
    res = await client.put(
        f"/api/items/{created['id']}", json={**SILVER, "quantity": -3},
    )
    assert res.status_code == 400
    res = await client.get(f"/api/items/{created['id']}")
    assert res.json()["quantity"] == 2


async def test_delete_item(client):
    created = await _create_item(client)
    res = await client.delete(f"/api/items/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Item deleted successfully"}
    res = await client.get(f"/api/items/{created['id']}")
    assert res.status_code == 404


async def test_delete_unknown_item_returns_404(client):
    res = await client.delete(f"/api/items/{uuid4()}")
    assert res.status_code == 404


# ─── Import list ─────────────────────────────────────────────────

async def test_import_list_and_clear(client):
    await _create_item(client, name="Restock A", nextImport=True)
    await _create_item(client, name="Restock B", nextImport=True)
    await _create_item(client, name="Plenty", nextImport=False)

    res = await client.get("/api/items/import/list")
    assert res.status_code == 200
    assert sorted(i["name"] for i in res.json()) == ["Restock A", "Restock B"]

    res = await client.post("/api/items/import/clear")
    assert res.status_code == 200
    assert res.json() == {
        "message": "Import list cleared successfully", "clearedCount": 2,
    }

    res = await client.get("/api/items/import/list")
    assert res.json() == []


# ─── Sell ────────────────────────────────────────────────────────

async def test_sell_without_body_decrements(client):
    item = await _create_item(client)
    res = await client.post(f"/api/items/{item['id']}/sell")
    assert res.status_code == 200
    body = res.json()
    assert body["remainingQuantity"] == 1
    assert body["item"]["quantity"] == 1
    assert body["message"] == "Item sold successfully"


async def test_sell_scenario_over_http(client):
    item = await _create_item(client)
    fair = await _create_fair(client)
    res = await client.post(f"/api/fairs/{fair['id']}/start")
    assert res.status_code == 200

    sell_url = f"/api/items/{item['id']}/sell"
    res = await client.post(sell_url, json={"fairId": fair["id"]})
    assert res.json()["remainingQuantity"] == 1
    res = await client.post(sell_url, json={"fairId": fair["id"]})
    assert res.json()["remainingQuantity"] == 0

    res = await client.post(sell_url, json={"fairId": fair["id"]})
    assert res.status_code == 400
    assert res.json() == {"error": "Item 'Silver Earrings' is out of stock"}

    sales = (await client.get(f"/api/fairs/{fair['id']}/sales")).json()
    assert len(sales) == 2
    assert all(s["price"] == 25 for s in sales)
    assert all(s["itemId"] == item["id"] for s in sales)

    total = (await client.get(f"/api/fairs/{fair['id']}/total")).json()
    assert total == {"total": 50}


async def test_sell_with_empty_fair_id_records_nothing(client):
    item = await _create_item(client)
    fair = await _create_fair(client)
    res = await client.post(f"/api/items/{item['id']}/sell", json={"fairId": ""})
    assert res.status_code == 200
    assert (await client.get(f"/api/fairs/{fair['id']}/sales")).json() == []


async def test_sell_unknown_item_returns_404(client):
    res = await client.post(f"/api/items/{uuid4()}/sell", json={})
    assert res.status_code == 404


async def test_sell_with_unknown_fair_returns_404_and_keeps_stock(client):
    item = await _create_item(client)
    res = await client.post(
        f"/api/items/{item['id']}/sell", json={"fairId": str(uuid4())},
    )
    assert res.status_code == 404
    res = await client.get(f"/api/items/{item['id']}")
    assert res.json()["quantity"] == 2


async def test_deleting_item_keeps_sales_snapshot(client):
    item = await _create_item(client)
    fair = await _create_fair(client)
    await client.post(f"/api/items/{item['id']}/sell", json={"fairId": fair["id"]})
    await client.delete(f"/api/items/{item['id']}")

    [sale] = (await client.get(f"/api/fairs/{fair['id']}/sales")).json()
    assert sale["itemName"] == "Silver Earrings"
    assert sale["category"] == "earrings"
    assert sale["price"] == 25
