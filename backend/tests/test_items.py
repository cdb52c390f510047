import pytest

from backend.app.core.errors import BadRequest, NotFound
from backend.services import inventory


def test_item_crud_over_http(client, auth_headers):
    resp = client.post("/api/items", json={"name": "Bolt", "stock": 10, "price": 2.5}, headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["message"] == "Item created successfully"
    item = resp.json()["data"]
    assert (item["name"], item["stock"], item["price"]) == ("Bolt", 10, 2.5)

    resp = client.get(f"/api/items/{item['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Bolt"

    resp = client.put(
        f"/api/items/{item['id']}",
        json={"name": "Hex Bolt", "stock": 12, "price": 3.0},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Item updated successfully"
    assert (resp.json()["data"]["name"], resp.json()["data"]["stock"]) == ("Hex Bolt", 12)

    resp = client.get("/api/items", headers=auth_headers)
    assert [i["name"] for i in resp.json()["data"]] == ["Hex Bolt"]

    resp = client.delete(f"/api/items/{item['id']}", headers=auth_headers)
    assert resp.json() == {"success": True, "message": "Item deleted successfully"}

    assert client.get("/api/items", headers=auth_headers).json()["data"] == []
    resp = client.get(f"/api/items/{item['id']}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Item not found"}


def test_items_require_auth(client):
    assert client.get("/api/items").status_code == 401
    assert client.post("/api/items", json={"name": "Bolt"}).status_code == 401


@pytest.mark.parametrize(
    "payload,message",
    [
        ({"stock": 1, "price": 1}, "Item name is required"),
        ({"name": "Bolt", "stock": 1, "price": -0.01}, "Price cannot be negative"),
        ({"name": "Bolt", "stock": -1, "price": 1}, "Stock cannot be negative"),
    ],
)
def test_item_validation_over_http(client, auth_headers, payload, message):
    resp = client.post("/api/items", json=payload, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": message}


def test_update_revalidates(db_session):
    item = inventory.create_item(db_session, name="Bolt", stock=5, price=1.0)

    with pytest.raises(BadRequest, match="Stock cannot be negative"):
        inventory.update_item(db_session, item.id, name="Bolt", stock=-5, price=1.0)


def test_soft_delete_hides_but_keeps_row(db_session):
    item = inventory.create_item(db_session, name="Bolt", stock=5, price=1.0)
    inventory.delete_item(db_session, item.id)

    assert inventory.find_item(db_session, item.id) is None
    assert inventory.list_items(db_session) == []
    with pytest.raises(NotFound):
        inventory.delete_item(db_session, item.id)

    db_session.refresh(item)
    assert item.deleted_at is not None


@pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_price_is_rejected_over_http(client, auth_headers, literal):
    """
    GIVEN
    - un body JSON avec un prix non fini (accepté par le parseur JSON Python)

    THEN
    - 400 et rien n'est écrit : la liste reste lisible
    """
    resp = client.post(
        "/api/items",
        content='{"name": "Bolt", "stock": 1, "price": %s}' % literal,
        headers={**auth_headers, "Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Price must be a finite number"}

    resp = client.get("/api/items", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"] == []


@pytest.mark.parametrize("price", [float("inf"), float("nan")])
def test_non_finite_price_is_rejected_on_update(db_session, price):
    item = inventory.create_item(db_session, name="Bolt", stock=5, price=1.0)

    with pytest.raises(BadRequest, match="Price must be a finite number"):
        inventory.update_item(db_session, item.id, name="Bolt", stock=5, price=price)

    db_session.refresh(item)
    assert item.price == 1.0
