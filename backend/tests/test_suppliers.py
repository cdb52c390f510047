import pytest

from backend.app.core.errors import BadRequest, NotFound
from backend.services import suppliers


def test_supplier_crud_over_http(client, auth_headers):
    resp = client.post(
        "/api/suppliers",
        json={"name": "Acme", "email": "orders@acme.test", "address": "1 Industrial Way"},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["message"] == "Supplier created successfully"
    s = resp.json()["data"]

    resp = client.put(
        f"/api/suppliers/{s['id']}",
        json={"name": "Acme Corp"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    updated = resp.json()["data"]
    # update écrase tous les champs modifiables
    assert (updated["name"], updated["email"], updated["address"]) == ("Acme Corp", None, None)

    resp = client.delete(f"/api/suppliers/{s['id']}", headers=auth_headers)
    assert resp.json() == {"success": True, "message": "Supplier deleted successfully"}

    assert client.get("/api/suppliers", headers=auth_headers).json()["data"] == []
    resp = client.get(f"/api/suppliers/{s['id']}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Supplier not found"


def test_supplier_name_required(client, auth_headers):
    resp = client.post("/api/suppliers", json={"email": "x@y.test"}, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Supplier name is required"}


def test_list_is_ordered_and_skips_deleted(db_session):
    a = suppliers.create_supplier(db_session, name="Acme")
    b = suppliers.create_supplier(db_session, name="Globex")
    c = suppliers.create_supplier(db_session, name="Initech")
    suppliers.delete_supplier(db_session, b.id)

    assert [s.id for s in suppliers.list_suppliers(db_session)] == [a.id, c.id]


def test_update_missing_supplier(db_session):
    with pytest.raises(NotFound):
        suppliers.update_supplier(db_session, 77, name="Nope")

    s = suppliers.create_supplier(db_session, name="Acme")
    with pytest.raises(BadRequest):
        suppliers.update_supplier(db_session, s.id, name="")
