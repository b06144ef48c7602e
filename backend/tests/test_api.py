from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from frontdesk.main import create_app

from conftest import make_settings


@pytest.fixture
def client():
    app = create_app(make_settings())
    with TestClient(app) as client:
        yield client


def _check_in_body(**overrides) -> dict:
    today = date.today()
    body = {
        "guest_name": "Ana",
        "document": "123",
        "check_in_date": today.isoformat(),
        "expected_checkout": (today + timedelta(days=1)).isoformat(),
    }
    body.update(overrides)
    return body


def _employee(client, role: str, username: str) -> str:
    resp = client.post("/v1/staff", json={"name": username.title(), "username": username, "role": role})
    assert resp.status_code == 201
    return resp.json()["id"]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_room_board(client):
    resp = client.get("/v1/rooms")
    assert resp.status_code == 200
    rooms = resp.json()
    assert len(rooms) == 52
    assert rooms[0]["number"] == "25"
    assert rooms[0]["guest_name"] is None

    assert client.get("/v1/rooms/25/workflow").json()["workflow"] == "check_in"
    assert client.get("/v1/rooms/999").status_code == 404


def test_scenario_a_over_http(client):
    resp = client.post("/v1/stays/25/check-in", json=_check_in_body())
    assert resp.status_code == 201
    stay = resp.json()
    assert Decimal(stay["daily_rate"]) == Decimal("250")
    assert Decimal(stay["totals"]["balance"]) == Decimal("250")

    room = client.get("/v1/rooms/25").json()
    assert room["status"] == "occupied"
    assert room["guest_name"] == "Ana"

    resp = client.post("/v1/stays/25/consumption", json={"item": "Água", "unit_price": "6.00", "quantity": 2})
    assert resp.status_code == 201
    assert Decimal(resp.json()["totals"]["balance"]) == Decimal("262")

    resp = client.post("/v1/stays/25/payments", json={"amount": "100.00", "method": "cash"})
    assert Decimal(resp.json()["totals"]["balance"]) == Decimal("162")

    resp = client.post("/v1/stays/25/checkout", json={"actor": "Reception"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "dirty"
    assert client.get("/v1/stays/25").status_code == 404
    assert client.get("/v1/rooms/25").json()["guest_name"] is None


def test_check_in_errors(client):
    assert client.post("/v1/stays/25/check-in", json=_check_in_body(guest_name="")).status_code == 422
    assert client.post("/v1/stays/999/check-in", json=_check_in_body()).status_code == 404

    assert client.post("/v1/stays/25/check-in", json=_check_in_body()).status_code == 201
    assert client.post("/v1/stays/25/check-in", json=_check_in_body()).status_code == 409

    resp = client.post("/v1/stays/25/payments", json={"amount": "abc"})
    assert resp.status_code == 422
    assert client.post("/v1/stays/25/payments", json={"amount": "0.004"}).status_code == 422
    assert client.post("/v1/stays/25/consumption", json={"item": "Soda", "unit_price": "1.005"}).status_code == 422
    assert Decimal(client.get("/v1/stays/25").json()["totals"]["paid_total"]) == Decimal("0")


def test_configured_rate_is_used_when_none_given(client):
    resp = client.put("/v1/catalog/rates/luxury", json={"daily_rate": "420.00"})
    assert resp.status_code == 200

    stay = client.post("/v1/stays/41/check-in", json=_check_in_body()).json()
    assert Decimal(stay["daily_rate"]) == Decimal("420")

    stay = client.post("/v1/stays/42/check-in", json=_check_in_body(daily_rate="380")).json()
    assert Decimal(stay["daily_rate"]) == Decimal("380")

    rates = {r["category"]: Decimal(r["daily_rate"]) for r in client.get("/v1/catalog/rates").json()}
    assert rates == {"standard": Decimal("250"), "luxury": Decimal("420"), "master": Decimal("750")}


def test_update_stay_contract(client):
    client.post("/v1/stays/25/check-in", json=_check_in_body())
    checkout = (date.today() + timedelta(days=3)).isoformat()

    resp = client.patch("/v1/stays/25", json={"expected_checkout": checkout, "notes": "Late arrival"})

    assert resp.status_code == 200
    assert resp.json()["totals"]["nights"] == 3
    assert resp.json()["notes"] == "Late arrival"


def test_scenario_c_over_http(client):
    client.post("/v1/stays/25/check-in", json=_check_in_body())
    client.post("/v1/stays/25/checkout", json={})
    housekeeper_id = _employee(client, "housekeeper", "maria")
    receptionist_id = _employee(client, "receptionist", "paula")

    assert client.post("/v1/rooms/25/clean", json={}).status_code == 422
    assert client.post("/v1/rooms/25/clean", json={"housekeeper_id": receptionist_id}).status_code == 422
    assert client.get("/v1/rooms/25").json()["status"] == "dirty"

    resp = client.post("/v1/rooms/25/clean", json={"housekeeper_id": housekeeper_id})
    assert resp.status_code == 200
    assert resp.json()["status"] == "available"


def test_maintenance_over_http(client):
    resp = client.post("/v1/maintenance", json={"room_number": "30", "issue": "lock failing", "priority": "high"})
    assert resp.status_code == 201
    ticket = resp.json()
    assert ticket["status"] == "pending"
    assert client.get("/v1/rooms/30").json()["status"] == "maintenance"
    assert client.get("/v1/rooms/30/workflow").json()["workflow"] == "maintenance_resolution"

    resp = client.post(f"/v1/maintenance/{ticket['id']}/resolve", json={})
    assert resp.status_code == 200
    assert resp.json()["resolved_at"] is not None
    assert client.get("/v1/rooms/30").json()["status"] == "dirty"
    assert client.post(f"/v1/maintenance/{ticket['id']}/resolve", json={}).status_code == 409

    assert client.get("/v1/maintenance/stats").json() == {"pending": 0, "in_progress": 0, "done": 1, "total": 1}
    assert client.get("/v1/maintenance/missing").status_code == 404


def test_ticket_for_occupied_room_conflicts(client):
    client.post("/v1/stays/25/check-in", json=_check_in_body())

    resp = client.post("/v1/maintenance", json={"room_number": "25", "issue": "TV"})

    assert resp.status_code == 409


def test_unblock_disabled(client):
    assert client.post("/v1/rooms/25/unblock", json={}).status_code == 409


def test_cashier_over_http(client):
    operator_id = _employee(client, "receptionist", "paula")
    housekeeper_id = _employee(client, "housekeeper", "maria")

    entry = {"kind": "income", "amount": "50", "description": "Bar", "category": "restaurant", "payment_method": "cash"}
    assert client.post("/v1/cashier/entries", json=entry).status_code == 409

    assert client.post("/v1/cashier/shift/open", json={"operator_id": housekeeper_id}).status_code == 422
    resp = client.post("/v1/cashier/shift/open", json={"operator_id": operator_id, "starting_float": "100"})
    assert resp.status_code == 201
    assert resp.json()["operator"] == "Paula"

    assert client.post("/v1/cashier/entries", json=entry).status_code == 201
    totals = client.get("/v1/cashier/totals").json()
    assert Decimal(totals["cash"]) == Decimal("150")

    assert client.post("/v1/cashier/shift/close", json={"cash": "120"}).status_code == 422
    resp = client.post("/v1/cashier/shift/close", json={"cash": "150"})
    assert resp.status_code == 200
    assert Decimal(resp.json()["total_difference"]) == Decimal("0")
    assert client.get("/v1/cashier/shift").json()["is_open"] is False


def test_staff_and_catalog_crud(client):
    employee_id = _employee(client, "manager", "lucas")
    assert client.post("/v1/staff", json={"name": "Other", "username": "lucas", "role": "manager"}).status_code == 422

    resp = client.delete(f"/v1/staff/{employee_id}")
    assert resp.json()["is_active"] is False
    assert client.get("/v1/staff", params={"active_only": True}).json() == []

    resp = client.post("/v1/catalog/products", json={"code": "001", "name": "Água Mineral", "category": "minibar", "price": "6.00"})
    assert resp.status_code == 201
    product_id = resp.json()["id"]
    client.post("/v1/catalog/products", json={"code": "002", "name": "Cerveja", "category": "bar", "price": "12.00"})

    found = client.get("/v1/catalog/products/search", params={"q": "MINERAL"}).json()
    assert [p["code"] for p in found] == ["001"]

    resp = client.patch(f"/v1/catalog/products/{product_id}", json={"price": "7.00"})
    assert Decimal(resp.json()["price"]) == Decimal("7")

    assert client.delete(f"/v1/catalog/products/{product_id}").status_code == 204
    assert len(client.get("/v1/catalog/products").json()) == 1


def test_reports(client):
    client.post("/v1/stays/25/check-in", json=_check_in_body(initial_payment="100", initial_payment_method="pix"))
    client.post("/v1/maintenance", json={"room_number": "30", "issue": "Leak"})

    occupancy = client.get("/v1/reports/occupancy").json()
    assert occupancy["occupied"] == 1
    assert occupancy["maintenance"] == 1
    assert occupancy["total_rooms"] == 52

    activity = client.get("/v1/reports/activity", params={"type": "CHECK_IN"}).json()
    assert len(activity) == 1

    financial = client.get("/v1/reports/financial").json()
    assert Decimal(financial["income"]) == Decimal("100")
    assert Decimal(financial["outstanding_balance"]) == Decimal("150")


def test_assistant_falls_back_when_disabled(client):
    client.post("/v1/stays/25/check-in", json=_check_in_body())

    snapshot = client.get("/v1/assistant/snapshot").json()["snapshot"]
    assert "guest: Ana" in snapshot

    resp = client.post("/v1/assistant/ask", json={"question": "Who is in room 25?"})
    assert resp.status_code == 200
    assert resp.json()["is_fallback"] is True
