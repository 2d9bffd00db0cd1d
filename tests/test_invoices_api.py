from datetime import date, timedelta
from decimal import Decimal

import pytest

from rental_service.app.schemas.financials.invoices_schemas import coerce_paid_flag


def invoice_payload(**overrides):
    payload = {
        "month": 10,
        "year": 2026,
        "base_rent": 3000,
        "electricity": 120,
        "water": 80,
        "stair_cleaning": 50,
        "other_services": 0,
        "due_date": "2026-10-05",
    }
    payload.update(overrides)
    return payload


def create_invoice(client, headers, **overrides):
    resp = client.post("/api/invoices/", json=invoice_payload(**overrides), headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


@pytest.mark.parametrize("raw, expected", [
    (True, True), (False, False), (None, False),
    (1, True), (0, False), ("1", True), ("0", False),
    ("true", True), ("false", False),
])
def test_legacy_paid_flags(raw, expected):
    assert coerce_paid_flag(raw) is expected


def test_create_accepts_numeric_paid_flag(client, headers):
    invoice = create_invoice(client, headers, is_paid=1)
    assert invoice["is_paid"] is True
    assert invoice["payment_status"] == "paid"

    invoice = create_invoice(client, headers, is_paid="0")
    assert invoice["is_paid"] is False
    assert invoice["payment_status"] == "unpaid"


def test_invoice_without_contract_uses_placeholders(client, headers):
    invoice = create_invoice(client, headers)
    assert invoice["tenant_name"] == "Locataire inconnu"
    assert invoice["unit_number"] == "Unité inconnue"
    assert invoice["building_name"] == "Bâtiment inconnu"
    assert invoice["month_name"] == "Octobre"
    assert Decimal(invoice["total_amount"]) == Decimal("3250")


def test_invoice_is_overdue_from_due_date(client, headers):
    today = date.today()
    late = create_invoice(client, headers, due_date=(today - timedelta(days=1)).isoformat())
    due_today = create_invoice(client, headers, due_date=today.isoformat())
    upcoming = create_invoice(client, headers, due_date=(today + timedelta(days=1)).isoformat())
    settled = create_invoice(client, headers, is_paid=True,
                             due_date=(today - timedelta(days=10)).isoformat())

    assert late["is_overdue"] is True
    assert due_today["is_overdue"] is True
    assert upcoming["is_overdue"] is False
    assert settled["is_overdue"] is False


def test_filters_and_overview(client, headers):
    create_invoice(client, headers, is_paid=True)
    create_invoice(client, headers, month=9, due_date="2026-09-05")
    create_invoice(client, headers, month=9, due_date="2026-09-05", base_rent=1000)

    unpaid = client.get("/api/invoices/all", params={"status": "unpaid"},
                        headers=headers).json()["data"]
    assert unpaid["total"] == 2

    september = client.get("/api/invoices/all", params={"month": 9, "year": 2026},
                           headers=headers).json()["data"]
    assert {i["month_name"] for i in september["invoices"]} == {"Septembre"}

    overview = client.get("/api/invoices/overview", headers=headers).json()["data"]
    assert Decimal(overview["total_paid"]) == Decimal("3250")
    assert Decimal(overview["total_unpaid"]) == Decimal("3250") + Decimal("1250")
    assert overview["unpaid_count"] == 2


def test_mark_paid_defaults_to_today(client, headers):
    invoice = create_invoice(client, headers)
    resp = client.put(f"/api/invoices/{invoice['id']}/paid", json={}, headers=headers)
    data = resp.json()["data"]
    assert data["is_paid"] is True
    assert data["paid_date"] == date.today().isoformat()

    invoice = create_invoice(client, headers)
    resp = client.put(f"/api/invoices/{invoice['id']}/paid",
                      json={"paid_date": "2026-10-03"}, headers=headers)
    assert resp.json()["data"]["paid_date"] == "2026-10-03"


def test_invoice_search_uses_contract_names(client, headers):
    building = client.post("/api/buildings/", json={"name": "Immeuble Rif"},
                           headers=headers).json()["data"]
    unit = client.post("/api/buildings/units", json={
        "building_id": building["id"], "unit_number": "B2"}, headers=headers).json()["data"]
    tenant = client.post("/api/tenants/", json={
        "first_name": "Omar", "last_name": "Bennani"}, headers=headers).json()["data"]
    contract = client.post("/api/contracts/", json={
        "tenant_id": tenant["id"], "unit_id": unit["id"],
        "start_date": "2026-01-01", "rent_amount": 3000}, headers=headers).json()["data"]

    create_invoice(client, headers, contract_id=contract["id"])
    create_invoice(client, headers)

    data = client.get("/api/invoices/all", params={"search": "bennani"},
                      headers=headers).json()["data"]
    assert data["total"] == 1
    row = data["invoices"][0]
    assert row["tenant_name"] == "Omar Bennani"
    assert row["unit_number"] == "B2"
    assert row["building_name"] == "Immeuble Rif"


def test_month_out_of_range_is_rejected(client, headers):
    resp = client.post("/api/invoices/", json=invoice_payload(month=13), headers=headers)
    assert resp.status_code == 422


def test_delete_and_scope(client, headers, other_headers):
    invoice = create_invoice(client, headers)
    assert client.delete(f"/api/invoices/{invoice['id']}",
                         headers=other_headers).status_code == 404
    assert client.delete(f"/api/invoices/{invoice['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/invoices/{invoice['id']}", headers=headers).status_code == 404
