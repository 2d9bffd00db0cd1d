import re
from decimal import Decimal

RECEIPT = {
    "landlord_name": "Ahmed Benali",
    "tenant_name": "Youssef Alami",
    "property_address": "12 Rue Atlas, Casablanca",
    "period_start": "2026-10-01",
    "period_end": "2026-10-31",
    "base_rent": 1500,
    "janitor_charge": 50,
    "electricity_charge": 100,
    "water_charge": 50,
    "extra_charges": [],
    "signatory_city": "Casablanca",
}


def create(client, headers, **overrides):
    resp = client.post("/api/receipts/", json={**RECEIPT, **overrides}, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


def test_requires_a_token(client):
    resp = client.get("/api/receipts/all")
    assert resp.status_code in (401, 403)


def test_new_draft_has_number_and_today(client, headers):
    resp = client.get("/api/receipts/new", headers=headers)
    assert resp.status_code == 200
    draft = resp.json()["data"]
    assert re.fullmatch(r"Q-\d{4}-\d{2}-\d{6}", draft["receipt_number"])
    assert Decimal(draft["total"]) == 0


def test_create_generates_number_and_total(client, headers):
    body = client.post("/api/receipts/", json=RECEIPT, headers=headers).json()
    assert body["status"] == "Success"
    receipt = body["data"]
    assert re.fullmatch(r"Q-\d{4}-\d{2}-\d{6}", receipt["receipt_number"])
    assert receipt["issue_date"]
    assert Decimal(receipt["total"]) == Decimal("1700")


def test_list_is_newest_first_with_grand_total(client, headers, other_headers):
    first = create(client, headers, receipt_number="Q-2026-10-000001")
    second = create(client, headers, receipt_number="Q-2026-10-000002",
                    extra_charges=[{"label": "Internet", "amount": 200}])
    create(client, other_headers, receipt_number="Q-2026-10-000003")

    data = client.get("/api/receipts/all", headers=headers).json()["data"]
    assert [r["id"] for r in data["receipts"]] == [second["id"], first["id"]]
    assert data["total"] == 2
    assert Decimal(data["total_amount"]) == Decimal("3600")


def test_list_search_and_page(client, headers):
    create(client, headers, receipt_number="Q-2026-10-000001", tenant_name="Sara Idrissi")
    create(client, headers, receipt_number="Q-2026-10-000002")

    data = client.get("/api/receipts/all", params={"search": "idrissi"},
                      headers=headers).json()["data"]
    assert data["total"] == 1
    assert data["receipts"][0]["tenant_name"] == "Sara Idrissi"

    data = client.get("/api/receipts/all", params={"skip": 1, "limit": 1},
                      headers=headers).json()["data"]
    assert data["total"] == 2
    assert len(data["receipts"]) == 1
    assert Decimal(data["total_amount"]) == Decimal("3400")


def test_update_recomputes_total(client, headers):
    receipt = create(client, headers)
    payload = {**RECEIPT, "id": receipt["id"],
               "receipt_number": receipt["receipt_number"],
               "issue_date": receipt["issue_date"],
               "base_rent": 2000}
    resp = client.put("/api/receipts/", json=payload, headers=headers)
    assert resp.status_code == 200
    assert Decimal(resp.json()["data"]["total"]) == Decimal("2200")


def test_duplicate_number_is_a_conflict(client, headers, other_headers):
    create(client, headers, receipt_number="Q-2026-10-111111")
    resp = client.post("/api/receipts/",
                       json={**RECEIPT, "receipt_number": "Q-2026-10-111111"},
                       headers=headers)
    assert resp.status_code == 409
    assert resp.json()["status"] == "Failure"

    # numbers are unique per owner only
    create(client, other_headers, receipt_number="Q-2026-10-111111")


def test_receipts_are_scoped_to_their_owner(client, headers, other_headers):
    receipt = create(client, headers)

    resp = client.get(f"/api/receipts/{receipt['id']}", headers=other_headers)
    assert resp.status_code == 404
    assert resp.json()["status_code"] == "202"

    resp = client.delete(f"/api/receipts/{receipt['id']}", headers=other_headers)
    assert resp.status_code == 404


def test_delete(client, headers):
    receipt = create(client, headers)
    resp = client.delete(f"/api/receipts/{receipt['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["deleted"] is True
    assert client.get(f"/api/receipts/{receipt['id']}", headers=headers).status_code == 404


def test_render_keeps_line_order(client, headers):
    receipt = create(client, headers, extra_charges=[
        {"label": "", "amount": 200},
        {"label": "Parking", "amount": -50},
    ])
    render = client.get(f"/api/receipts/{receipt['id']}/render",
                        headers=headers).json()["data"]

    assert [line["label"] for line in render["lines"]] == [
        "Loyer Net",
        "Charges de Gardien/Concierge",
        "Charges d'Électricité",
        "Charges d'Eau",
        "Autres Charges",
        "Parking",
    ]
    assert Decimal(render["total"]) == Decimal("1850")
    assert render["total_in_words"] == "mille huit cent cinquante"
    assert render["currency"] == "DH"


def test_pdf_download(client, headers):
    receipt = create(client, headers, receipt_number="Q-2026-10-222222")
    resp = client.get(f"/api/receipts/{receipt['id']}/pdf", headers=headers)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/pdf")
    assert "quittance_Q-2026-10-222222.pdf" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF")


def test_invalid_payload_is_wrapped(client, headers):
    resp = client.post("/api/receipts/", json={"tenant_name": "x"}, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["status_code"] == "201"
