from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

from rental_service.app.crud.overview.reports_crud import (
    build_payment_statuses, filter_payment_statuses, summarize_by_building,
    summarize_payment_statuses
)
from rental_service.app.enum.financials_enum import french_month_name
from rental_service.app.schemas.overview.reports_schemas import (
    PaymentReportRequest, PaymentStatusRow
)

TODAY = date(2026, 10, 18)


def portfolio():
    building = SimpleNamespace(id=uuid4(), name="Résidence Atlas")
    unit = SimpleNamespace(id=uuid4(), unit_number="A1", building_id=building.id)
    tenant = SimpleNamespace(id=uuid4(), first_name="Youssef", last_name="Alami")
    other = SimpleNamespace(id=uuid4(), first_name="Sara", last_name="Idrissi")

    active = SimpleNamespace(id=uuid4(), tenant_id=tenant.id, unit_id=unit.id,
                             status="active", rent_amount=Decimal("3000"))
    ended = SimpleNamespace(id=uuid4(), tenant_id=other.id, unit_id=unit.id,
                            status="inactive", rent_amount=Decimal("2000"))
    orphan = SimpleNamespace(id=uuid4(), tenant_id=other.id, unit_id=uuid4(),
                             status="active", rent_amount=Decimal("1500"))

    receipts = [
        SimpleNamespace(tenant_name="Youssef Alami", period_start=date(2026, 10, 1),
                        issue_date=date(2026, 10, 3)),
        SimpleNamespace(tenant_name="M. Youssef Alami", period_start=date(2026, 9, 1),
                        issue_date=date(2026, 9, 2)),
        # same first name, different family
        SimpleNamespace(tenant_name="Youssef Benali", period_start=date(2026, 8, 1),
                        issue_date=date(2026, 8, 4)),
    ]
    return dict(contracts=[active, ended, orphan], tenants=[tenant, other],
                units=[unit], buildings=[building], receipts=receipts), active


def test_one_row_per_active_contract_and_month():
    data, active = portfolio()
    rows = build_payment_statuses(today=TODAY, **data)

    assert [r.month for r in rows] == [
        "octobre 2026", "septembre 2026", "août 2026",
        "juillet 2026", "juin 2026", "mai 2026",
    ]
    assert rows[0].id == f"{active.id}-2026-10"
    assert rows[0].tenant_name == "Youssef Alami"
    assert rows[0].building_name == "Résidence Atlas"
    assert rows[0].due_date == date(2026, 10, 5)


def test_receipts_mark_months_paid():
    data, _ = portfolio()
    rows = {r.month: r for r in build_payment_statuses(today=TODAY, **data)}

    assert rows["octobre 2026"].is_paid is True
    assert rows["octobre 2026"].paid_date == date(2026, 10, 3)
    assert rows["septembre 2026"].is_paid is True
    assert rows["août 2026"].is_paid is False
    assert rows["août 2026"].is_overdue is True
    assert rows["octobre 2026"].is_overdue is False


def test_months_wrap_over_the_year():
    data, _ = portfolio()
    rows = build_payment_statuses(today=date(2026, 2, 10), months_back=3, **data)
    assert [r.month for r in rows] == ["février 2026", "janvier 2026", "décembre 2025"]
    assert [r.year for r in rows] == [2026, 2026, 2025]


def test_filters_and_summary():
    data, _ = portfolio()
    rows = build_payment_statuses(today=TODAY, **data)

    summary = summarize_payment_statuses(rows)
    assert summary.paid_count == 2
    assert summary.unpaid_count == 4
    assert summary.total_paid == Decimal("6000")
    assert summary.total_unpaid == Decimal("12000")

    paid = filter_payment_statuses(rows, PaymentReportRequest(status="paid"))
    assert len(paid) == 2

    september = filter_payment_statuses(rows, PaymentReportRequest(month="septembre 2026"))
    assert len(september) == 1

    assert filter_payment_statuses(rows, PaymentReportRequest(building="Autre")) == []
    assert len(filter_payment_statuses(rows, PaymentReportRequest(search="alami"))) == 6


def seed_lease_with_receipt(client, headers, today):
    building = client.post("/api/buildings/", json={"name": "Résidence Atlas"},
                           headers=headers).json()["data"]
    unit = client.post("/api/buildings/units", json={
        "building_id": building["id"], "unit_number": "A1",
        "status": "occupied"}, headers=headers).json()["data"]
    tenant = client.post("/api/tenants/", json={
        "first_name": "Youssef", "last_name": "Alami"}, headers=headers).json()["data"]
    client.post("/api/contracts/", json={
        "tenant_id": tenant["id"], "unit_id": unit["id"],
        "start_date": "2025-01-01", "rent_amount": 3000}, headers=headers)
    client.post("/api/receipts/", json={
        "tenant_name": "Youssef Alami",
        "period_start": today.replace(day=1).isoformat(),
        "period_end": today.isoformat(),
        "base_rent": 3000,
    }, headers=headers)


def test_payment_report_endpoint(client, headers):
    today = date.today()
    seed_lease_with_receipt(client, headers, today)

    data = client.get("/api/reports/payments", headers=headers).json()["data"]
    assert len(data["payments"]) == 6
    current = data["payments"][0]
    assert current["month"] == f"{french_month_name(today.month)} {today.year}"
    assert current["is_paid"] is True
    assert data["paid_count"] == 1
    assert data["unpaid_count"] == 5
    assert data["total"] == 6
    assert data["buildings"] == [{
        "building_name": "Résidence Atlas",
        "paid_count": 1,
        "unpaid_count": 5,
        "paid_amount": data["buildings"][0]["paid_amount"],
        "total_amount": data["buildings"][0]["total_amount"],
        "collected_rate": 17,
    }]
    assert Decimal(data["buildings"][0]["paid_amount"]) == Decimal("3000")
    assert Decimal(data["buildings"][0]["total_amount"]) == Decimal("18000")


def test_payment_report_pages_rows_but_not_totals(client, headers):
    today = date.today()
    seed_lease_with_receipt(client, headers, today)

    data = client.get("/api/reports/payments", params={"skip": 4, "limit": 5},
                      headers=headers).json()["data"]
    assert len(data["payments"]) == 2
    assert data["total"] == 6
    assert data["paid_count"] == 1
    assert data["unpaid_count"] == 5
    assert data["buildings"][0]["paid_count"] == 1

    data = client.get("/api/reports/payments", params={"limit": 1},
                      headers=headers).json()["data"]
    assert len(data["payments"]) == 1
    assert data["payments"][0]["is_paid"] is True


def test_payment_report_rejects_out_of_range_months(client, headers):
    for months_back in (0, -3, 121, 30000):
        resp = client.get("/api/reports/payments", params={"months_back": months_back},
                          headers=headers)
        assert resp.status_code == 422, months_back
        assert resp.json()["status_code"] == "201"

    resp = client.get("/api/reports/payments", params={"months_back": 120}, headers=headers)
    assert resp.status_code == 200


def row(building, amount, is_paid):
    return PaymentStatusRow(
        id=str(uuid4()), tenant_name="T", unit_number="1", building_name=building,
        month="octobre 2026", year=2026, amount=Decimal(amount), is_paid=is_paid,
        due_date=date(2026, 10, 5),
    )


def test_building_summary_per_building():

    rows = [
        row("Résidence Atlas", "3000", True),
        row("Immeuble Rif", "1000", True),
        row("Résidence Atlas", "3000", False),
        row("Immeuble Rif", "2000", False),
        row("Résidence Atlas", "3000", False),
        row("Garages Nord", "0", False),
    ]
    summaries = {s.building_name: s for s in summarize_by_building(rows)}

    assert list(summaries) == ["Garages Nord", "Immeuble Rif", "Résidence Atlas"]

    atlas = summaries["Résidence Atlas"]
    assert (atlas.paid_count, atlas.unpaid_count) == (1, 2)
    assert atlas.paid_amount == Decimal("3000")
    assert atlas.total_amount == Decimal("9000")
    assert atlas.collected_rate == 33

    assert summaries["Immeuble Rif"].collected_rate == 33
    assert summaries["Garages Nord"].collected_rate == 0


def test_building_summary_rounds_half_up():
    # 1 collected out of 8 is 12.5%
    rows = [row("Résidence Atlas", "100", True)] + [
        row("Résidence Atlas", "100", False) for _ in range(7)]
    assert summarize_by_building(rows)[0].collected_rate == 13

    data, _ = portfolio()
    rows = build_payment_statuses(today=TODAY, months_back=2, **data)
    assert summarize_by_building(rows)[0].collected_rate == 100


def test_building_summary_follows_filters():
    data, _ = portfolio()
    rows = build_payment_statuses(today=TODAY, **data)
    report = summarize_payment_statuses(
        filter_payment_statuses(rows, PaymentReportRequest(status="unpaid")))
    assert report.total == 4
    assert report.buildings[0].paid_count == 0
    assert report.buildings[0].collected_rate == 0
    assert summarize_payment_statuses([]).buildings == []


def test_dashboard_stats(client, headers):
    building = client.post("/api/buildings/", json={"name": "Résidence Atlas"},
                           headers=headers).json()["data"]
    for number, status in (("A1", "occupied"), ("A2", "free")):
        client.post("/api/buildings/units", json={
            "building_id": building["id"], "unit_number": number,
            "status": status}, headers=headers)
    client.post("/api/tenants/", json={"first_name": "Sara", "last_name": "Idrissi"},
                headers=headers)
    for is_paid in (True, False):
        client.post("/api/invoices/", json={
            "month": 10, "year": 2026, "base_rent": 3000, "water": 250,
            "is_paid": is_paid, "due_date": "2026-10-05"}, headers=headers)
    # another month is left out of the revenue
    client.post("/api/invoices/", json={
        "month": 9, "year": 2026, "base_rent": 3000, "is_paid": True,
        "due_date": "2026-09-05"}, headers=headers)

    stats = client.get("/api/dashboard/stats", params={"month": 10, "year": 2026},
                       headers=headers).json()["data"]
    assert stats["total_buildings"] == 1
    assert stats["total_units"] == 2
    assert stats["occupied_units"] == 1
    assert stats["occupancy_rate"] == 50
    assert stats["total_tenants"] == 1
    assert Decimal(stats["monthly_revenue"]) == Decimal("3250")
    assert stats["paid_invoices"] == 1
    assert stats["unpaid_invoices"] == 1
