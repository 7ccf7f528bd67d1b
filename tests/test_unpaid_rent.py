from datetime import date
from decimal import Decimal

from services.unpaid_rent_service import NOT_PAID, PARTIAL, find_unpaid_rent, index_payments
from tests.conftest import bearer

TODAY = date(2024, 8, 20)


def test_paid_month_is_excluded(db, make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)
     make.lease(prop, tenant, start=date(2024, 3, 1), end=date(2025, 2, 28), rent="1000.00")
     make.payment(tenant, date(2024, 3, 15), "1000.00")

     rows = find_unpaid_rent(db, alice.id, TODAY)

     assert [row.period for row in rows] == ["2024-08", "2024-07", "2024-06", "2024-05", "2024-04"]
     assert all(row.amount_due == Decimal("1000.00") for row in rows)
     assert all(row.status == NOT_PAID for row in rows)
     assert rows[0].month_label == "August 2024"


def test_partial_payment(db, make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)
     make.lease(prop, tenant, start=date(2024, 8, 1), end=date(2025, 7, 31), rent="1000.00")
     make.payment(tenant, date(2024, 8, 2), "600.00")

     rows = find_unpaid_rent(db, alice.id, TODAY)

     assert len(rows) == 1
     assert rows[0].status == PARTIAL
     assert rows[0].amount_paid == Decimal("600.00")
     assert rows[0].amount_due == Decimal("400.00")


def test_payments_in_one_month_add_up(db, make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)
     make.lease(prop, tenant, start=date(2024, 8, 1), end=date(2025, 7, 31), rent="1000.00")
     make.payment(tenant, date(2024, 8, 1), "400.00")
     make.payment(tenant, date(2024, 8, 19), "600.00")

     assert find_unpaid_rent(db, alice.id, TODAY) == []


def test_window_is_twelve_months(db, make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)
     make.lease(prop, tenant, start=date(2022, 1, 1), end=date(2025, 12, 31), rent="900.00")

     rows = find_unpaid_rent(db, alice.id, TODAY)

     assert len(rows) == 12
     assert rows[0].period == "2024-08"
     assert rows[-1].period == "2023-09"


def test_only_current_leases_are_reported(db, make, alice):
     prop = make.property(owner=alice)
     make.lease(prop, make.tenant(prop, name="Ended Ed"), start=date(2023, 1, 1), end=date(2024, 6, 30))
     make.lease(prop, make.tenant(prop, name="Future Fay"), start=date(2024, 9, 1), end=date(2025, 8, 31))

     assert find_unpaid_rent(db, alice.id, TODAY) == []


def test_other_owners_leases_are_ignored(db, make, alice, bob):
     prop = make.property(owner=bob)
     make.lease(prop, make.tenant(prop), start=date(2024, 8, 1), end=date(2025, 7, 31))

     assert find_unpaid_rent(db, alice.id, TODAY) == []


def test_same_month_sorted_by_tenant_name(db, make, alice):
     prop = make.property(owner=alice)
     for name in ("Zed Zimmer", "Amy Adams"):
          make.lease(prop, make.tenant(prop, name=name), start=date(2024, 8, 1), end=date(2025, 7, 31))

     rows = find_unpaid_rent(db, alice.id, TODAY)

     assert [row.tenant_name for row in rows] == ["Amy Adams", "Zed Zimmer"]


def test_index_payments_groups_by_tenant_and_month(make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)
     payments = [
          make.payment(tenant, date(2024, 3, 1), "100.00"),
          make.payment(tenant, date(2024, 3, 30), "50.00"),
          make.payment(tenant, date(2024, 4, 1), "75.00"),
     ]

     totals = index_payments(payments)

     assert totals[(tenant.id, 2024, 3)] == Decimal("150.00")
     assert totals[(tenant.id, 2024, 4)] == Decimal("75.00")


def test_unpaid_rent_endpoint(client, make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)
     today = date.today()
     make.lease(prop, tenant, start=date(today.year, today.month, 1), end=date(today.year + 1, 12, 31), rent="750.00")

     response = client.get("/api/reports/unpaid-rent", headers=bearer(alice))

     assert response.status_code == 200
     body = response.json()
     assert body["asOf"] == today.isoformat()
     assert body["count"] == 1
     assert Decimal(body["totalDue"]) == Decimal("750.00")
     item = body["items"][0]
     assert item["tenantName"] == tenant.name
     assert item["status"] == "Not Paid"
     assert Decimal(item["amountDue"]) == Decimal("750.00")
