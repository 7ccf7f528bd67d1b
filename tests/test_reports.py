from datetime import date
from decimal import Decimal

import pytest

from errors import ValidationError
from services.dates import month_bounds, period_bounds, shift_month
from services.report_service import ReportService, compute_roi
from tests.conftest import bearer

TODAY = date(2024, 8, 20)


@pytest.fixture
def portfolio(make, alice):
     prop = make.property(owner=alice, address1="1 Alice Way")
     tenant = make.tenant(prop)
     make.lease(prop, tenant, start=date(2024, 1, 1), end=date(2024, 9, 10), rent="1000.00")
     make.lease(prop, make.tenant(prop, name="Sam Second"), start=date(2024, 1, 1), end=date(2025, 6, 30), rent="800.00")
     make.lease(prop, make.tenant(prop, name="Old Olga"), start=date(2022, 1, 1), end=date(2023, 12, 31), rent="500.00")
     make.payment(tenant, date(2024, 8, 3), "1000.00", method="Check")
     make.payment(tenant, date(2024, 7, 3), "1000.00", method="Zelle")
     make.expense(date(2024, 8, 5), "250.00", prop=prop, category="Repairs")
     make.expense(date(2024, 8, 9), "50.00", prop=prop, category="Cleaning")
     return prop


def test_compute_roi_without_expenses_is_zero():
     assert compute_roi(Decimal("500.00"), Decimal("0")) == Decimal("0.00")
     assert compute_roi(Decimal("150.00"), Decimal("300.00")) == Decimal("50.00")


def test_month_helpers():
     assert shift_month(2024, 1, -1) == (2023, 12)
     assert shift_month(2024, 12, 1) == (2025, 1)
     assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 3, 1))
     with pytest.raises(ValidationError):
          month_bounds(2024, 13)


def test_period_bounds():
     assert period_bounds("last_month", date(2024, 1, 15)) == (date(2023, 12, 1), date(2024, 1, 1))
     assert period_bounds("this_year", TODAY) == (date(2024, 1, 1), date(2025, 1, 1))
     assert period_bounds("all_time", TODAY) == (None, None)
     with pytest.raises(ValidationError):
          period_bounds("fortnight", TODAY)


def test_dashboard(db, portfolio, alice):
     stats = ReportService(db, alice.id, TODAY).dashboard()

     assert stats["total_properties"] == 1
     assert stats["total_tenants"] == 3
     assert stats["active_tenants"] == 2
     assert stats["active_leases"] == 2
     assert stats["monthly_rent"] == Decimal("1800.00")
     assert stats["monthly_expenses"] == Decimal("300.00")
     assert stats["expiring_leases"] == 1


def test_dashboard_of_other_owner_is_empty(db, portfolio, bob):
     stats = ReportService(db, bob.id, TODAY).dashboard()

     assert stats["total_properties"] == 0
     assert stats["monthly_rent"] == Decimal("0.00")


def test_financial_summary_this_month(db, portfolio, alice):
     report = ReportService(db, alice.id, TODAY).financial_summary("this_month")

     assert report["start_date"] == date(2024, 8, 1)
     assert report["end_date"] == date(2024, 8, 31)
     assert report["total_income"] == Decimal("1000.00")
     assert report["total_expenses"] == Decimal("300.00")
     assert report["net_profit"] == Decimal("700.00")
     assert report["roi"] == Decimal("233.33")
     assert [c["category"] for c in report["expenses_by_category"]] == ["Cleaning", "Repairs"]
     assert report["properties"][0]["income"] == Decimal("1000.00")


def test_financial_summary_all_time(db, portfolio, alice):
     report = ReportService(db, alice.id, TODAY).financial_summary("all_time")

     assert report["start_date"] is None
     assert report["total_income"] == Decimal("2000.00")


def test_payment_summary_with_no_payments(db, portfolio, alice):
     summary = ReportService(db, alice.id, TODAY).payment_summary(month=2, year=2024)

     assert summary["collected_total"] == Decimal("0.00")
     assert summary["payment_count"] == 0
     assert summary["outstanding"] == summary["expected_total"]
     assert summary["payment_methods"] == []


def test_payment_summary_groups_methods(db, portfolio, alice):
     summary = ReportService(db, alice.id, TODAY).payment_summary()

     assert (summary["month"], summary["year"]) == (8, 2024)
     assert summary["collected_total"] == Decimal("1000.00")
     assert summary["outstanding"] == Decimal("800.00")
     assert summary["payment_methods"] == [
          {"payment_method": "Check", "total": Decimal("1000.00"), "count": 1},
     ]


def test_report_endpoints_use_camel_case(client, alice):
     headers = bearer(alice)

     dashboard = client.get("/api/dashboard", headers=headers)
     assert dashboard.status_code == 200
     assert dashboard.json()["totalProperties"] == 0

     report = client.get("/api/reports?period=all_time", headers=headers)
     assert report.status_code == 200
     assert Decimal(report.json()["roi"]) == Decimal("0")

     summary = client.get("/api/payments/summary?month=1&year=2024", headers=headers)
     assert summary.status_code == 200
     assert summary.json()["paymentCount"] == 0

     assert client.get("/api/reports?period=forever", headers=headers).status_code == 400
