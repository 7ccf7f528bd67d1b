# services/report_service.py
"""
Report Service - owner-scoped dashboard counts and financial summaries.

Every figure is computed in SQL over the same ownership_filter() used by the
CRUD endpoints. Sums come back as Decimal and are quantized to cents; no
float arithmetic touches money.
"""
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session

from models import Expense, Lease, Property, RentPayment, Tenant
from services.access_service import EntityKind, ownership_filter
from services.dates import month_bounds, period_bounds

CENT = Decimal("0.01")
EXPIRING_WINDOW_DAYS = 30


def to_money(value) -> Decimal:
     """Normalize a SQL aggregate (None, int, Decimal) to a 2-place Decimal."""
     if value is None:
          return Decimal("0.00")
     return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_roi(net_profit: Decimal, total_expenses: Decimal) -> Decimal:
     """ROI as a percentage of expenses; 0 when there were no expenses."""
     if not total_expenses:
          return Decimal("0.00")
     return (Decimal(net_profit) / Decimal(total_expenses) * 100).quantize(CENT, rounding=ROUND_HALF_UP)


def _in_range(column, start: Optional[date], end: Optional[date]) -> list:
     clauses = []
     if start is not None:
          clauses.append(column >= start)
     if end is not None:
          clauses.append(column < end)
     return clauses


class ReportService:
     """Read-only aggregates for one owner."""

     def __init__(self, db: Session, owner_id: int, today: Optional[date] = None):
          self.db = db
          self.owner_id = owner_id
          self.today = today or date.today()

     def _active_leases(self):
          return (
               self.db.query(Lease)
               .filter(ownership_filter(EntityKind.LEASE, self.owner_id), Lease.end_date >= self.today)
          )

     def expected_monthly_rent(self) -> Decimal:
          total = self._active_leases().with_entities(func.sum(Lease.rent)).scalar()
          return to_money(total)

     def income(self, start: Optional[date] = None, end: Optional[date] = None) -> Decimal:
          total = (
               self.db.query(func.sum(RentPayment.amount))
               .filter(ownership_filter(EntityKind.RENT_PAYMENT, self.owner_id),
                       *_in_range(RentPayment.payment_date, start, end))
               .scalar()
          )
          return to_money(total)

     def expenses(self, start: Optional[date] = None, end: Optional[date] = None) -> Decimal:
          total = (
               self.db.query(func.sum(Expense.amount))
               .filter(ownership_filter(EntityKind.EXPENSE, self.owner_id),
                       *_in_range(Expense.date, start, end))
               .scalar()
          )
          return to_money(total)

     # ------------------------------------------------------------------
     # Dashboard
     # ------------------------------------------------------------------

     def dashboard(self) -> dict:
          total_properties = (
               self.db.query(func.count(Property.id))
               .filter(ownership_filter(EntityKind.PROPERTY, self.owner_id))
               .scalar()
          )
          total_tenants = (
               self.db.query(func.count(Tenant.id))
               .filter(ownership_filter(EntityKind.TENANT, self.owner_id))
               .scalar()
          )
          active_tenants = self._active_leases().with_entities(func.count(distinct(Lease.tenant_id))).scalar()
          active_leases = self._active_leases().with_entities(func.count(Lease.id)).scalar()
          expiring_leases = (
               self._active_leases()
               .filter(Lease.end_date <= self.today + timedelta(days=EXPIRING_WINDOW_DAYS))
               .with_entities(func.count(Lease.id))
               .scalar()
          )
          month_start, next_month = month_bounds(self.today.year, self.today.month)
          return {
               "total_properties": total_properties or 0,
               "total_tenants": total_tenants or 0,
               "active_tenants": active_tenants or 0,
               "active_leases": active_leases or 0,
               "monthly_rent": self.expected_monthly_rent(),
               "monthly_expenses": self.expenses(month_start, next_month),
               "expiring_leases": expiring_leases or 0,
          }

     # ------------------------------------------------------------------
     # Financial report
     # ------------------------------------------------------------------

     def financial_summary(self, period: str = "this_month") -> dict:
          start, end = period_bounds(period, self.today)
          total_income = self.income(start, end)
          total_expenses = self.expenses(start, end)
          net_profit = total_income - total_expenses
          return {
               "period": period,
               "start_date": start,
               "end_date": end - timedelta(days=1) if end else None,
               "total_income": total_income,
               "total_expenses": total_expenses,
               "net_profit": net_profit,
               "roi": compute_roi(net_profit, total_expenses),
               "expenses_by_category": self._expenses_by_category(start, end),
               "properties": self._property_breakdown(start, end),
          }

     def _expenses_by_category(self, start, end) -> list:
          rows = (
               self.db.query(Expense.category, func.sum(Expense.amount), func.count(Expense.id))
               .filter(ownership_filter(EntityKind.EXPENSE, self.owner_id), *_in_range(Expense.date, start, end))
               .group_by(Expense.category)
               .order_by(Expense.category)
               .all()
          )
          return [
               {"category": category, "total": to_money(total), "count": count}
               for category, total, count in rows
          ]

     def _property_breakdown(self, start, end) -> list:
          properties = (
               self.db.query(Property)
               .filter(ownership_filter(EntityKind.PROPERTY, self.owner_id))
               .order_by(Property.address1)
               .all()
          )
          income_rows = dict(
               self.db.query(Tenant.property_id, func.sum(RentPayment.amount))
               .select_from(RentPayment)
               .join(Tenant, RentPayment.tenant_id == Tenant.id)
               .filter(ownership_filter(EntityKind.RENT_PAYMENT, self.owner_id),
                       *_in_range(RentPayment.payment_date, start, end))
               .group_by(Tenant.property_id)
               .all()
          )
          expense_rows = dict(
               self.db.query(Expense.property_id, func.sum(Expense.amount))
               .filter(ownership_filter(EntityKind.EXPENSE, self.owner_id),
                       Expense.property_id.isnot(None),
                       *_in_range(Expense.date, start, end))
               .group_by(Expense.property_id)
               .all()
          )
          breakdown = []
          for prop in properties:
               income = to_money(income_rows.get(prop.id))
               spent = to_money(expense_rows.get(prop.id))
               breakdown.append({
                    "property_id": prop.id,
                    "property_address": prop.full_address,
                    "income": income,
                    "expenses": spent,
                    "net_profit": income - spent,
               })
          return breakdown

     # ------------------------------------------------------------------
     # Rent collection
     # ------------------------------------------------------------------

     def payment_summary(self, month: Optional[int] = None, year: Optional[int] = None) -> dict:
          month = month or self.today.month
          year = year or self.today.year
          first_day, next_first = month_bounds(year, month)
          in_month = (
               ownership_filter(EntityKind.RENT_PAYMENT, self.owner_id),
               RentPayment.payment_date >= first_day,
               RentPayment.payment_date < next_first,
          )
          collected, count = (
               self.db.query(func.sum(RentPayment.amount), func.count(RentPayment.id))
               .filter(*in_month)
               .one()
          )
          methods = (
               self.db.query(RentPayment.payment_method, func.sum(RentPayment.amount), func.count(RentPayment.id))
               .filter(*in_month)
               .group_by(RentPayment.payment_method)
               .order_by(RentPayment.payment_method)
               .all()
          )
          expected_total = self.expected_monthly_rent()
          collected_total = to_money(collected)
          return {
               "month": month,
               "year": year,
               "expected_total": expected_total,
               "collected_total": collected_total,
               "payment_count": count or 0,
               "outstanding": expected_total - collected_total,
               "payment_methods": [
                    {"payment_method": method, "total": to_money(total), "count": n}
                    for method, total, n in methods
               ],
          }
