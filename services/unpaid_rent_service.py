# services/unpaid_rent_service.py
"""
Unpaid-rent analysis over an owner's current leases.

For every lease running today (start_date <= today <= end_date) the trailing
twelve calendar months, current month included, are compared with what the
tenant paid in each month. Months before the lease started are never
reported. Any month where the payments fall short of the rent is returned,
most recent month first and then by tenant name.
"""
from collections import defaultdict
from dataclasses import dataclass, asdict
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from models import Lease, RentPayment
from services.access_service import EntityKind, ownership_filter
from services.dates import month_label, shift_month

MONTHS_BACK = 12
NOT_PAID = "Not Paid"
PARTIAL = "Partial"

ZERO = Decimal("0.00")


@dataclass
class UnpaidMonth:
     tenant_id: int
     tenant_name: str
     tenant_phone: Optional[str]
     tenant_email: Optional[str]
     property_id: int
     property_address: Optional[str]
     lease_id: int
     year: int
     month: int
     month_label: str
     expected_rent: Decimal
     amount_paid: Decimal
     amount_due: Decimal
     status: str

     @property
     def period(self) -> str:
          return f"{self.year:04d}-{self.month:02d}"

     def to_dict(self) -> dict:
          data = asdict(self)
          data["period"] = self.period
          return data


def index_payments(payments) -> Dict[Tuple[int, int, int], Decimal]:
     """Total payments per (tenant_id, year, month) of the payment date."""
     totals: Dict[Tuple[int, int, int], Decimal] = defaultdict(lambda: ZERO)
     for payment in payments:
          key = (payment.tenant_id, payment.payment_date.year, payment.payment_date.month)
          totals[key] += Decimal(payment.amount)
     return totals


def unpaid_months_for_lease(lease: Lease, totals: Dict[Tuple[int, int, int], Decimal],
                            today: date) -> List[UnpaidMonth]:
     start_key = (lease.start_date.year, lease.start_date.month)
     rent = Decimal(lease.rent)
     tenant = lease.tenant
     rows = []
     for back in range(MONTHS_BACK):
          year, month = shift_month(today.year, today.month, -back)
          if (year, month) < start_key:
               continue
          paid = totals.get((lease.tenant_id, year, month), ZERO)
          if paid >= rent:
               continue
          rows.append(UnpaidMonth(
               tenant_id=lease.tenant_id,
               tenant_name=tenant.name if tenant else "",
               tenant_phone=tenant.phone if tenant else None,
               tenant_email=tenant.email if tenant else None,
               property_id=lease.property_id,
               property_address=lease.property.full_address if lease.property else None,
               lease_id=lease.id,
               year=year,
               month=month,
               month_label=month_label(year, month),
               expected_rent=rent,
               amount_paid=paid,
               amount_due=rent - paid,
               status=NOT_PAID if paid == 0 else PARTIAL,
          ))
     return rows


def find_unpaid_rent(db: Session, owner_id: int, today: Optional[date] = None) -> List[UnpaidMonth]:
     """
     Unpaid or partially paid months for the owner's current leases.

     Payments are loaded once for all tenants involved and indexed by
     (tenant, year, month), so each lease month is a dictionary lookup.
     """
     today = today or date.today()
     leases = (
          db.query(Lease)
          .options(joinedload(Lease.tenant), joinedload(Lease.property))
          .filter(
               ownership_filter(EntityKind.LEASE, owner_id),
               Lease.start_date <= today,
               Lease.end_date >= today,
          )
          .all()
     )
     if not leases:
          return []

     tenant_ids = {lease.tenant_id for lease in leases}
     payments = db.query(RentPayment).filter(RentPayment.tenant_id.in_(tenant_ids)).all()
     totals = index_payments(payments)

     results = []
     for lease in leases:
          results.extend(unpaid_months_for_lease(lease, totals, today))

     # Month descending, then tenant name ascending
     results.sort(key=lambda row: row.tenant_name)
     results.sort(key=lambda row: (row.year, row.month), reverse=True)
     return results
