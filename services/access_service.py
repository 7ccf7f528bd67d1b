# services/access_service.py
"""
Ownership resolution for every owner-scoped entity.

Nothing but Owner and Company stores who controls a row directly; everything
else resolves through its foreign keys:

     Tenant / Lease      -> Property
     RentPayment         -> Tenant -> Property
     Expense             -> Company and/or Property
     Property            -> owner_id OR Company.owner_id

ownership_filter() turns that chain into a single SQL clause per entity kind.
List queries put it in their WHERE clause and the per-row checks below reuse
the same clause, so every endpoint authorizes the same way.
"""
import enum
from typing import Optional

from sqlalchemy import exists, false, or_, select
from sqlalchemy.orm import Session

from errors import Forbidden, NotFound
from models import Company, Expense, ExpenseCategory, Lease, Property, RentPayment, Tenant


class EntityKind(str, enum.Enum):
     COMPANY = "company"
     PROPERTY = "property"
     TENANT = "tenant"
     LEASE = "lease"
     EXPENSE = "expense"
     RENT_PAYMENT = "rent_payment"
     EXPENSE_CATEGORY = "expense_category"

     @property
     def label(self) -> str:
          return self.value.replace("_", " ").capitalize()


MODELS = {
     EntityKind.COMPANY: Company,
     EntityKind.PROPERTY: Property,
     EntityKind.TENANT: Tenant,
     EntityKind.LEASE: Lease,
     EntityKind.EXPENSE: Expense,
     EntityKind.RENT_PAYMENT: RentPayment,
     EntityKind.EXPENSE_CATEGORY: ExpenseCategory,
}


# ---------------------------------------------------------------------------
# Id sub-queries
# ---------------------------------------------------------------------------

def accessible_company_ids(owner_id: int):
     return select(Company.id).where(Company.owner_id == owner_id)


def accessible_property_ids(owner_id: int):
     return select(Property.id).where(
          or_(
               Property.owner_id == owner_id,
               Property.company_id.in_(accessible_company_ids(owner_id)),
          )
     )


def accessible_tenant_ids(owner_id: int):
     # NULL property_id never matches IN (...), so unassigned tenants drop out
     return select(Tenant.id).where(Tenant.property_id.in_(accessible_property_ids(owner_id)))


# ---------------------------------------------------------------------------
# Ownership predicate
# ---------------------------------------------------------------------------

def ownership_filter(kind: EntityKind, owner_id: Optional[int]):
     """
     Return the WHERE clause restricting `kind` to rows the owner controls.

     Expense access is company OR property OR the property's company; the
     property sub-query already follows Property.company_id, so two terms
     cover all three paths.
     """
     if owner_id is None:
          return false()

     if kind == EntityKind.COMPANY:
          return Company.owner_id == owner_id
     if kind == EntityKind.PROPERTY:
          return or_(
               Property.owner_id == owner_id,
               Property.company_id.in_(accessible_company_ids(owner_id)),
          )
     if kind == EntityKind.TENANT:
          return Tenant.property_id.in_(accessible_property_ids(owner_id))
     if kind == EntityKind.LEASE:
          return Lease.property_id.in_(accessible_property_ids(owner_id))
     if kind == EntityKind.EXPENSE:
          return or_(
               Expense.company_id.in_(accessible_company_ids(owner_id)),
               Expense.property_id.in_(accessible_property_ids(owner_id)),
          )
     if kind == EntityKind.RENT_PAYMENT:
          return RentPayment.tenant_id.in_(accessible_tenant_ids(owner_id))
     if kind == EntityKind.EXPENSE_CATEGORY:
          return or_(ExpenseCategory.owner_id == owner_id, ExpenseCategory.owner_id.is_(None))
     raise ValueError(f"Unknown entity kind: {kind}")


# ---------------------------------------------------------------------------
# Per-row checks
# ---------------------------------------------------------------------------

def is_accessible(db: Session, owner_id: Optional[int], kind: EntityKind, entity_id: Optional[int]) -> bool:
     """
     True when the row exists and resolves to owner_id.

     Missing ids resolve to False rather than an error. Evaluated fresh
     against the database on every call.
     """
     if entity_id is None:
          return False
     model = MODELS[kind]
     stmt = select(exists().where(model.id == entity_id, ownership_filter(kind, owner_id)))
     return bool(db.execute(stmt).scalar())


def require_accessible(db: Session, owner_id: int, kind: EntityKind, entity_id: int):
     """
     Load a row the owner controls.

     Raises:
          NotFound: no row with that id
          Forbidden: the row exists but belongs to someone else
     """
     model = MODELS[kind]
     row = (
          db.query(model)
          .filter(model.id == entity_id, ownership_filter(kind, owner_id))
          .first()
     )
     if row is not None:
          return row
     if db.query(model.id).filter(model.id == entity_id).first() is None:
          raise NotFound(f"{kind.label} with ID {entity_id} not found")
     raise Forbidden(f"You do not have access to this {kind.label.lower()}")


def require_parent(db: Session, owner_id: int, kind: EntityKind, entity_id: Optional[int], field: str) -> None:
     """
     Check a referenced parent (property_id, tenant_id, ...) before a write.

     Missing and foreign parents are both Forbidden so a write never reveals
     whether someone else's id exists.
     """
     if entity_id is None:
          return
     if not is_accessible(db, owner_id, kind, entity_id):
          raise Forbidden(f"{field} {entity_id} is not one of your {kind.label.lower()} records")
