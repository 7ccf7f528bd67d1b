# services/crud_service.py
"""
CRUD Service - owner-scoped create/read/update/delete for every entity.

CrudService holds the flow shared by all entity kinds:

- list:   ownership_filter() in the WHERE clause, never filtered in Python
- get:    NotFound / Forbidden / row
- create: every referenced parent must be accessible, else Forbidden
- update: the row and any new parents are checked before a column changes
- delete: same check as update; entities with dependents refuse deletion

Subclasses name the model, its parent references and the extra rules of
their entity.
"""
import logging
from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from auth import Identity
from errors import Conflict, Forbidden, ValidationError
from models import Company, Expense, ExpenseCategory, Lease, Property, RentPayment, Tenant
from services.access_service import EntityKind, ownership_filter, require_accessible, require_parent
from services.dates import month_bounds
from storage import BlobStore

logger = logging.getLogger(__name__)


class CrudService:
     """Generic owner-scoped CRUD over one model."""

     kind: EntityKind
     model = None
     # column -> kind of the row it references
     parents: Dict[str, EntityKind] = {}
     # relationships loaded with list results
     load_options = ()
     order_by = ()

     def __init__(self, db: Session, identity: Identity):
          self.db = db
          self.identity = identity

     @property
     def owner_id(self) -> int:
          return self.identity.owner_id

     # ------------------------------------------------------------------
     # Reads
     # ------------------------------------------------------------------

     def query(self):
          query = self.db.query(self.model).filter(ownership_filter(self.kind, self.owner_id))
          if self.load_options:
               query = query.options(*[selectinload(rel) for rel in self.load_options])
          return query

     def list(self, **filters) -> list:
          query = self.apply_filters(self.query(), **filters)
          return query.order_by(*self.order_by).all()

     def apply_filters(self, query, **filters):
          for column, value in filters.items():
               if value is not None:
                    query = query.filter(getattr(self.model, column) == value)
          return query

     def get(self, entity_id: int):
          return require_accessible(self.db, self.owner_id, self.kind, entity_id)

     # ------------------------------------------------------------------
     # Writes
     # ------------------------------------------------------------------

     def create(self, data: BaseModel):
          values = data.model_dump()
          self.validate(values)
          self.check_parents(values)
          row = self.model(**self.prepare_create(values))
          self.db.add(row)
          self.db.commit()
          self.db.refresh(row)
          logger.info("Owner %s created %s %s", self.owner_id, self.kind.value, row.id)
          return row

     def update(self, entity_id: int, data: BaseModel):
          row = self.get(entity_id)
          self.check_writable(row)
          values = data.model_dump()
          self.validate(values)
          changed_parents = {
               column: values.get(column)
               for column in self.parents
               if values.get(column) != getattr(row, column)
          }
          self.check_parents(changed_parents)
          for column, value in self.prepare_update(row, values).items():
               setattr(row, column, value)
          self.db.commit()
          self.db.refresh(row)
          return row

     def delete(self, entity_id: int) -> None:
          row = self.get(entity_id)
          self.check_writable(row)
          self.check_dependents(row)
          self.before_delete(row)
          self.db.delete(row)
          self.db.commit()
          logger.info("Owner %s deleted %s %s", self.owner_id, self.kind.value, entity_id)

     # ------------------------------------------------------------------
     # Hooks
     # ------------------------------------------------------------------

     def validate(self, values: dict) -> None:
          pass

     def check_parents(self, values: dict) -> None:
          for column, kind in self.parents.items():
               if column in values:
                    require_parent(self.db, self.owner_id, kind, values[column], column)

     def check_writable(self, row) -> None:
          pass

     def prepare_create(self, values: dict) -> dict:
          return values

     def prepare_update(self, row, values: dict) -> dict:
          return values

     def dependents(self, row) -> Dict[str, int]:
          return {}

     def check_dependents(self, row) -> None:
          # No cascade across the ownership graph: refuse instead of orphaning
          blocking = {name: count for name, count in self.dependents(row).items() if count}
          if blocking:
               summary = ", ".join(f"{count} {name}" for name, count in blocking.items())
               raise Conflict(f"{self.kind.label} {row.id} still has {summary}; remove them first")

     def before_delete(self, row) -> None:
          pass

     def _count(self, column, value) -> int:
          return self.db.query(func.count()).filter(column == value).scalar() or 0


class CompanyService(CrudService):
     kind = EntityKind.COMPANY
     model = Company
     load_options = (Company.properties,)
     order_by = (Company.name,)

     def prepare_create(self, values: dict) -> dict:
          return {**values, "owner_id": self.owner_id}

     def dependents(self, row) -> Dict[str, int]:
          return {
               "properties": self._count(Property.company_id, row.id),
               "expenses": self._count(Expense.company_id, row.id),
          }


class PropertyService(CrudService):
     kind = EntityKind.PROPERTY
     model = Property
     parents = {"company_id": EntityKind.COMPANY}
     load_options = (Property.company,)
     order_by = (Property.created_at.desc(), Property.id.desc())

     def prepare_create(self, values: dict) -> dict:
          return {**values, "owner_id": self.owner_id}

     def prepare_update(self, row, values: dict) -> dict:
          if values.get("company_id") is None and row.owner_id is None:
               # Dropping the company would orphan a company-only property
               values = {**values, "owner_id": self.owner_id}
          return values

     def dependents(self, row) -> Dict[str, int]:
          return {
               "tenants": self._count(Tenant.property_id, row.id),
               "leases": self._count(Lease.property_id, row.id),
               "expenses": self._count(Expense.property_id, row.id),
          }


class TenantService(CrudService):
     kind = EntityKind.TENANT
     model = Tenant
     parents = {"property_id": EntityKind.PROPERTY}
     load_options = (Tenant.property,)
     order_by = (Tenant.created_at.desc(), Tenant.id.desc())

     def dependents(self, row) -> Dict[str, int]:
          return {
               "leases": self._count(Lease.tenant_id, row.id),
               "rent payments": self._count(RentPayment.tenant_id, row.id),
          }


class LeaseService(CrudService):
     kind = EntityKind.LEASE
     model = Lease
     parents = {"property_id": EntityKind.PROPERTY, "tenant_id": EntityKind.TENANT}
     load_options = (Lease.tenant, Lease.property)
     order_by = (Lease.start_date.desc(), Lease.id.desc())

     def __init__(self, db: Session, identity: Identity, store: Optional[BlobStore] = None):
          super().__init__(db, identity)
          self.store = store

     def list(self, active_only: bool = False, today: Optional[date] = None, **filters) -> list:
          query = self.apply_filters(self.query(), **filters)
          if active_only:
               query = query.filter(Lease.end_date >= (today or date.today()))
          return query.order_by(*self.order_by).all()

     def before_delete(self, row) -> None:
          if not row.document_filename:
               return
          if self.store is None:
               logger.warning("Lease %s deleted without a document store; %s left behind", row.id, row.document_filename)
               return
          try:
               self.store.delete_if_exists(row.document_filename)
          except Exception:
               # The lease row is deleted regardless
               logger.exception("Failed to delete document %s of lease %s", row.document_filename, row.id)


class ExpenseService(CrudService):
     kind = EntityKind.EXPENSE
     model = Expense
     parents = {"property_id": EntityKind.PROPERTY, "company_id": EntityKind.COMPANY}
     load_options = (Expense.property, Expense.company)
     order_by = (Expense.date.desc(), Expense.id.desc())

     def validate(self, values: dict) -> None:
          if values.get("property_id") is None and values.get("company_id") is None:
               raise ValidationError("An expense needs a property_id or a company_id")

     def list(
          self,
          start_date: Optional[date] = None,
          end_date: Optional[date] = None,
          category: Optional[str] = None,
          **filters,
     ) -> list:
          query = self.apply_filters(self.query(), category=category, **filters)
          if start_date is not None:
               query = query.filter(Expense.date >= start_date)
          if end_date is not None:
               query = query.filter(Expense.date <= end_date)
          return query.order_by(*self.order_by).all()


class RentPaymentService(CrudService):
     kind = EntityKind.RENT_PAYMENT
     model = RentPayment
     parents = {"tenant_id": EntityKind.TENANT}
     load_options = (RentPayment.tenant,)
     order_by = (RentPayment.payment_date.desc(), RentPayment.id.desc())

     def list(self, month: Optional[int] = None, year: Optional[int] = None, **filters) -> list:
          query = self.apply_filters(self.query(), **filters)
          if month is not None and year is not None:
               first_day, next_first = month_bounds(year, month)
               query = query.filter(
                    RentPayment.payment_date >= first_day,
                    RentPayment.payment_date < next_first,
               )
          elif month is not None or year is not None:
               raise ValidationError("month and year must be given together")
          return query.order_by(*self.order_by).all()


class ExpenseCategoryService(CrudService):
     """Shared categories (owner_id NULL) are readable by all, editable by admins."""
     kind = EntityKind.EXPENSE_CATEGORY
     model = ExpenseCategory
     order_by = (ExpenseCategory.name,)

     def validate(self, values: dict) -> None:
          name = values["name"].strip()
          if not name:
               raise ValidationError("Category name is required")
          values["name"] = name

     def check_unique_name(self, name: str, exclude_id: Optional[int] = None) -> None:
          query = self.query().filter(func.lower(ExpenseCategory.name) == name.lower())
          if exclude_id is not None:
               query = query.filter(ExpenseCategory.id != exclude_id)
          if query.first() is not None:
               raise Conflict(f"Expense category '{name}' already exists")

     def prepare_create(self, values: dict) -> dict:
          self.check_unique_name(values["name"])
          return {**values, "owner_id": self.owner_id}

     def prepare_update(self, row, values: dict) -> dict:
          self.check_unique_name(values["name"], exclude_id=row.id)
          return values

     def check_writable(self, row) -> None:
          if row.owner_id is None and not self.identity.is_admin:
               raise Forbidden("Shared expense categories can only be changed by an admin")
