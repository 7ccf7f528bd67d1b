"""
Shared fixtures: an in-memory SQLite database, an in-memory document store
and bearer tokens for a few owners.
"""
import os
import tempfile
from datetime import date
from decimal import Decimal

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RUN_MIGRATIONS"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="lease-documents-")
os.environ.pop("AZURE_STORAGE_CONNECTION_STRING", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from auth import Identity, create_access_token, hash_password  # noqa: E402
from database import get_session  # noqa: E402
from main import app  # noqa: E402
from models import (  # noqa: E402
     Base,
     Company,
     Expense,
     ExpenseCategory,
     Lease,
     Owner,
     Property,
     RentPayment,
     Tenant,
)
from storage import BlobStore, get_storage  # noqa: E402


class MemoryStore(BlobStore):
     def __init__(self):
          self.blobs = {}

     def put(self, name, data, content_type):
          self.blobs[name] = (data, content_type)
          return self.url_for(name)

     def delete_if_exists(self, name):
          return self.blobs.pop(name, None) is not None

     def url_for(self, name):
          return f"memory://documents/{name}"


class FailingStore(BlobStore):
     def put(self, name, data, content_type):
          raise IOError("storage unavailable")

     def delete_if_exists(self, name):
          raise IOError("storage unavailable")

     def url_for(self, name):
          return f"memory://documents/{name}"


@pytest.fixture
def engine():
     engine = create_engine(
          "sqlite://",
          connect_args={"check_same_thread": False},
          poolclass=StaticPool,
     )
     Base.metadata.create_all(engine)
     yield engine
     Base.metadata.drop_all(engine)
     engine.dispose()


@pytest.fixture
def db(engine):
     session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
     yield session
     session.close()


@pytest.fixture
def store():
     return MemoryStore()


@pytest.fixture
def client(db, store):
     def _session():
          yield db

     app.dependency_overrides[get_session] = _session
     app.dependency_overrides[get_storage] = lambda: store
     yield TestClient(app)
     app.dependency_overrides.clear()


class Factory:
     """Inserts rows directly, bypassing the API."""

     def __init__(self, db):
          self.db = db

     def _save(self, row):
          self.db.add(row)
          self.db.commit()
          self.db.refresh(row)
          return row

     def owner(self, email, name=None, is_admin=False, password="password123"):
          return self._save(Owner(
               email=email,
               name=name or email.split("@")[0].title(),
               password_hash=hash_password(password),
               is_admin=is_admin,
          ))

     def company(self, owner, name="Acme Holdings"):
          return self._save(Company(name=name, owner_id=owner.id))

     def property(self, owner=None, company=None, address1="12 Elm St"):
          return self._save(Property(
               address1=address1,
               city="Springfield",
               state="IL",
               zip="62701",
               type="Single Family",
               owner_id=owner.id if owner else None,
               company_id=company.id if company else None,
          ))

     def tenant(self, prop=None, name="Pat Renter", phone="555-0100"):
          return self._save(Tenant(
               name=name,
               phone=phone,
               email=f"{name.split()[0].lower()}@example.com",
               property_id=prop.id if prop else None,
          ))

     def lease(self, prop, tenant, start=date(2024, 3, 1), end=date(2024, 12, 31), rent="1000.00", **extra):
          return self._save(Lease(
               property_id=prop.id,
               tenant_id=tenant.id,
               start_date=start,
               end_date=end,
               rent=Decimal(rent),
               **extra,
          ))

     def payment(self, tenant, paid_on, amount, method="Check"):
          return self._save(RentPayment(
               tenant_id=tenant.id,
               payment_date=paid_on,
               amount=Decimal(amount),
               payment_method=method,
          ))

     def expense(self, spent_on, amount, prop=None, company=None, category="Repairs"):
          return self._save(Expense(
               date=spent_on,
               amount=Decimal(amount),
               category=category,
               description=f"{category} work",
               property_id=prop.id if prop else None,
               company_id=company.id if company else None,
          ))

     def category(self, name, owner=None):
          return self._save(ExpenseCategory(name=name, owner_id=owner.id if owner else None))


@pytest.fixture
def make(db):
     return Factory(db)


@pytest.fixture
def alice(make):
     return make.owner("alice@example.com", "Alice")


@pytest.fixture
def bob(make):
     return make.owner("bob@example.com", "Bob")


@pytest.fixture
def admin(make):
     return make.owner("admin@example.com", "Admin", is_admin=True)


def bearer(owner) -> dict:
     return {"Authorization": f"Bearer {create_access_token(owner.id, owner.is_admin)}"}


def identity(owner) -> Identity:
     return Identity(owner_id=owner.id, is_admin=owner.is_admin)
