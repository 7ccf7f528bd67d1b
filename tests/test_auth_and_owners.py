import pytest

from errors import Conflict, ValidationError
from models import ExpenseCategory, Owner
from services.owner_service import OwnerService
from tests.conftest import bearer


def test_login_returns_token(client, alice):
     response = client.post("/api/auth/login", json={"email": "ALICE@example.com", "password": "password123"})

     assert response.status_code == 200
     body = response.json()
     assert body["owner"]["id"] == alice.id
     me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
     assert me.json()["email"] == "alice@example.com"


def test_login_records_last_login(client, db, alice):
     client.post("/api/auth/login", json={"email": "alice@example.com", "password": "password123"})

     assert db.get(Owner, alice.id).last_login is not None


def test_login_with_wrong_password(client, alice):
     response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope"})

     assert response.status_code == 401
     assert response.json() == {"error": "Invalid credentials"}


def test_create_owner_rules(db, alice):
     with pytest.raises(Conflict):
          OwnerService.create_owner(db, " Alice@Example.com ", "another-pass", "Alice Again")
     with pytest.raises(ValidationError):
          OwnerService.create_owner(db, "carol@example.com", "", "Carol")

     carol = OwnerService.create_owner(db, "Carol@Example.com", "password123", " Carol ")
     assert (carol.email, carol.name) == ("carol@example.com", "Carol")


def test_owner_admin_routes_need_admin(client, alice):
     assert client.get("/api/owners", headers=bearer(alice)).status_code == 403


def test_admin_manages_owners(client, db, admin, alice):
     created = client.post(
          "/api/owners",
          json={"email": "dave@example.com", "password": "password123", "name": "Dave"},
          headers=bearer(admin),
     )
     assert created.status_code == 201
     assert "password_hash" not in created.json()

     emails = [o["email"] for o in client.get("/api/owners", headers=bearer(admin)).json()]
     assert emails == ["admin@example.com", "alice@example.com", "dave@example.com"]

     duplicate = client.post(
          "/api/owners",
          json={"email": "dave@example.com", "password": "password123", "name": "Dave"},
          headers=bearer(admin),
     )
     assert duplicate.status_code == 409

     deleted = client.delete(f"/api/owners/{created.json()['id']}", headers=bearer(admin))
     assert deleted.status_code == 200
     assert db.query(Owner).filter(Owner.email == "dave@example.com").count() == 0


def test_owner_with_properties_cannot_be_deleted(client, make, admin, alice):
     make.property(owner=alice)

     assert client.delete(f"/api/owners/{alice.id}", headers=bearer(admin)).status_code == 409
     assert client.delete(f"/api/owners/{admin.id}", headers=bearer(admin)).status_code == 400


def test_deleting_owner_removes_private_categories(client, db, make, admin, alice):
     make.category("Pool Service", owner=alice)
     shared = make.category("Utilities")

     response = client.delete(f"/api/owners/{alice.id}", headers=bearer(admin))

     assert response.status_code == 200
     assert db.query(Owner).filter(Owner.id == alice.id).count() == 0
     assert db.query(ExpenseCategory).filter(ExpenseCategory.owner_id == alice.id).count() == 0
     assert db.get(ExpenseCategory, shared.id) is not None
