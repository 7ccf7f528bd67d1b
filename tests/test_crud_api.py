from datetime import date
from decimal import Decimal

from models import Company, Lease, Property
from tests.conftest import bearer


def test_requests_without_token_are_rejected(client):
     response = client.get("/api/properties")
     assert response.status_code == 401
     assert response.json() == {"error": "Missing token"}


def test_requests_with_bad_token_are_rejected(client):
     response = client.get("/api/properties", headers={"Authorization": "Bearer not-a-jwt"})
     assert response.status_code == 403


def test_unknown_route(client):
     response = client.get("/api/nothing-here")
     assert response.status_code == 404
     assert response.json() == {"error": "Route not found"}


def test_company_create_is_owned_by_caller(client, db, alice):
     response = client.post("/api/companies", json={"name": "Alice Rentals"}, headers=bearer(alice))

     assert response.status_code == 201
     body = response.json()
     assert body["owner_id"] == alice.id
     assert db.get(Company, body["id"]).owner_id == alice.id


def test_round_trip_company_property_tenant(client, alice, bob):
     headers = bearer(alice)
     company = client.post("/api/companies", json={"name": "Alice Rentals"}, headers=headers).json()
     prop = client.post(
          "/api/properties",
          json={"address1": "1 Main St", "type": "Duplex", "company_id": company["id"]},
          headers=headers,
     ).json()
     tenant = client.post(
          "/api/tenants",
          json={"name": "Terry Tenant", "phone": "555-0101", "property_id": prop["id"]},
          headers=headers,
     ).json()

     for path in (
          f"/api/companies/{company['id']}",
          f"/api/properties/{prop['id']}",
          f"/api/tenants/{tenant['id']}",
     ):
          assert client.get(path, headers=headers).status_code == 200
          assert client.get(path, headers=bearer(bob)).status_code == 403


def test_list_only_returns_own_rows(client, make, alice, bob):
     make.property(owner=alice, address1="1 Alice Way")
     make.property(owner=bob, address1="9 Bob Blvd")

     response = client.get("/api/properties", headers=bearer(alice))

     assert response.status_code == 200
     assert [p["address1"] for p in response.json()] == ["1 Alice Way"]


def test_create_property_under_foreign_company_is_forbidden(client, db, make, alice, bob):
     company = make.company(bob)

     response = client.post(
          "/api/properties",
          json={"address1": "5 Sneaky Ln", "type": "Condo", "company_id": company.id},
          headers=bearer(alice),
     )

     assert response.status_code == 403
     assert db.query(Property).count() == 0


def test_create_lease_on_foreign_property_creates_nothing(client, db, make, alice, bob):
     prop = make.property(owner=bob)
     tenant = make.tenant(make.property(owner=alice))

     response = client.post(
          "/api/leases",
          json={
               "property_id": prop.id,
               "tenant_id": tenant.id,
               "start_date": "2024-01-01",
               "end_date": "2024-12-31",
               "rent": "1200.00",
          },
          headers=bearer(alice),
     )

     assert response.status_code == 403
     assert "error" in response.json()
     assert db.query(Lease).count() == 0


def test_lease_dates_must_be_ordered(client, make, alice):
     prop = make.property(owner=alice)
     tenant = make.tenant(prop)

     response = client.post(
          "/api/leases",
          json={
               "property_id": prop.id,
               "tenant_id": tenant.id,
               "start_date": "2024-12-31",
               "end_date": "2024-01-01",
               "rent": "1200.00",
          },
          headers=bearer(alice),
     )

     assert response.status_code == 400
     assert response.json()["error"] == "Validation failed"


def test_update_and_delete_of_foreign_rows(client, make, alice, bob):
     prop = make.property(owner=bob)
     payload = {"address1": "Hijacked", "type": "Condo"}

     assert client.put(f"/api/properties/{prop.id}", json=payload, headers=bearer(alice)).status_code == 403
     assert client.delete(f"/api/properties/{prop.id}", headers=bearer(alice)).status_code == 403

     missing = client.delete("/api/properties/999", headers=bearer(alice))
     assert missing.status_code == 404
     assert missing.json() == {"error": "Property with ID 999 not found"}


def test_moving_tenant_to_foreign_property_is_forbidden(client, make, alice, bob):
     tenant = make.tenant(make.property(owner=alice))
     foreign = make.property(owner=bob)

     response = client.put(
          f"/api/tenants/{tenant.id}",
          json={"name": tenant.name, "phone": tenant.phone, "property_id": foreign.id},
          headers=bearer(alice),
     )

     assert response.status_code == 403


def test_delete_with_dependents_conflicts(client, db, make, alice):
     company = make.company(alice)
     make.property(company=company)

     response = client.delete(f"/api/companies/{company.id}", headers=bearer(alice))

     assert response.status_code == 409
     assert db.get(Company, company.id) is not None


def test_delete_property_without_dependents(client, db, make, alice):
     prop = make.property(owner=alice)

     response = client.delete(f"/api/properties/{prop.id}", headers=bearer(alice))

     assert response.status_code == 200
     assert response.json()["message"] == "Property deleted successfully"
     assert db.query(Property).count() == 0


def test_expense_needs_property_or_company(client, alice):
     response = client.post(
          "/api/expenses",
          json={"date": "2024-02-01", "category": "Repairs", "amount": "80.00", "description": "Faucet"},
          headers=bearer(alice),
     )

     assert response.status_code == 400
     assert response.json() == {"error": "An expense needs a property_id or a company_id"}


def test_expense_on_own_property(client, make, alice):
     prop = make.property(owner=alice)

     response = client.post(
          "/api/expenses",
          json={
               "date": "2024-02-01",
               "property_id": prop.id,
               "company_id": "",
               "category": "Repairs",
               "amount": "80.50",
               "description": "Faucet",
          },
          headers=bearer(alice),
     )

     assert response.status_code == 201
     assert response.json()["company_id"] is None
     assert Decimal(response.json()["amount"]) == Decimal("80.50")


def test_rent_payment_month_filter(client, make, alice):
     tenant = make.tenant(make.property(owner=alice))
     make.payment(tenant, date(2024, 3, 1), "500.00")
     make.payment(tenant, date(2024, 3, 31), "500.00")
     make.payment(tenant, date(2024, 4, 1), "1000.00")

     response = client.get("/api/rent-payments?month=3&year=2024", headers=bearer(alice))

     assert response.status_code == 200
     assert [p["payment_date"] for p in response.json()] == ["2024-03-31", "2024-03-01"]
     assert client.get("/api/rent-payments?month=3", headers=bearer(alice)).status_code == 400


def test_payment_for_foreign_tenant_is_forbidden(client, make, alice, bob):
     tenant = make.tenant(make.property(owner=bob))

     response = client.post(
          "/api/rent-payments",
          json={"tenant_id": tenant.id, "payment_date": "2024-03-01", "amount": "100.00", "payment_method": "Cash"},
          headers=bearer(alice),
     )

     assert response.status_code == 403


def test_shared_categories_are_admin_only(client, make, alice, admin):
     shared = make.category("Utilities")

     rename = {"name": "Utility Bills"}
     assert client.put(f"/api/expense-categories/{shared.id}", json=rename, headers=bearer(alice)).status_code == 403
     assert client.put(f"/api/expense-categories/{shared.id}", json=rename, headers=bearer(admin)).status_code == 200


def test_duplicate_category_conflicts(client, make, alice):
     make.category("Utilities")

     response = client.post("/api/expense-categories", json={"name": " utilities "}, headers=bearer(alice))

     assert response.status_code == 409


def test_renaming_category_onto_existing_name_conflicts(client, make, alice):
     make.category("Pool Service", owner=alice)
     snow = make.category("Snow Removal", owner=alice)

     taken = client.put(f"/api/expense-categories/{snow.id}", json={"name": "pool service"}, headers=bearer(alice))
     assert taken.status_code == 409

     same = client.put(f"/api/expense-categories/{snow.id}", json={"name": "SNOW REMOVAL"}, headers=bearer(alice))
     assert same.status_code == 200
     assert same.json()["name"] == "SNOW REMOVAL"
