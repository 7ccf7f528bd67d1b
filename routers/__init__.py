# routers/__init__.py
from . import (
     auth,
     companies,
     expense_categories,
     expenses,
     leases,
     owners,
     properties,
     rent_payments,
     reports,
     tenants,
)

__all__ = [
     "auth",
     "companies",
     "expense_categories",
     "expenses",
     "leases",
     "owners",
     "properties",
     "rent_payments",
     "reports",
     "tenants",
]
