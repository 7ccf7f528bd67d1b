# models/__init__.py
from .base import Base
from .owner import Owner
from .company import Company
from .property import Property
from .tenant import Tenant
from .lease import Lease
from .expense import Expense
from .rent_payment import RentPayment
from .expense_category import ExpenseCategory

__all__ = [
     "Base",
     "Owner",
     "Company",
     "Property",
     "Tenant",
     "Lease",
     "Expense",
     "RentPayment",
     "ExpenseCategory",
]
