# schemas/__init__.py
from .owner import LoginRequest, LoginResponse, OwnerCreate, OwnerResponse
from .company import CompanyCreate, CompanyUpdate, CompanyResponse
from .property import PropertyCreate, PropertyUpdate, PropertyResponse
from .tenant import TenantCreate, TenantUpdate, TenantResponse
from .lease import LeaseCreate, LeaseUpdate, LeaseResponse, LeaseDocumentResponse
from .expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from .rent_payment import RentPaymentCreate, RentPaymentUpdate, RentPaymentResponse
from .expense_category import ExpenseCategoryCreate, ExpenseCategoryUpdate, ExpenseCategoryResponse

__all__ = [
     "LoginRequest",
     "LoginResponse",
     "OwnerCreate",
     "OwnerResponse",
     "CompanyCreate",
     "CompanyUpdate",
     "CompanyResponse",
     "PropertyCreate",
     "PropertyUpdate",
     "PropertyResponse",
     "TenantCreate",
     "TenantUpdate",
     "TenantResponse",
     "LeaseCreate",
     "LeaseUpdate",
     "LeaseResponse",
     "LeaseDocumentResponse",
     "ExpenseCreate",
     "ExpenseUpdate",
     "ExpenseResponse",
     "RentPaymentCreate",
     "RentPaymentUpdate",
     "RentPaymentResponse",
     "ExpenseCategoryCreate",
     "ExpenseCategoryUpdate",
     "ExpenseCategoryResponse",
]
