# services/__init__.py
from .access_service import (
     EntityKind,
     ownership_filter,
     is_accessible,
     require_accessible,
     require_parent,
)
from .crud_service import (
     CrudService,
     CompanyService,
     PropertyService,
     TenantService,
     LeaseService,
     ExpenseService,
     RentPaymentService,
     ExpenseCategoryService,
)
from .lease_document_service import LeaseDocumentService
from .owner_service import OwnerService
from .report_service import ReportService, compute_roi
from .unpaid_rent_service import find_unpaid_rent

__all__ = [
     "EntityKind",
     "ownership_filter",
     "is_accessible",
     "require_accessible",
     "require_parent",
     "CrudService",
     "CompanyService",
     "PropertyService",
     "TenantService",
     "LeaseService",
     "ExpenseService",
     "RentPaymentService",
     "ExpenseCategoryService",
     "LeaseDocumentService",
     "OwnerService",
     "ReportService",
     "compute_roi",
     "find_unpaid_rent",
]
