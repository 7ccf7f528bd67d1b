# schemas/report.py
"""
Pydantic schemas for dashboard and report responses.

These keep the camelCase keys the dashboard front end reads.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DashboardResponse(CamelModel):
     total_properties: int
     total_tenants: int
     active_tenants: int
     active_leases: int
     monthly_rent: Decimal
     monthly_expenses: Decimal
     expiring_leases: int


class CategoryTotal(CamelModel):
     category: str
     total: Decimal
     count: int


class PropertyFinancials(CamelModel):
     property_id: int
     property_address: Optional[str] = None
     income: Decimal
     expenses: Decimal
     net_profit: Decimal


class FinancialReportResponse(CamelModel):
     period: str
     start_date: Optional[date] = None
     end_date: Optional[date] = None
     total_income: Decimal
     total_expenses: Decimal
     net_profit: Decimal
     roi: Decimal
     expenses_by_category: List[CategoryTotal] = []
     properties: List[PropertyFinancials] = []


class PaymentMethodTotal(CamelModel):
     payment_method: str
     total: Decimal
     count: int


class PaymentSummaryResponse(CamelModel):
     month: int
     year: int
     expected_total: Decimal
     collected_total: Decimal
     payment_count: int
     outstanding: Decimal
     payment_methods: List[PaymentMethodTotal] = []


class UnpaidMonthResponse(CamelModel):
     tenant_id: int
     tenant_name: str
     tenant_phone: Optional[str] = None
     tenant_email: Optional[str] = None
     property_id: int
     property_address: Optional[str] = None
     lease_id: int
     period: str
     month_label: str
     expected_rent: Decimal
     amount_paid: Decimal
     amount_due: Decimal
     status: str


class UnpaidRentReportResponse(CamelModel):
     as_of: date
     count: int
     total_due: Decimal
     items: List[UnpaidMonthResponse]
