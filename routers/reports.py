# routers/reports.py
"""
Dashboard and report routes. All figures are scoped to the caller.
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from auth import Identity, get_identity
from database import get_session
from schemas.report import (
     DashboardResponse,
     FinancialReportResponse,
     PaymentSummaryResponse,
     UnpaidRentReportResponse,
)
from services.dates import PERIODS
from services.report_service import ReportService, to_money
from services.unpaid_rent_service import find_unpaid_rent

router = APIRouter(tags=["reports"])


@router.get("/api/dashboard", response_model=DashboardResponse, summary="Dashboard counters")
def get_dashboard(
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """
     Property, tenant and lease counts, expected monthly rent, this month's
     expenses and leases expiring in the next 30 days.
     """
     return ReportService(db, identity.owner_id).dashboard()


@router.get("/api/reports", response_model=FinancialReportResponse, summary="Financial summary")
def get_financial_report(
     period: str = Query("this_month", description=f"One of: {', '.join(PERIODS)}"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """
     Income, expenses, net profit and ROI for a period.

     ROI = net profit / total expenses x 100, reported as 0 when there were
     no expenses.
     """
     return ReportService(db, identity.owner_id).financial_summary(period)


@router.get("/api/reports/unpaid-rent", response_model=UnpaidRentReportResponse, summary="Unpaid rent")
def get_unpaid_rent(
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     """
     Months in the last twelve where a current lease was not fully paid,
     most recent first.
     """
     today = date.today()
     rows = find_unpaid_rent(db, identity.owner_id, today)
     return {
          "as_of": today,
          "count": len(rows),
          "total_due": to_money(sum(row.amount_due for row in rows)),
          "items": [row.to_dict() for row in rows],
     }


@router.get("/api/payments/summary", response_model=PaymentSummaryResponse, summary="Rent collection summary")
def get_payment_summary(
     month: Optional[int] = Query(None, ge=1, le=12, description="Defaults to the current month"),
     year: Optional[int] = Query(None, ge=1900, le=9999, description="Defaults to the current year"),
     db: Session = Depends(get_session),
     identity: Identity = Depends(get_identity),
):
     return ReportService(db, identity.owner_id).payment_summary(month, year)
