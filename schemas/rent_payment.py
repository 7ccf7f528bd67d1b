# schemas/rent_payment.py
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .common import PositiveMoney, OptionalText


class RentPaymentBase(BaseModel):
     tenant_id: int = Field(..., gt=0)
     payment_date: date
     amount: PositiveMoney
     payment_method: str = Field(..., min_length=1, max_length=50)
     check_number: OptionalText = None
     paid_in_full: bool = False
     notes: OptionalText = None


class RentPaymentCreate(RentPaymentBase):
     pass


class RentPaymentUpdate(RentPaymentBase):
     pass


class RentPaymentResponse(RentPaymentBase):
     id: int
     tenant_name: Optional[str] = None
     tenant_phone: Optional[str] = None
     property_address: Optional[str] = None
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
