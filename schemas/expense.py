# schemas/expense.py
import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .common import PositiveMoney, OptionalId


class ExpenseBase(BaseModel):
     date: dt.date
     property_id: OptionalId = None
     company_id: OptionalId = None
     category: str = Field(..., min_length=1, max_length=100)
     amount: PositiveMoney
     description: str = Field(..., min_length=1, max_length=500)


class ExpenseCreate(ExpenseBase):
     pass


class ExpenseUpdate(ExpenseBase):
     pass


class ExpenseResponse(ExpenseBase):
     id: int
     property_address: Optional[str] = None
     company_name: Optional[str] = None
     created_at: Optional[dt.datetime] = None

     model_config = ConfigDict(from_attributes=True)
