# schemas/company.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .common import OptionalText


class CompanyBase(BaseModel):
     name: str = Field(..., min_length=1, max_length=255)
     notes: OptionalText = None


class CompanyCreate(CompanyBase):
     pass


class CompanyUpdate(CompanyBase):
     pass


class CompanyResponse(CompanyBase):
     id: int
     owner_id: int
     created_at: Optional[datetime] = None
     property_count: int = 0

     model_config = ConfigDict(from_attributes=True)
