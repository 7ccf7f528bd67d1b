# schemas/lease.py
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .common import Money, PositiveMoney, OptionalText


class LeaseBase(BaseModel):
     property_id: int = Field(..., gt=0)
     tenant_id: int = Field(..., gt=0)
     start_date: date
     end_date: date
     rent: PositiveMoney
     deposit: Optional[Money] = None
     notes: OptionalText = None

     @model_validator(mode="after")
     def check_dates(self):
          if self.end_date < self.start_date:
               raise ValueError("end_date must be on or after start_date")
          return self

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": 1,
                    "tenant_id": 1,
                    "start_date": "2026-01-01",
                    "end_date": "2026-12-31",
                    "rent": "1450.00",
                    "deposit": "1450.00"
               }
          }
     )


class LeaseCreate(LeaseBase):
     pass


class LeaseUpdate(LeaseBase):
     pass


class LeaseResponse(LeaseBase):
     id: int
     document_filename: Optional[str] = None
     document_original_name: Optional[str] = None
     document_uploaded_at: Optional[datetime] = None
     tenant_name: Optional[str] = None
     property_address: Optional[str] = None
     is_active: bool = False
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class LeaseDocumentResponse(BaseModel):
     lease_id: int
     filename: str
     original_name: Optional[str] = None
     uploaded_at: Optional[datetime] = None
     url: str
