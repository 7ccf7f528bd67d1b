# schemas/property.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .common import OptionalText, OptionalId


class PropertyBase(BaseModel):
     address1: str = Field(..., min_length=1, max_length=500)
     city: OptionalText = None
     state: OptionalText = None
     zip: OptionalText = None
     type: str = Field(..., min_length=1, max_length=100)
     status: str = Field(default="available", max_length=50)
     notes: OptionalText = None
     company_id: OptionalId = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "address1": "12 Harbor St",
                    "city": "Portland",
                    "state": "ME",
                    "zip": "04101",
                    "type": "Single Family",
                    "status": "available",
                    "company_id": 1
               }
          }
     )


class PropertyCreate(PropertyBase):
     pass


class PropertyUpdate(PropertyBase):
     pass


class PropertyResponse(PropertyBase):
     id: int
     owner_id: Optional[int] = None
     company_name: Optional[str] = None
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
