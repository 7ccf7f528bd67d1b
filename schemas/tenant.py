# schemas/tenant.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .common import OptionalText, OptionalId


class TenantBase(BaseModel):
     name: str = Field(..., min_length=1, max_length=255)
     phone: str = Field(..., min_length=1, max_length=50)
     email: OptionalText = None
     floor: OptionalText = None
     property_id: OptionalId = None
     emergency_contact: OptionalText = None
     emergency_phone: OptionalText = None
     notes: OptionalText = None


class TenantCreate(TenantBase):
     pass


class TenantUpdate(TenantBase):
     pass


class TenantResponse(TenantBase):
     id: int
     property_address: Optional[str] = None
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
