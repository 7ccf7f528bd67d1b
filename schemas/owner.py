# schemas/owner.py
"""
Pydantic schemas for owners and the login exchange.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class LoginRequest(BaseModel):
     email: str = Field(..., min_length=3, max_length=255)
     password: str = Field(..., min_length=1)


class OwnerCreate(BaseModel):
     """Schema for an admin creating a new owner account."""
     email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
     password: str = Field(..., min_length=8, max_length=72)
     name: str = Field(..., min_length=1, max_length=255)
     is_admin: bool = False

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "email": "owner@example.com",
                    "password": "s3cret-pass",
                    "name": "Jane Owner",
                    "is_admin": False
               }
          }
     )


class OwnerResponse(BaseModel):
     id: int
     email: str
     name: str
     is_admin: bool
     created_at: Optional[datetime] = None
     last_login: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
     token: str
     owner: OwnerResponse
