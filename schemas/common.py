# schemas/common.py
"""
Shared pydantic types for request/response validation.
"""
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, Field, BeforeValidator

Money = Annotated[Decimal, Field(max_digits=18, decimal_places=2)]
PositiveMoney = Annotated[Decimal, Field(gt=0, max_digits=18, decimal_places=2)]


def _blank_to_none(value):
     if isinstance(value, str) and not value.strip():
          return None
     return value


# Front ends send "" for untouched optional inputs
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
OptionalId = Annotated[Optional[Annotated[int, Field(gt=0)]], BeforeValidator(_blank_to_none)]


class MessageResponse(BaseModel):
     message: str
     id: Optional[int] = None
