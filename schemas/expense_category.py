# schemas/expense_category.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class ExpenseCategoryCreate(BaseModel):
     name: str = Field(..., min_length=1, max_length=100)


class ExpenseCategoryUpdate(ExpenseCategoryCreate):
     pass


class ExpenseCategoryResponse(BaseModel):
     id: int
     name: str
     owner_id: Optional[int] = None
     is_shared: bool = False
     created_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
