# models/expense_category.py
from sqlalchemy import Column, Integer, String, ForeignKey
from .base import Base, CreatedAtMixin


class ExpenseCategory(CreatedAtMixin, Base):
     """
     Expense category. Rows with owner_id NULL are shared defaults.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(100), nullable=False)
     owner_id = Column(Integer, ForeignKey("owners.id"), nullable=True, index=True)

     @property
     def is_shared(self) -> bool:
          return self.owner_id is None

     def __repr__(self):
          return f"<ExpenseCategory(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
