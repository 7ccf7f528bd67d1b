# models/expense.py
from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class Expense(CreatedAtMixin, Base):
     """
     Expense model - a cost booked against a property, a company, or both.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     date = Column(Date, nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=True, index=True)
     company_id = Column(Integer, ForeignKey("companies.id"), nullable=True, index=True)
     category = Column(String(100), nullable=False)
     amount = Column(Numeric(18, 2), nullable=False)
     description = Column(String(500), nullable=False)

     # Relationships
     property = relationship("Property", back_populates="expenses")
     company = relationship("Company", back_populates="expenses")

     def __repr__(self):
          return f"<Expense(id={self.id}, amount={self.amount}, category='{self.category}')>"
