# models/company.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class Company(CreatedAtMixin, Base):
     """
     Company model - optional legal entity grouping an owner's properties.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(255), nullable=False)
     notes = Column(Text, nullable=True)
     owner_id = Column(Integer, ForeignKey("owners.id"), nullable=False, index=True)

     # Relationships
     owner = relationship("Owner", back_populates="companies")
     properties = relationship("Property", back_populates="company")
     expenses = relationship("Expense", back_populates="company")

     def __repr__(self):
          return f"<Company(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
