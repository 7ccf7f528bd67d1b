# models/property.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class Property(CreatedAtMixin, Base):
     """
     Property model - a rental building or unit.

     Owned directly through owner_id, through company_id -> companies.owner_id,
     or both. Either path grants access.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Address
     address1 = Column(String(500), nullable=False)
     city = Column(String(100), nullable=True)
     state = Column(String(50), nullable=True)
     zip = Column(String(20), nullable=True)

     type = Column(String(100), nullable=False)
     status = Column(String(50), default="available", nullable=False)
     notes = Column(Text, nullable=True)

     # Ownership
     company_id = Column(Integer, ForeignKey("companies.id"), nullable=True, index=True)
     owner_id = Column(Integer, ForeignKey("owners.id"), nullable=True, index=True)

     # Relationships
     company = relationship("Company", back_populates="properties")
     owner = relationship("Owner", back_populates="properties")
     tenants = relationship("Tenant", back_populates="property")
     leases = relationship("Lease", back_populates="property")
     expenses = relationship("Expense", back_populates="property")

     @property
     def full_address(self) -> str:
          parts = [self.address1, self.city, " ".join(p for p in (self.state, self.zip) if p)]
          return ", ".join(p for p in parts if p)

     def __repr__(self):
          return f"<Property(id={self.id}, address1='{self.address1}')>"
