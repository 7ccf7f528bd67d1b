# models/lease.py
from datetime import date
from typing import Optional

from sqlalchemy import Column, Integer, String, Numeric, Date, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class Lease(CreatedAtMixin, Base):
     """
     Lease model - rental agreement between a tenant and a property.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
     tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)

     # Lease period
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False, index=True)

     # Pricing
     rent = Column(Numeric(18, 2), nullable=False)
     deposit = Column(Numeric(18, 2), nullable=True)

     # Signed lease document (blob name + name as uploaded)
     document_filename = Column(String(500), nullable=True)
     document_original_name = Column(String(500), nullable=True)
     document_uploaded_at = Column(DateTime, nullable=True)

     notes = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="leases")
     tenant = relationship("Tenant", back_populates="leases")

     def __repr__(self):
          return f"<Lease(id={self.id}, tenant_id={self.tenant_id}, property_id={self.property_id})>"

     def active_on(self, today: Optional[date] = None) -> bool:
          """Active leases end today or later."""
          return self.end_date >= (today or date.today())
