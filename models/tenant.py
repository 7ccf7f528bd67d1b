# models/tenant.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class Tenant(CreatedAtMixin, Base):
     """
     Tenant model - a person renting a property.

     Tenants carry no owner column; they belong to whoever owns their property.
     A tenant without a property is not visible to any owner.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=True, index=True)

     # Personal info
     name = Column(String(255), nullable=False)
     phone = Column(String(50), nullable=False)
     email = Column(String(255), nullable=True)
     floor = Column(String(100), nullable=True)

     # Emergency contact
     emergency_contact = Column(String(255), nullable=True)
     emergency_phone = Column(String(50), nullable=True)

     notes = Column(Text, nullable=True)

     # Relationships
     property = relationship("Property", back_populates="tenants")
     leases = relationship("Lease", back_populates="tenant")
     rent_payments = relationship("RentPayment", back_populates="tenant")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}')>"
