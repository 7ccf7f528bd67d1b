# models/rent_payment.py
from sqlalchemy import Column, Integer, String, Numeric, Date, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class RentPayment(CreatedAtMixin, Base):
     """
     RentPayment model - money received from a tenant.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
     payment_date = Column(Date, nullable=False, index=True)
     amount = Column(Numeric(18, 2), nullable=False)
     payment_method = Column(String(50), nullable=False)  # cash, check, transfer, ...
     check_number = Column(String(100), nullable=True)
     paid_in_full = Column(Boolean, default=False, nullable=False)
     notes = Column(Text, nullable=True)

     # Relationships
     tenant = relationship("Tenant", back_populates="rent_payments")

     def __repr__(self):
          return f"<RentPayment(id={self.id}, tenant_id={self.tenant_id}, amount={self.amount})>"
