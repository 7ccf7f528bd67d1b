# models/owner.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from .base import Base, CreatedAtMixin


class Owner(CreatedAtMixin, Base):
     """
     Owner model - the authenticated account every other record resolves to.
     Owners are created by an admin, never by self-registration.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password_hash = Column(String(255), nullable=False)
     name = Column(String(255), nullable=False)
     is_admin = Column(Boolean, default=False, nullable=False)
     last_login = Column(DateTime, nullable=True)

     # Relationships
     companies = relationship("Company", back_populates="owner")
     properties = relationship("Property", back_populates="owner")

     def __repr__(self):
          return f"<Owner(id={self.id}, email='{self.email}', is_admin={self.is_admin})>"
