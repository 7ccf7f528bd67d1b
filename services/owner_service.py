# services/owner_service.py
"""
Owner Service - account creation, login and admin management of owners.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from auth import create_access_token, hash_password, verify_password
from errors import Conflict, NotFound, ValidationError
from models import Company, ExpenseCategory, Owner, Property

logger = logging.getLogger(__name__)


class OwnerService:
     """Service class for owner accounts."""

     @staticmethod
     def normalize_email(email: str) -> str:
          return (email or "").strip().lower()

     @staticmethod
     def get_by_email(db: Session, email: str) -> Optional[Owner]:
          return db.query(Owner).filter(func.lower(Owner.email) == OwnerService.normalize_email(email)).first()

     @staticmethod
     def create_owner(db: Session, email: str, password: str, name: str, is_admin: bool = False) -> Owner:
          """
          Create an owner account.

          Raises:
               ValidationError: missing email, password or name
               Conflict: an owner with the email already exists
          """
          email = OwnerService.normalize_email(email)
          if not email or not password or not (name or "").strip():
               raise ValidationError("email, password and name are required")
          if OwnerService.get_by_email(db, email):
               raise Conflict(f'An owner with email "{email}" already exists')

          owner = Owner(
               email=email,
               password_hash=hash_password(password),
               name=name.strip(),
               is_admin=is_admin,
          )
          db.add(owner)
          db.commit()
          db.refresh(owner)
          logger.info("Created owner %s (%s, admin=%s)", owner.id, owner.email, owner.is_admin)
          return owner

     @staticmethod
     def authenticate(db: Session, email: str, password: str) -> Optional[Owner]:
          """Return the owner when the credentials match, else None."""
          owner = OwnerService.get_by_email(db, email)
          if owner is None or not verify_password(password, owner.password_hash):
               logger.info("Failed login for %s", OwnerService.normalize_email(email))
               return None
          owner.last_login = datetime.utcnow()
          db.commit()
          return owner

     @staticmethod
     def login(db: Session, email: str, password: str) -> Optional[dict]:
          owner = OwnerService.authenticate(db, email, password)
          if owner is None:
               return None
          return {"token": create_access_token(owner.id, owner.is_admin), "owner": owner}

     @staticmethod
     def get(db: Session, owner_id: int) -> Owner:
          owner = db.get(Owner, owner_id)
          if owner is None:
               raise NotFound(f"Owner with ID {owner_id} not found")
          return owner

     @staticmethod
     def list_owners(db: Session) -> List[Owner]:
          return db.query(Owner).order_by(Owner.email).all()

     @staticmethod
     def delete_owner(db: Session, owner_id: int, acting_owner_id: int) -> None:
          """
          Delete an owner that no longer controls anything.

          The owner's private expense categories go with the account.

          Raises:
               ValidationError: an admin deleting their own account
               Conflict: the owner still has companies or properties
          """
          if owner_id == acting_owner_id:
               raise ValidationError("You cannot delete your own account")
          owner = OwnerService.get(db, owner_id)
          companies = db.query(func.count(Company.id)).filter(Company.owner_id == owner_id).scalar()
          properties = db.query(func.count(Property.id)).filter(Property.owner_id == owner_id).scalar()
          if companies or properties:
               raise Conflict(
                    f"Owner {owner_id} still has {companies} companies and {properties} properties"
               )
          categories = (
               db.query(ExpenseCategory)
               .filter(ExpenseCategory.owner_id == owner_id)
               .delete(synchronize_session=False)
          )
          db.delete(owner)
          db.commit()
          logger.info("Deleted owner %s and %s private categories", owner_id, categories)
