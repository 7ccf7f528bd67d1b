# auth.py
"""
Password hashing and bearer-token identity.

Login issues an HS256 JWT carrying the owner id and admin flag; every
protected route resolves it back to an Identity through verify_token.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from passlib.context import CryptContext

import config

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class Identity:
     owner_id: int
     is_admin: bool = False


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
     if not password or not password_hash:
          return False
     return pwd_context.verify(password, password_hash)


def create_access_token(owner_id: int, is_admin: bool) -> str:
     expires = datetime.now(timezone.utc) + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
     payload = {"sub": str(owner_id), "id": owner_id, "is_admin": bool(is_admin), "exp": expires}
     return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
     token = auth.split(" ", 1)[1]
     try:
          payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
     except JWTError:
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
     if not isinstance(payload.get("id"), int):
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
     return payload


def get_identity(token: dict = Depends(verify_token)) -> Identity:
     return Identity(owner_id=token["id"], is_admin=bool(token.get("is_admin")))


def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
     if not identity.is_admin:
          raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
     return identity
