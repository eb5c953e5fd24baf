import logging
from datetime import timedelta, datetime
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette import status

from photobooth.config.settings import settings
from photobooth.crud.admin import get_admin_id
from photobooth.db.session import get_db
from photobooth.schemas.user import Identity, TokenData

logger = logging.getLogger(__name__)

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.JWT_ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = 1440
bearer_scheme = HTTPBearer(auto_error=False)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def decode_identity(token: Optional[str]) -> Identity:
    """Identity carried by a wallet token; anything unusable means not connected."""
    if not token:
        return Identity.disconnected()
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        token_data = TokenData(**payload)
    except (JWTError, ValidationError) as e:
        logger.info(f"Rejected identity token: {e}")
        return Identity.disconnected()
    if not token_data.email:
        return Identity.disconnected()
    return Identity.connected_as(token_data.email)

async def get_identity(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Identity:
    return decode_identity(credentials.credentials if credentials else None)

def require_connected(identity: Identity = Depends(get_identity)) -> Identity:
    if not identity.connected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Wallet identity is not connected",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity

def require_admin_id(
        identity: Identity = Depends(require_connected),
        db: Session = Depends(get_db)
) -> int:
    admin_id = get_admin_id(db, identity.email)
    if admin_id is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="No admin registered for this identity")
    return admin_id
