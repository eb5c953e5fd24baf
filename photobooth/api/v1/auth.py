import logging

from fastapi import APIRouter, Depends
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from photobooth.crud.admin import get_admin_id
from photobooth.db.session import get_db
from photobooth.schemas.user import Identity, Response
from photobooth.security.auth import get_identity

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/me", response_model=Response)
def get_me(
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db)
):
    try:
        admin_id = get_admin_id(db, identity.email) if identity.connected else None
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Error fetching admin info: {e}")
        return Response(
            message="Error loading identity",
            status="error",
            status_code=500
        )

    return Response(
        message="Identity resolved",
        status="success",
        status_code=200,
        data={
            "connected": identity.connected,
            "email": identity.email,
            "admin_id": admin_id,
            "is_admin": admin_id is not None,
        }
    )
