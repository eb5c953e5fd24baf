from typing import Optional

from sqlalchemy.orm import Session
from photobooth.db.models.Admin import Admin
from photobooth.schemas.admin import Admin as AdminSchema

def get_admin_by_email(db: Session, email: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.email == email).first()

def get_admin_id(db: Session, email: Optional[str]) -> Optional[int]:
    """Admin id for an exact email match, or None when no admin has it."""
    if not email:
        return None
    admin = get_admin_by_email(db, email)
    return AdminSchema.model_validate(admin).id if admin else None
