from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from ..services.projections import user_public
from ..utils.dependencies import Principal
from ..utils.error_handlers import NotFoundError, get_error_message, handle_database_error
from ..utils.roles import any_authenticated
from ..utils.validation import validate_skills, validate_string_field

router = APIRouter(prefix="/profile", tags=["Profile"])


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    skills: list[str] | None = None
    experience: str | None = None
    preferred_role: str | None = Field(default=None, alias="preferredRole")
    preferred_location: str | None = Field(default=None, alias="preferredLocation")


def _load_self(db: Session, user: Principal) -> User:
    row = db.get(User, user.user_id)
    if row is None:
        raise NotFoundError(get_error_message("user_not_found"))
    return row


@router.get("")
def get_profile(db: Session = Depends(get_db), user: Principal = Depends(any_authenticated)):
    return {"user": user_public(_load_self(db, user))}


@router.put("")
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    user: Principal = Depends(any_authenticated),
):
    row = _load_self(db, user)

    # Only fields present in the body are written; explicit nulls are ignored.
    provided = payload.model_fields_set
    if "name" in provided and payload.name is not None:
        row.name = validate_string_field(payload.name, "name", min_length=1, max_length=255)
    if "skills" in provided and payload.skills is not None:
        row.skill_list = validate_skills(payload.skills)
    if "experience" in provided and payload.experience is not None:
        row.experience = validate_string_field(payload.experience, "experience", max_length=5000, required=False)
    if "preferred_role" in provided and payload.preferred_role is not None:
        row.preferred_role = validate_string_field(
            payload.preferred_role, "preferredRole", max_length=255, required=False
        )
    if "preferred_location" in provided and payload.preferred_location is not None:
        row.preferred_location = validate_string_field(
            payload.preferred_location, "preferredLocation", max_length=255, required=False
        )

    try:
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        raise handle_database_error(e, "updating profile")

    return {"user": user_public(row)}
