import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from ..services.projections import user_public
from ..utils.error_handlers import (
    AuthError,
    ValidationError,
    get_error_message,
    handle_database_error,
)
from ..utils.jwt import create_access_token
from ..utils.security import hash_password, verify_password
from ..utils.validation import (
    validate_email,
    validate_password,
    validate_role,
    validate_skills,
    validate_string_field,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


class SignupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None  # EMPLOYER / SEEKER
    skills: list[str] | None = None
    experience: str | None = None
    preferred_role: str | None = Field(default=None, alias="preferredRole")
    preferred_location: str | None = Field(default=None, alias="preferredLocation")


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


def _session_payload(user: User) -> dict:
    token = create_access_token({"sub": user.id, "role": user.role})
    return {"token": token, "user": user_public(user)}


@router.post("/signup")
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    name = validate_string_field(payload.name, "name", min_length=1, max_length=255)
    email = validate_email(payload.email)
    validate_password(payload.password)
    role = validate_role(payload.role)
    skills = validate_skills(payload.skills)

    existing = db.query(User.id).filter(User.email == email).first()
    if existing:
        raise ValidationError(get_error_message("email_exists"))

    user = User(
        name=name,
        email=email,
        password=hash_password(payload.password),
        role=role.value,
        experience=validate_string_field(payload.experience, "experience", max_length=5000, required=False),
        preferred_role=validate_string_field(payload.preferred_role, "preferredRole", max_length=255, required=False),
        preferred_location=validate_string_field(
            payload.preferred_location, "preferredLocation", max_length=255, required=False
        ),
    )
    user.skill_list = skills
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        # A concurrent signup with the same email trips the unique index.
        raise handle_database_error(e, "creating user", conflict_message=get_error_message("email_exists"))

    logger.info("User %s signed up as %s", user.id, user.role)
    return _session_payload(user)


@router.post("/login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    email = validate_email(payload.email)
    if not payload.password:
        raise ValidationError("Password is required")

    user = db.query(User).filter(User.email == email).first()

    # Same answer for unknown email and wrong password.
    if not user or not verify_password(payload.password, user.password):
        logger.info("Failed login attempt")
        raise AuthError(get_error_message("invalid_credentials"))

    return _session_payload(user)
