"""
Validation utilities for input validation and error handling.
"""
import re
from typing import Any
from uuid import UUID

from ..models.user import Role
from .error_handlers import ValidationError
from .skills import clean_skills

_EMAIL_RE = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

# ADMIN accounts are provisioned out of band (see backend/seed.py).
SIGNUP_ROLES = (Role.EMPLOYER, Role.SEEKER)

MAX_MESSAGE_LENGTH = 1000


def validate_email(email: str) -> str:
    """Validate email format and return the case-folded address."""
    if not email or not isinstance(email, str):
        raise ValidationError("Email is required")

    email = email.strip().lower()
    if len(email) > 255:
        raise ValidationError("Email too long (max 255 characters)")

    if not _EMAIL_RE.match(email):
        raise ValidationError("Invalid email format")

    return email


def validate_password(password: str) -> None:
    """Validate password strength."""
    if not password or not isinstance(password, str):
        raise ValidationError("Password is required")

    if len(password) < 6:
        raise ValidationError("Password must be at least 6 characters")

    # bcrypt only looks at the first 72 bytes
    if len(password.encode("utf-8")) > 72:
        raise ValidationError("Password too long (max 72 bytes)")


def validate_string_field(
    value: Any,
    field_name: str,
    min_length: int = 1,
    max_length: int = 1000,
    required: bool = True,
) -> str | None:
    """Validate a string field with common rules."""
    if value is None:
        if required:
            raise ValidationError(f"{field_name} is required")
        return None

    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")

    value = value.strip()

    if not value:
        if required:
            raise ValidationError(f"{field_name} cannot be empty")
        # Optional fields left blank are stored as "not set".
        return None

    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")

    if len(value) > max_length:
        raise ValidationError(f"{field_name} must not exceed {max_length} characters")

    return value


def validate_role(role: str, allowed: tuple[Role, ...] = SIGNUP_ROLES) -> Role:
    """Validate user role."""
    if not role or not isinstance(role, str):
        raise ValidationError("Role is required")

    normalized = role.strip().upper()
    if normalized not in {r.value for r in allowed}:
        raise ValidationError(
            f"Invalid role. Must be one of: {', '.join(r.value for r in allowed)}"
        )

    return Role(normalized)


def validate_skills(skills: Any) -> list[str]:
    if skills is None:
        return []
    if not isinstance(skills, list) or not all(isinstance(s, str) for s in skills):
        raise ValidationError("skills must be a list of strings")
    return clean_skills(skills)


def validate_id(value: Any, field_name: str = "id") -> str:
    """Ids are UUID strings; returns the canonical lower-case form."""
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field_name} is required")
    try:
        return str(UUID(value.strip()))
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid id")


def validate_message(message: Any) -> str:
    return validate_string_field(message, "message", min_length=1, max_length=MAX_MESSAGE_LENGTH)
