import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt truncates at 72 bytes; longer inputs are rejected instead of silently cut.
_BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Salted bcrypt hash of `password`, returned as text for the users.password column."""
    if not password:
        raise ValueError("Password is required")

    pw_bytes = password.encode("utf-8")
    if len(pw_bytes) > _BCRYPT_MAX_BYTES:
        raise ValueError("Password must be 72 bytes or less")

    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    if not password or not hashed:
        return False
    pw_bytes = password.encode("utf-8")
    if len(pw_bytes) > _BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash (e.g. a hand-inserted row).
        logger.warning("Stored password hash is malformed")
        return False
