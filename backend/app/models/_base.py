from datetime import datetime, timezone
from uuid import uuid4


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    # Python-side default keeps sub-second ordering on SQLite (server now() is per second).
    return datetime.now(timezone.utc)
