"""
Where a client keeps its login between runs.

A store is loaded once when the client starts and written whenever the session
changes (login, signup, profile update) or cleared on logout.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


@dataclass
class Session:
    token: str
    user: dict[str, Any] = field(default_factory=dict)


class SessionStore(Protocol):
    def get(self) -> Session | None: ...

    def set(self, session: Session) -> None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    def __init__(self, session: Session | None = None):
        self._session = session

    def get(self) -> Session | None:
        return self._session

    def set(self, session: Session) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


class FileSessionStore:
    """JSON file holding {"token": ..., "user": {...}}."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get(self) -> Session | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return Session(token=str(data["token"]), user=dict(data.get("user") or {}))
        except (OSError, ValueError, KeyError, TypeError) as e:
            # Treat a corrupt file like no session; the next login overwrites it.
            logger.warning("Failed to parse stored session %s: %s", self.path, e)
            return None

    def set(self, session: Session) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(session), ensure_ascii=False), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
