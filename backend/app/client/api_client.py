import logging
from typing import Any

import httpx

from .session_store import MemorySessionStore, Session, SessionStore

logger = logging.getLogger(__name__)


class JobBoardAPIError(RuntimeError):
    def __init__(self, *, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(r: httpx.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return r.text or r.reason_phrase
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return r.reason_phrase


class JobBoardClient:
    """
    Thin synchronous client for the job board API.

    Pass either `base_url` or a ready `http_client` (any httpx.Client, including
    FastAPI's TestClient). The session is read from `store` once at start-up and
    written back every time it changes.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        store: SessionStore | None = None,
        timeout_s: float = 10.0,
    ):
        if http_client is None:
            if not base_url:
                raise ValueError("base_url or http_client is required")
            http_client = httpx.Client(base_url=base_url, timeout=timeout_s)
        self._http = http_client
        self._store = store or MemorySessionStore()
        self.session: Session | None = self._store.get()

    # -------------------- session --------------------

    @property
    def user(self) -> dict[str, Any] | None:
        return self.session.user if self.session else None

    def _remember(self, token: str, user: dict[str, Any]) -> None:
        self.session = Session(token=token, user=user)
        self._store.set(self.session)

    def logout(self) -> None:
        self.session = None
        self._store.clear()

    # -------------------- transport --------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        headers = dict(kwargs.pop("headers", None) or {})
        if self.session:
            headers["Authorization"] = f"Bearer {self.session.token}"
        r = self._http.request(method, path, headers=headers, **kwargs)
        if r.status_code >= 400:
            message = _error_message(r)
            logger.debug("%s %s -> %s: %s", method, path, r.status_code, message)
            raise JobBoardAPIError(status_code=r.status_code, message=message)
        return r.json()

    # -------------------- auth / profile --------------------

    def signup(self, **fields: Any) -> dict[str, Any]:
        data = self._request("POST", "/auth/signup", json=fields)
        self._remember(data["token"], data["user"])
        return data["user"]

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self._remember(data["token"], data["user"])
        return data["user"]

    def get_profile(self) -> dict[str, Any]:
        return self._request("GET", "/profile")["user"]

    def update_profile(self, **fields: Any) -> dict[str, Any]:
        user = self._request("PUT", "/profile", json=fields)["user"]
        if self.session:
            self._remember(self.session.token, {**self.session.user, **user})
        return user

    # -------------------- jobs / applications --------------------

    def list_jobs(
        self,
        *,
        search: str | None = None,
        location: str | None = None,
        seeker_id: str | None = None,
    ) -> list[dict[str, Any]]:
        params = {k: v for k, v in {"search": search, "location": location, "seekerId": seeker_id}.items() if v}
        return self._request("GET", "/jobs", params=params)["jobs"]

    def create_job(self, **fields: Any) -> dict[str, Any]:
        """Returns {"job": ..., "matches": [...]}."""
        return self._request("POST", "/jobs", json=fields)

    def employer_jobs(self) -> list[dict[str, Any]]:
        return self._request("GET", "/employer/jobs")["jobs"]

    def list_applications(self) -> list[dict[str, Any]]:
        return self._request("GET", "/applications")["applications"]

    def apply(self, job_id: str, message: str) -> dict[str, Any]:
        return self._request("POST", "/applications", json={"jobId": job_id, "message": message})["application"]

    def admin_overview(self, *, limit: int | None = None) -> dict[str, Any]:
        params = {"limit": limit} if limit else None
        return self._request("GET", "/admin/overview", params=params)
