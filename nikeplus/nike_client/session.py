"""HTTP session factory and per-user session state for Nike+ calls."""

from __future__ import annotations

from dataclasses import dataclass, field

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from requests.cookies import RequestsCookieJar
from urllib3.util.retry import Retry

from ..config import HTTP_POOL_CONNECTIONS, HTTP_POOL_MAXSIZE

__all__ = ["NikeSession", "create_default_session", "mask_email", "mask_tail"]


def _build_retry() -> Retry:
    # Failures surface to the caller on the first attempt.
    return Retry(total=0, read=False)


def create_default_session() -> Session:
    session = requests.Session()
    adapter = HTTPAdapter(
        pool_connections=HTTP_POOL_CONNECTIONS,
        pool_maxsize=HTTP_POOL_MAXSIZE,
        max_retries=_build_retry(),
    )
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    # Accept is set per request: the login form post must not ask for JSON.
    session.headers.update({"Accept-Encoding": "gzip, deflate"})
    return session


def mask_tail(value: str | None, visible: int = 4) -> str:
    """Mask all but the last ``visible`` characters of a secret for logging."""

    if not value:
        return ""
    tail = value[-visible:]
    return f"****{tail}" if len(value) > visible else "****" + tail


def mask_email(value: str | None) -> str:
    """Keep the first character of the local part and the domain of an email."""

    if not value:
        return ""
    local, sep, domain = value.partition("@")
    if not sep:
        return "****"
    return f"{local[:1]}****@{domain}"


@dataclass
class NikeSession:
    """State for one authenticated Nike+ user.

    ``http`` owns the cookie jar that carries the portal session after
    ``login``; ``access_token`` is filled by ``ask_access_token`` (or supplied
    up front when a token is already known). Use one instance per concurrent
    user session.
    """

    access_token: str = ""
    http: Session = field(default_factory=create_default_session)

    @property
    def cookies(self) -> RequestsCookieJar:
        return self.http.cookies

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)

    def __repr__(self) -> str:
        return f"NikeSession(access_token={mask_tail(self.access_token)!r})"

    def close(self) -> None:
        self.http.close()
