"""Nike+ client façade: one object per user session.

Public surface:
- NikePlusClient(access_token="").login(email, password)
- NikePlusClient.ask_access_token()
- NikePlusClient.get_activity_details(activity_id)
- NikePlusClient.get_activities(params=None)
- NikePlusClient.get_activities_by_type(activity_type, params=None)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests

from .models import Activities, Activity
from .nike_client import activities as _activities
from .nike_client import auth as _auth
from .nike_client.query import ParameterBag, build_request_params
from .nike_client.session import NikeSession, create_default_session

__all__ = ["NikePlusClient"]


class NikePlusClient:
    """Facade bundling a ``NikeSession`` with the Nike+ operations.

    Pass ``access_token`` to skip the login handshake when a token is already
    known. Instances are not safe to share between threads; create one per
    concurrent session.
    """

    def __init__(
        self,
        access_token: str = "",
        *,
        http_session: requests.Session | None = None,
    ) -> None:
        if http_session is None:
            http_session = create_default_session()
        self._session = NikeSession(access_token=access_token, http=http_session)

    @property
    def session(self) -> NikeSession:
        return self._session

    @property
    def access_token(self) -> str:
        return self._session.access_token

    def login(self, email: str, password: str) -> None:
        _auth.login(self._session, email, password)

    def ask_access_token(self) -> str:
        return _auth.ask_access_token(self._session)

    def build_request_params(
        self, params: Optional[ParameterBag | Mapping[str, Any]] = None
    ) -> Dict[str, str]:
        return build_request_params(self._session.access_token, params)

    def get_activity_details(self, activity_id: str) -> Activity:
        return _activities.get_activity_details(self._session, activity_id)

    def get_activities(
        self, params: Optional[ParameterBag | Mapping[str, Any]] = None
    ) -> Activities:
        return _activities.get_activities(self._session, params)

    def get_activities_by_type(
        self,
        activity_type: str,
        params: Optional[ParameterBag | Mapping[str, Any]] = None,
    ) -> Activities:
        return _activities.get_activities_by_type(
            self._session, activity_type, params
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "NikePlusClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
