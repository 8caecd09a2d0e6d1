"""Read operations for the ``/me/sport/activities`` resources."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeAlias, Union
from urllib.parse import quote, urlencode

import requests

from ..config import NIKEPLUS_API_BASE_URL, REQUEST_TIMEOUT
from ..models import Activities, Activity
from .query import ACCESS_TOKEN_PARAM, ParameterBag, build_query
from .response_handling import decode_response
from .session import NikeSession

LOGGER = logging.getLogger(__name__)

ACTIVITIES_PATH = "/me/sport/activities"

Params: TypeAlias = Optional[Union[ParameterBag, Mapping[str, Any]]]

__all__ = [
    "ACTIVITIES_PATH",
    "get_activities",
    "get_activities_by_type",
    "get_activity_details",
]


def _get(session: NikeSession, url: str) -> requests.Response:
    return session.http.get(
        url,
        headers={"Accept": "application/json"},
        timeout=REQUEST_TIMEOUT,
    )


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def get_activity_details(session: NikeSession, activity_id: str) -> Activity:
    """Fetch a single activity by id."""

    token_query = urlencode({ACCESS_TOKEN_PARAM: session.access_token})
    url = (
        f"{NIKEPLUS_API_BASE_URL}{ACTIVITIES_PATH}/{_segment(activity_id)}"
        f"?{token_query}"
    )
    LOGGER.debug("Fetching activity details id=%s", activity_id)
    return decode_response(_get(session, url), Activity)


def _list_activities(session: NikeSession, path: str, params: Params) -> Activities:
    query = build_query(session.access_token, params)
    url = f"{NIKEPLUS_API_BASE_URL}{path}?{query}"
    activities = decode_response(_get(session, url), Activities)
    LOGGER.debug("Fetched %s activities from %s", len(activities), path)
    return activities


def get_activities(session: NikeSession, params: Params = None) -> Activities:
    """Fetch one page of the user's activities."""

    return _list_activities(session, ACTIVITIES_PATH, params)


def get_activities_by_type(
    session: NikeSession, activity_type: str, params: Params = None
) -> Activities:
    """Fetch one page of the user's activities of ``activity_type`` (e.g. ``RUN``)."""

    path = f"{ACTIVITIES_PATH}/{_segment(activity_type)}"
    return _list_activities(session, path, params)
