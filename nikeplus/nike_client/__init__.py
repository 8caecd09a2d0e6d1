"""Modular Nike+ client components (session, decoding, query, auth, activities)."""

from .activities import (  # noqa: F401
    get_activities,
    get_activities_by_type,
    get_activity_details,
)
from .auth import ask_access_token, login  # noqa: F401
from .query import ParameterBag, build_query, build_request_params  # noqa: F401
from .response_handling import decode_body, decode_response  # noqa: F401
from .session import NikeSession, create_default_session  # noqa: F401
