"""Nike+ activity client package."""

from .errors import (
    LoginError,
    NikePlusAPIError,
    NikePlusError,
    ResponseDecodeError,
    TokenError,
)
from .models import Activities, Activity
from .nike_api import NikePlusClient
from .nike_client import NikeSession, ParameterBag

__all__ = [
    "Activities",
    "Activity",
    "LoginError",
    "NikePlusAPIError",
    "NikePlusClient",
    "NikePlusError",
    "NikeSession",
    "ParameterBag",
    "ResponseDecodeError",
    "TokenError",
]
